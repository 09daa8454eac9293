"""Session codec for identity profiles.

Only this module knows how a profile is laid out inside the session store, so
the stored form can shrink later (for example to the id alone) without
touching any route.
"""

import json

from app.models import Profile


class DecodeError(ValueError):
    """Stored session data could not be turned back into a Profile."""


class ProfileCodec:
    """Lossless JSON encoding of a Profile's claims."""

    encoding = "utf-8"

    def encode(self, profile: Profile) -> bytes:
        return json.dumps(
            profile.to_dict(), separators=(",", ":"), ensure_ascii=False
        ).encode(self.encoding)

    def decode(self, data: bytes) -> Profile:
        if not isinstance(data, (bytes, bytearray)):
            raise DecodeError(f"expected bytes, got {type(data).__name__}")
        try:
            claims = json.loads(bytes(data).decode(self.encoding))
        except UnicodeDecodeError as e:
            raise DecodeError(f"invalid {self.encoding}: {e}") from e
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON: {e}") from e

        if not isinstance(claims, dict):
            raise DecodeError("stored profile is not a JSON object")
        return Profile(claims)
