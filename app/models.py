"""Identity models for the account gateway."""

from collections.abc import Mapping
from types import MappingProxyType


class Profile:
    """Identity profile returned by the OAuth provider.

    The provider's claims are kept verbatim: nothing is validated, renamed or
    added. The accessors below only read the claims Google and passport-style
    profiles commonly carry.
    """

    __slots__ = ("_claims",)

    def __init__(self, claims):
        if not isinstance(claims, Mapping):
            raise TypeError("Profile claims must be a mapping.")
        object.__setattr__(self, "_claims", MappingProxyType(dict(claims)))

    def __setattr__(self, name, value):
        raise AttributeError("Profile is immutable.")

    @property
    def claims(self):
        return self._claims

    @property
    def id(self):
        return self._claims.get("sub", self._claims.get("id"))

    @property
    def display_name(self):
        return self._claims.get("name", self._claims.get("displayName"))

    @property
    def email(self):
        return self._claims.get("email")

    @property
    def avatar_url(self):
        return self._claims.get("picture")

    def to_dict(self):
        """Return the claims exactly as received, for JSON responses."""
        return dict(self._claims)

    def __eq__(self, other):
        if not isinstance(other, Profile):
            return NotImplemented
        return dict(self._claims) == dict(other._claims)

    def __hash__(self):
        return hash(self.id)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Profile id={self.id!r}>"
