"""Unit tests covering the Profile model and its session codec."""

import unittest

from app.auth.codec import DecodeError, ProfileCodec
from app.models import Profile


class ProfileTestCase(unittest.TestCase):
    """Profiles keep provider claims verbatim and expose common fields."""

    def test_google_claims_accessors(self):
        profile = Profile({
            "sub": "1234",
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "picture": "https://example.com/ada.png",
        })
        self.assertEqual(profile.id, "1234")
        self.assertEqual(profile.display_name, "Ada Lovelace")
        self.assertEqual(profile.email, "ada@example.com")
        self.assertEqual(profile.avatar_url, "https://example.com/ada.png")

    def test_passport_style_claims_accessors(self):
        profile = Profile({"id": "123", "displayName": "A B", "email": "a@b.com"})
        self.assertEqual(profile.id, "123")
        self.assertEqual(profile.display_name, "A B")
        self.assertIsNone(profile.avatar_url)

    def test_to_dict_is_verbatim(self):
        claims = {"z": 1, "id": "123", "nested": {"k": [1, 2]}}
        self.assertEqual(Profile(claims).to_dict(), claims)
        self.assertEqual(list(Profile(claims).to_dict()), ["z", "id", "nested"])

    def test_profile_is_immutable(self):
        claims = {"id": "123"}
        profile = Profile(claims)
        with self.assertRaises(AttributeError):
            profile.email = "x@y.com"
        with self.assertRaises(TypeError):
            profile.claims["id"] = "456"

        claims["id"] = "changed"
        self.assertEqual(profile.id, "123")

    def test_rejects_non_mapping(self):
        with self.assertRaises(TypeError):
            Profile(["id", "123"])


class ProfileCodecTestCase(unittest.TestCase):

    def setUp(self):
        self.codec = ProfileCodec()

    def test_round_trip_keeps_claims_and_order(self):
        profile = Profile({"sub": "1", "name": "Zoë", "email_verified": True})
        encoded = self.codec.encode(profile)
        self.assertIsInstance(encoded, bytes)

        decoded = self.codec.decode(encoded)
        self.assertEqual(decoded, profile)
        self.assertEqual(list(decoded.to_dict()), ["sub", "name", "email_verified"])

    def test_decode_rejects_text(self):
        with self.assertRaises(DecodeError):
            self.codec.decode('{"id": "1"}')

    def test_decode_rejects_invalid_utf8(self):
        with self.assertRaises(DecodeError):
            self.codec.decode(b"\xff\xfe")

    def test_decode_rejects_invalid_json(self):
        with self.assertRaises(DecodeError):
            self.codec.decode(b"{not json")

    def test_decode_rejects_non_object(self):
        with self.assertRaises(DecodeError):
            self.codec.decode(b'["id", "1"]')

    def test_decode_error_is_value_error(self):
        self.assertTrue(issubclass(DecodeError, ValueError))


if __name__ == "__main__":
    unittest.main()
