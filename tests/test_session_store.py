"""Tests for the in-process session store."""

import unittest

from app import create_app
from app.auth.store import SessionStore
from fakes import FakeIdentityProvider


class FakeClock:

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class SessionStoreTestCase(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.store = SessionStore(default_timeout=60, sweep_interval=10, clock=self.clock)

    def test_set_get_delete(self):
        self.assertTrue(self.store.set("a", b"1"))
        self.assertEqual(self.store.get("a"), b"1")
        self.assertTrue(self.store.has("a"))
        self.assertTrue(self.store.delete("a"))
        self.assertIsNone(self.store.get("a"))
        self.assertFalse(self.store.delete("a"))

    def test_entries_expire_after_timeout(self):
        self.store.set("a", b"1", timeout=5)
        self.clock.now += 4
        self.assertEqual(self.store.get("a"), b"1")
        self.clock.now += 1
        self.assertIsNone(self.store.get("a"))

    def test_default_timeout_applies(self):
        self.store.set("a", b"1")
        self.clock.now += 59
        self.assertTrue(self.store.has("a"))
        self.clock.now += 1
        self.assertFalse(self.store.has("a"))

    def test_add_does_not_overwrite(self):
        self.store.set("a", b"1")
        self.assertFalse(self.store.add("a", b"2"))
        self.assertEqual(self.store.get("a"), b"1")

    def test_many_entries_never_evict_live_ones(self):
        self.store.set("user", b"identity", timeout=3600)
        for i in range(5000):
            self.store.set(f"anon-{i}", b"state", timeout=30)
        self.assertEqual(self.store.get("user"), b"identity")

    def test_sweep_drops_only_expired_entries(self):
        self.store.set("short", b"1", timeout=5)
        self.store.set("long", b"2", timeout=500)
        self.clock.now += 20
        self.store.set("trigger", b"3")

        self.assertEqual(len(self.store), 2)
        self.assertEqual(self.store.get("long"), b"2")


class AnonymousTrafficTestCase(unittest.TestCase):

    def test_anonymous_sessions_do_not_log_users_out(self):
        provider = FakeIdentityProvider()
        app = create_app("testing", identity_provider=provider)

        users = []
        for i in range(9):
            provider.claims = {"id": str(i), "email": f"user{i}@example.com"}
            client = app.test_client()
            client.get("/api/auth/google/callback?code=ok")
            users.append(client)

        for i in range(200):
            with app.test_client().session_transaction() as sess:
                sess[f"_state_google_{i}"] = {"data": {}, "exp": 0}

        codes = [client.get("/api/profile").status_code for client in users]
        self.assertEqual(codes, [200] * 9)


if __name__ == "__main__":
    unittest.main()
