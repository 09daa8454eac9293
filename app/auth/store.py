"""In-process session store that only forgets sessions when they expire."""

import threading
import time

from cachelib import BaseCache


class SessionStore(BaseCache):
    """cachelib backend for Flask-Session with no capacity pruning.

    cachelib's SimpleCache drops live entries once it passes its threshold,
    which lets anonymous sessions push signed-in users out. Here an entry
    disappears only when it is deleted or its timeout runs out; expired
    entries are swept at most once per ``sweep_interval`` seconds.
    """

    def __init__(self, default_timeout=300, sweep_interval=60, clock=time.monotonic):
        super().__init__(default_timeout=default_timeout)
        self._entries = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._next_sweep = clock() + sweep_interval

    def _expires_at(self, timeout):
        if timeout is None:
            timeout = self.default_timeout
        if timeout > 0:
            return self._clock() + timeout
        return None

    def _sweep(self, now):
        if now < self._next_sweep:
            return
        expired = [
            key for key, (expires, _) in self._entries.items()
            if expires is not None and expires <= now
        ]
        for key in expired:
            del self._entries[key]
        self._next_sweep = now + self._sweep_interval

    def get(self, key):
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires, value = entry
            if expires is not None and expires <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key, value, timeout=None):
        with self._lock:
            now = self._clock()
            self._sweep(now)
            self._entries[key] = (self._expires_at(timeout), value)
        return True

    def add(self, key, value, timeout=None):
        if self.has(key):
            return False
        return self.set(key, value, timeout)

    def delete(self, key):
        with self._lock:
            return self._entries.pop(key, None) is not None

    def has(self, key):
        return self.get(key) is not None

    def clear(self):
        with self._lock:
            self._entries.clear()
        return True

    def __len__(self):
        with self._lock:
            return len(self._entries)
