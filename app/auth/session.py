"""Session service holding the authenticated identity."""

import logging

from flask import current_app, session

from app.auth.codec import DecodeError, ProfileCodec

logger = logging.getLogger(__name__)

IDENTITY_KEY = "identity"


class SessionService:
    """Reads and writes the single identity attached to the current session.

    One instance is built per application and stored in
    ``app.extensions["session_service"]``. The session itself is the Flask
    session for the active request, backed by Flask-Session.
    """

    def __init__(self, codec=None):
        self.codec = codec or ProfileCodec()

    def current_profile(self):
        """Return the session's Profile, or None when the session is anonymous."""
        stored = session.get(IDENTITY_KEY)
        if stored is None:
            return None
        try:
            return self.codec.decode(stored)
        except DecodeError as e:
            logger.warning("Ignoring undecodable session identity: %s", e)
            return None

    def is_authenticated(self):
        return self.current_profile() is not None

    def establish(self, profile):
        """Replace whatever the session held with this identity."""
        session.clear()
        session[IDENTITY_KEY] = self.codec.encode(profile)
        session.permanent = True
        # new session id on login; the pre-login record is deleted
        current_app.session_interface.regenerate(session)

    def clear(self):
        session.pop(IDENTITY_KEY, None)
        session.clear()
