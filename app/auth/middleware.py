"""Session gate for routes that need a signed-in user."""

from functools import wraps

from flask import current_app, g, jsonify


def get_session_service():
    return current_app.extensions["session_service"]


def is_authenticated():
    """True when the current request's session carries an identity."""
    return get_session_service().is_authenticated()


def auth_required(fn):
    """Reject anonymous requests with 401; otherwise expose ``g.profile``."""

    @wraps(fn)
    def _wrapped(*args, **kwargs):
        profile = get_session_service().current_profile()
        if profile is None:
            return jsonify({"error": "User not authenticated"}), 401

        g.profile = profile
        return fn(*args, **kwargs)

    return _wrapped
