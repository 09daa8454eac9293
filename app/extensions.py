"""Flask extensions initialization - avoids circular imports."""

from flask_cors import CORS
from flask_session import Session

from app.auth.provider import GoogleIdentityProvider
from app.auth.store import SessionStore

# Initialize extensions here (not bound to app yet)
cors = CORS()
server_session = Session()


def init_session_store(app):
    # in-process store, one per app; records live until logout or expiry
    app.config.setdefault(
        'SESSION_CACHELIB',
        SessionStore(
            default_timeout=int(app.permanent_session_lifetime.total_seconds()),
            sweep_interval=app.config['SESSION_SWEEP_INTERVAL'],
        ),
    )
    server_session.init_app(app)


def init_oauth(app):
    return GoogleIdentityProvider(
        app,
        client_id=app.config['GOOGLE_CLIENT_ID'],
        client_secret=app.config['GOOGLE_CLIENT_SECRET'],
    )
