"""Google identity provider built on Authlib's Flask client."""

import requests
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.flask_client import OAuth

from app.models import Profile

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
DEFAULT_SCOPE = "profile email"


class ProviderError(Exception):
    """The provider denied consent or the code exchange failed."""


class GoogleIdentityProvider:
    """Explicitly constructed OAuth client for one Flask app.

    Each instance owns its own Authlib registry, so building several apps
    (as the tests do) never shares client credentials between them.
    """

    name = "google"

    def __init__(self, app, client_id, client_secret, scope=DEFAULT_SCOPE):
        self.scope = scope
        self._oauth = OAuth(app)
        self._client = self._oauth.register(
            name=self.name,
            client_id=client_id,
            client_secret=client_secret,
            authorize_url=GOOGLE_AUTHORIZE_URL,
            access_token_url=GOOGLE_TOKEN_URL,
            userinfo_endpoint=GOOGLE_USERINFO_URL,
            client_kwargs={"scope": scope},
        )

    def authorize_redirect(self, redirect_uri):
        """Redirect the browser to Google's consent screen."""
        return self._client.authorize_redirect(redirect_uri)

    def fetch_profile(self):
        """Exchange the callback's authorization code for the user's profile."""
        try:
            token = self._client.authorize_access_token()
            userinfo = self._client.userinfo(token=token)
        except AuthlibBaseError as e:
            raise ProviderError(f"Google authorization failed: {e}") from e
        except KeyError as e:
            # werkzeug's BadRequestKeyError when the callback has no code
            raise ProviderError(f"Missing callback parameter: {e}") from e
        except requests.RequestException as e:
            raise ProviderError(f"Network error talking to Google: {e}") from e

        return Profile(userinfo)
