"""Google sign-in, callback and logout routes."""

from flask import Blueprint, current_app, jsonify, redirect, url_for

from app.auth.provider import ProviderError

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


def _provider():
    return current_app.extensions['identity_provider']


def _sessions():
    return current_app.extensions['session_service']


@auth_bp.route('/google', methods=['GET'])
def google_login():
    """Send the browser to Google's consent screen."""
    callback_url = current_app.config.get('OAUTH_CALLBACK_URL') or url_for(
        'auth.google_callback', _external=True
    )
    return _provider().authorize_redirect(callback_url)


@auth_bp.route('/google/callback', methods=['GET'])
def google_callback():
    """
    Finish the Google flow started by /google.

    On success the provider's profile becomes the session identity and the
    browser goes back to the frontend; any denial or exchange failure sends
    it to the failure path instead.
    """
    try:
        profile = _provider().fetch_profile()
    except ProviderError as e:
        current_app.logger.warning(f"Google sign-in failed: {e}")
        return redirect(current_app.config['FAILURE_REDIRECT'])

    _sessions().establish(profile)
    current_app.logger.info(f"Authenticated user {profile.id}")

    return redirect(current_app.config['FRONTEND_URL'])


@auth_bp.route('/logout', methods=['POST'])
def logout():
    # errors from the session store go to the generic handler
    _sessions().clear()
    return jsonify({'message': 'Logged out successfully'}), 200
