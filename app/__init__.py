from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from config import config, validate_config
from app.auth.session import SessionService
from app.errors import register_error_handlers
from app.extensions import cors, init_oauth, init_session_store


def create_app(config_name='default', identity_provider=None, config_overrides=None):
    # app factory
    app = Flask(__name__)

    # config load
    app.config.from_object(config[config_name])
    if config_overrides:
        app.config.update(config_overrides)
    validate_config(app.config)

    app.logger.setLevel(app.config['LOG_LEVEL'])
    # profiles are returned with the provider's key order
    app.json.sort_keys = False

    if app.config['TRUST_PROXY']:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1)

    # extensions
    cors.init_app(
        app,
        origins=[app.config['CORS_ORIGIN']],
        supports_credentials=True,
    )
    init_session_store(app)

    # services
    app.extensions['session_service'] = SessionService()
    app.extensions['identity_provider'] = identity_provider or init_oauth(app)

    # blueprints
    from app.api.auth.routes import auth_bp
    from app.api.profile.routes import profile_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)

    register_error_handlers(app)

    # checking
    @app.route('/api/health')
    def health():
        return {'status': 'ok'}, 200

    @app.route('/login-failed')
    def login_failed():
        return jsonify({'error': 'Authentication failed'}), 401

    return app
