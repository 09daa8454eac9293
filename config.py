import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


DEFAULT_CORS_ORIGIN = 'https://account.atlandrak.com'
REQUIRED_SETTINGS = ('GOOGLE_CLIENT_ID', 'GOOGLE_CLIENT_SECRET', 'SECRET_KEY')

# config key -> environment variable it is read from
ENV_NAMES = {'SECRET_KEY': 'SESSION_SECRET'}


class ConfigError(RuntimeError):
    """Raised when required settings are missing at startup."""


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration."""
    # Session signing secret (required, no fallback)
    SECRET_KEY = os.getenv('SESSION_SECRET')

    # Google OAuth client
    GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID')
    GOOGLE_CLIENT_SECRET = os.getenv('GOOGLE_CLIENT_SECRET')
    OAUTH_CALLBACK_URL = os.getenv('OAUTH_CALLBACK_URL')

    # CORS Configuration
    CORS_ORIGIN = os.getenv('CORS_ORIGIN', DEFAULT_CORS_ORIGIN)

    # Redirect targets after the provider callback
    FRONTEND_URL = os.getenv('FRONTEND_URL', CORS_ORIGIN)
    FAILURE_REDIRECT = os.getenv('FAILURE_REDIRECT', '/login-failed')

    # Server-side session store (in-process cachelib cache)
    SESSION_TYPE = 'cachelib'
    SESSION_PERMANENT = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    # 32 random bytes per session id (unsigned cookie)
    SESSION_ID_LENGTH = 32
    SESSION_SWEEP_INTERVAL = int(os.getenv('SESSION_SWEEP_INTERVAL', 60))

    TRUST_PROXY = _env_flag('TRUST_PROXY', True)
    PORT = int(os.getenv('PORT', 8080))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'test-session-secret'
    GOOGLE_CLIENT_ID = 'test-client-id.apps.googleusercontent.com'
    GOOGLE_CLIENT_SECRET = 'test-client-secret'
    OAUTH_CALLBACK_URL = None
    CORS_ORIGIN = 'http://localhost:5173'
    FRONTEND_URL = 'http://localhost:5173'
    FAILURE_REDIRECT = '/login-failed'
    TRUST_PROXY = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def validate_config(settings):
    """Raise ConfigError naming every required setting that is unset or empty."""
    missing = [
        ENV_NAMES.get(key, key) for key in REQUIRED_SETTINGS if not settings.get(key)
    ]
    if missing:
        raise ConfigError(
            "Missing required configuration: " + ", ".join(missing)
        )
