"""Configuration constants and runtime profiles for the app."""
import os


def parse_timeout(raw) -> float | None:
    """Seconds as a float, None for 0 or blank. Raises ValueError when malformed."""
    raw = (raw or '').strip()
    if not raw:
        return None
    value = float(raw)
    if value < 0:
        raise ValueError(f'negative timeout: {raw}')
    return value or None


def _timeout_seconds() -> float | None:
    try:
        return parse_timeout(os.environ.get('REGISTRY_TIMEOUT_SECONDS', '0'))
    except ValueError:
        return None


class BaseConfig:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')
    REGISTRY_URL = os.environ.get('REGISTRY_URL', '').strip()
    REGISTRY_TIMEOUT_RAW = os.environ.get('REGISTRY_TIMEOUT_SECONDS', '0')
    REGISTRY_TIMEOUT_SECONDS = _timeout_seconds()
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin').strip() or 'admin'
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH', '').strip()
    ORGANIZER_NAME = os.environ.get('ORGANIZER_NAME', 'Mahatab').strip()
    STRUCTURED_LOGGING = os.environ.get('STRUCTURED_LOGGING', '1') == '1'
    SENTRY_DSN = os.environ.get('SENTRY_DSN', '').strip()
    TESTING = False
    WTF_CSRF_ENABLED = True


class DevelopmentConfig(BaseConfig):
    ENV_NAME = 'development'


class ProductionConfig(BaseConfig):
    ENV_NAME = 'production'


class TestingConfig(BaseConfig):
    ENV_NAME = 'testing'
    TESTING = True
    WTF_CSRF_ENABLED = False
    STRUCTURED_LOGGING = False
    REGISTRY_URL = 'https://registry.test/exec'


def get_config():
    env = os.environ.get('FLASK_ENV', '').strip().lower()
    if env == 'production' or os.environ.get('PRODUCTION', '').strip() == '1':
        return ProductionConfig
    return DevelopmentConfig


def validate_runtime(app_config: dict) -> None:
    """Fail fast for production misconfiguration."""
    env_name = app_config.get('ENV_NAME', 'development')
    if env_name != 'production':
        return

    secret = app_config.get('SECRET_KEY') or ''
    weak_values = {'dev-key-change-in-production', 'changeme', 'secret', 'default'}
    if len(secret) < 16 or secret.lower() in weak_values:
        raise RuntimeError('Invalid SECRET_KEY for production. Set a strong random secret.')
    if not app_config.get('REGISTRY_URL'):
        raise RuntimeError('REGISTRY_URL must point at the registration collection endpoint.')
    if not app_config.get('ADMIN_PASSWORD_HASH'):
        raise RuntimeError('ADMIN_PASSWORD_HASH is required in production.')
    try:
        parse_timeout(app_config.get('REGISTRY_TIMEOUT_RAW'))
    except ValueError as exc:
        raise RuntimeError('REGISTRY_TIMEOUT_SECONDS must be a non-negative number of seconds.') from exc


# Games offered on the signup form
GAME_OPTIONS = [
    'Valorant',
    'Counter-Strike 2',
    'League of Legends',
    'Dota 2',
    'PUBG Mobile',
    'Free Fire',
    'Other',
]

# Accepted entry-fee payment methods
PAYMENT_METHODS = ['Bkash', 'Nagad', 'Rocket']

# Players per team, player 1 is always the leader
TEAM_SIZE = 4

PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

# Shown on the form's rules card
TOURNAMENT_RULES = [
    'Teams must have exactly four players; the leader plays as Player 1.',
    'Team names are unique. Offensive names will be removed without refund.',
    'Entry fee must be paid before submitting; include the transaction ID.',
    'Use of hacks, scripts or exploits leads to immediate disqualification.',
    'Match times are final. Teams not ready 10 minutes after call time forfeit.',
    "Admin decisions on disputes are final.",
]
