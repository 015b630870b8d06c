"""
Configuration for CodeLikeBasics
Reads settings from the environment, with an optional .env file
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_threshold(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")
    return value


class Config:
    """
    Runtime settings, resolved once at construction time
    """
    def __init__(self, **overrides):
        self.environment = os.environ.get('ENVIRONMENT', 'production')
        self.debug = _env_bool('DEBUG')
        self.log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
        self.api_version = os.environ.get('API_VERSION', '1.0.0')
        self.port = int(os.environ.get('PORT', 8080))

        origins = os.environ.get('ALLOWED_ORIGINS', '*')
        self.allowed_origins = [o.strip() for o in origins.split(',') if o.strip()] or ['*']

        # Per-exercise gate is strict (>), the batch gate inclusive (>=)
        self.similarity_threshold = _env_threshold('SIMILARITY_THRESHOLD', 0.7)
        self.pass_threshold = _env_threshold('PASS_THRESHOLD', 0.75)

        # Code execution proxy
        self.piston_api_url = os.environ.get('PISTON_API_URL', 'https://emkc.org/api/v2/piston/execute')
        self.code_execution_timeout = float(os.environ.get('CODE_EXECUTION_TIMEOUT', 30))
        self.code_execution_rate_limit = int(os.environ.get('CODE_EXECUTION_RATE_LIMIT', 30))
        self.rate_limit_window = int(os.environ.get('RATE_LIMIT_WINDOW', 60))

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ValueError(f"Unknown config option: {key}")
            setattr(self, key, value)

    @property
    def testing(self):
        return self.environment == 'testing'
