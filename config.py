"""
Application Configuration

Centralizes all Flask and prep engine configuration settings.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    JSON_SORT_KEYS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Rounding applied once, when a result leaves the engine
    DISPLAY_PRECISION = int(os.environ.get('DISPLAY_PRECISION', 2))

    # Prep time heuristic (minutes per consolidated prep task)
    PREP_MINUTES_PER_TASK = float(os.environ.get('PREP_MINUTES_PER_TASK', 5))

    # NZ GST on purchase estimates
    GST_RATE = float(os.environ.get('GST_RATE', 0.15))

    # Density name matching: 'longest' (exact, then longest overlapping name)
    # or 'first' (legacy first-match-wins substring search)
    DENSITY_MATCH_POLICY = os.environ.get('DENSITY_MATCH_POLICY', 'longest')

    # Upper bound on guests for a single prep list request
    MAX_GUEST_COUNT = int(os.environ.get('MAX_GUEST_COUNT', 100000))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    LOG_LEVEL = 'WARNING'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
