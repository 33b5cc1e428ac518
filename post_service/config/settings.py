"""
Configuration settings for the Post GraphQL service
Loads from environment variables (and an optional .env file) with sensible defaults
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env values never override variables already set in the environment
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


def _env_port(default: int = 5000) -> int:
    """Read PORT, tolerating an empty or malformed value"""
    value = os.getenv('PORT', '').strip()
    if value.isdigit():
        return int(value)
    return default


# ============================================
# BASE CONFIGURATION
# ============================================

class Config:
    """Base configuration"""

    # Flask
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    DEBUG = _env_flag('DEBUG', 'False')
    TESTING = _env_flag('TESTING', 'False')
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Server
    SERVER_HOST = os.getenv('SERVER_HOST', '0.0.0.0')
    SERVER_PORT = _env_port()

    # Paths
    BASE_DIR = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR = os.getenv('LOGS_DIR', str(BASE_DIR / 'logs'))

    # ============================================
    # CORS
    # ============================================

    CORS_ORIGINS = os.getenv(
        'CORS_ORIGINS',
        'http://localhost:3000,http://localhost:3001'
    ).split(',')

    # ============================================
    # LOGGING
    # ============================================

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.getenv('LOG_FORMAT', 'json')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', 'False')
    LOG_FILE = os.getenv('LOG_FILE', os.path.join(LOGS_DIR, 'app.log'))
    LOG_MAX_BYTES = int(os.getenv('LOG_MAX_BYTES', 10485760))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv('LOG_BACKUP_COUNT', 5))

    # ============================================
    # MONITORING
    # ============================================

    PROMETHEUS_ENABLED = _env_flag('PROMETHEUS_ENABLED', 'True')

    # ============================================
    # DATA
    # ============================================

    PRELOAD_FIXTURES = _env_flag('PRELOAD_FIXTURES', 'True')


class DevelopmentConfig(Config):
    """Development configuration"""
    FLASK_ENV = 'development'
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'
    LOG_FORMAT = 'text'


class TestingConfig(Config):
    """Testing configuration"""
    FLASK_ENV = 'testing'
    DEBUG = True
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    LOG_TO_FILE = False
    PROMETHEUS_ENABLED = False


class ProductionConfig(Config):
    """Production configuration"""
    FLASK_ENV = 'production'
    DEBUG = False
    TESTING = False
    LOG_LEVEL = 'INFO'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
