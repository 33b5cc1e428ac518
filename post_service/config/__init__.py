"""
Configuration Package
Environment-driven settings and logging setup
"""

from .settings import config, Config, DevelopmentConfig, TestingConfig, ProductionConfig
from .logger import setup_logger, get_logger, LoggerMixin

__all__ = [
    'config',
    'Config',
    'DevelopmentConfig',
    'TestingConfig',
    'ProductionConfig',
    'setup_logger',
    'get_logger',
    'LoggerMixin'
]
