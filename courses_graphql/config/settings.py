"""
Configuration settings for the courses GraphQL service
Loads from environment variables with sensible defaults
"""

import os
from pathlib import Path

# ============================================
# BASE CONFIGURATION
# ============================================

class Config:
    """Base configuration"""

    # Flask
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = os.getenv('TESTING', 'False').lower() == 'true'
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Server
    SERVER_HOST = os.getenv('SERVER_HOST', '0.0.0.0')
    SERVER_PORT = int(os.getenv('SERVER_PORT', 3000))

    # Paths
    PACKAGE_DIR = Path(__file__).resolve().parent.parent
    BASE_DIR = PACKAGE_DIR.parent
    LOGS_DIR = str(BASE_DIR / 'logs')

    # ============================================
    # RECORD STORE
    # ============================================

    SEED_DATA_DIR = os.getenv('SEED_DATA_DIR', str(PACKAGE_DIR / 'data'))
    # 'sequence' never reuses ids, 'length' assigns count + 1
    ID_STRATEGY = os.getenv('ID_STRATEGY', 'sequence')

    # ============================================
    # GRAPHQL
    # ============================================

    GRAPHQL_PATH = '/graphql'
    GRAPHIQL_ENABLED = os.getenv('GRAPHIQL_ENABLED', 'True').lower() == 'true'

    # ============================================
    # CORS
    # ============================================

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',')

    # ============================================
    # LOGGING
    # ============================================

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.getenv('LOG_FORMAT', 'json')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'False').lower() == 'true'
    LOG_FILE = os.getenv('LOG_FILE', 'logs/app.log')
    LOG_MAX_BYTES = int(os.getenv('LOG_MAX_BYTES', 10485760))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv('LOG_BACKUP_COUNT', 5))

    # ============================================
    # MONITORING
    # ============================================

    PROMETHEUS_ENABLED = os.getenv('PROMETHEUS_ENABLED', 'True').lower() == 'true'

    SERVICE_NAME = 'courses-graphql'
    SERVICE_VERSION = '1.0.0'


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
    LOG_FORMAT = 'text'
    LOG_TO_FILE = False
    PROMETHEUS_ENABLED = False
    SEED_DATA_DIR = str(Config.PACKAGE_DIR / 'data')
    ID_STRATEGY = 'sequence'


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
