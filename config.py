import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

QUESTIONS_FILE_NAME = 'questions.json'
REPORT_FILE_PREFIX = 'CareerPath_'

class Config:
    """Base configuration"""
    # Security - only the web front end needs it
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Debug mode - default to False for safety
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Question bank / report storage
    QUESTIONS_FILE_PATH = os.environ.get('QUESTIONS_FILE_PATH', QUESTIONS_FILE_NAME)
    REPORTS_DIR = os.environ.get('REPORTS_DIR', '.')

    # Assessment defaults
    DEFAULT_USER_NAME = 'Guest'

    # Admin mode
    ADMIN_PASSWORD = '1234'
    ADMIN_BONUS_CAREER = 'Software Developer'
    ADMIN_BONUS_POINTS = 50

    # Console animation (seconds per bar tick)
    LOADING_BAR_DELAY = float(os.environ.get('LOADING_BAR_DELAY', '0.015'))

    # Session configuration
    SESSION_PERMANENT = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Configuration validation
    @classmethod
    def validate(cls):
        """Validate that all required settings are present"""
        errors = []

        if not cls.QUESTIONS_FILE_PATH:
            errors.append("QUESTIONS_FILE_PATH must not be empty")
        if not cls.REPORTS_DIR:
            errors.append("REPORTS_DIR must not be empty")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    PERMANENT_SESSION_LIFETIME = 1800

    @classmethod
    def validate(cls):
        if not cls.SECRET_KEY:
            raise ValueError("Configuration validation failed:\nSECRET_KEY is not set in environment variables")
        return super().validate()


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SECRET_KEY = Config.SECRET_KEY or 'dev-secret-key-change-in-production'


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'default': DevelopmentConfig
    }

    config_class = config_map.get(env, config_map['default'])
    config = config_class()

    # Validate configuration
    try:
        config.validate()
        return config
    except ValueError as e:
        print(f"❌ Configuration Error: {e}")
        print("💡 Make sure you have a .env file with all required variables")
        print("💡 Or set environment variables directly")
        raise
