import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_int(key, default):
    """Read an integer env var, falling back to default on blanks or junk."""
    val = os.environ.get(key, '')
    if val.strip().isdigit():
        return int(val)
    return default


class Config:
    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Supabase row store (REQUIRED)
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_KEY = os.environ.get('SUPABASE_KEY') or os.environ.get('SUPABASE_ANON_KEY')
    SUPABASE_TIMEOUT = _get_int('SUPABASE_TIMEOUT', 10)

    # Supabase Storage
    SUPABASE_STORAGE_BUCKET = os.environ.get('SUPABASE_STORAGE_BUCKET', 'drishti')
    IMAGE_MAX_WIDTH = _get_int('IMAGE_MAX_WIDTH', 1600)
    IMAGE_MAX_HEIGHT = _get_int('IMAGE_MAX_HEIGHT', 1000)
    MAX_CONTENT_LENGTH = _get_int('MAX_CONTENT_LENGTH', 8 * 1024 * 1024)  # 8MB

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Email Configuration - contact notifications are skipped unless set
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = _get_int('MAIL_PORT', 587)
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', 'True').lower() == 'true'
    MAIL_USE_SSL = os.environ.get('MAIL_USE_SSL', 'False').lower() == 'true'
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER') or os.environ.get('MAIL_USERNAME')
    CONTACT_NOTIFY_EMAIL = os.environ.get('CONTACT_NOTIFY_EMAIL')

    # Site details shown on every page
    SITE_NAME = os.environ.get('SITE_NAME', 'Drishti Digital Library')
    SITE_PHONE = os.environ.get('SITE_PHONE', '9876543210')
    SITE_ADDRESS = os.environ.get('SITE_ADDRESS', 'Sakchi Main Road, Jamshedpur, Jharkhand - 831001')
    CONTACT_SUCCESS_MESSAGE = os.environ.get(
        'CONTACT_SUCCESS_MESSAGE',
        'धन्यवाद! हम आपसे जल्द संपर्क करेंगे।'
    )

    # Admin bootstrap (flask create-admin)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SUPABASE_URL = 'https://test-project.supabase.co'
    SUPABASE_KEY = 'test-anon-key'
    MAIL_SUPPRESS_SEND = True
    CONTACT_NOTIFY_EMAIL = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
