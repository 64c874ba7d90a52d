import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration."""

    # Flask core
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')
    JSON_SORT_KEYS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Authentication
    API_KEY = os.environ.get('API_KEY')  # None means no auth required

    # CORS - allow any origin by default
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Request limits
    MAX_SOURCE_RECORDS = int(os.environ.get('MAX_SOURCE_RECORDS', 10000))
