import os
from dotenv import load_dotenv

load_dotenv()

REQUIRED_ENV_VARS = ('AWS_ACCESS_KEY_ID', 'AWS_SECRET_ACCESS_KEY')


def validate_required_env_vars():
    """
    Check that storage credentials are present in the environment.

    Raises:
        ValueError: Listing every missing variable.
    """
    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}"
        )


class Config:
    """Base configuration."""
    CONFIG_NAME = 'base'

    # Storage credentials
    AWS_ACCESS_KEY_ID = os.getenv('AWS_ACCESS_KEY_ID')
    AWS_SECRET_ACCESS_KEY = os.getenv('AWS_SECRET_ACCESS_KEY')
    AWS_REGION = os.getenv('AWS_REGION')

    # Album listing
    S3_BUCKET_NAME = os.getenv('S3_BUCKET_NAME', 'lowfi-records')
    S3_FOLDER_PATH = os.getenv('S3_FOLDER_PATH', 'lofi stations/')
    S3_MAX_KEYS = int(os.getenv('S3_MAX_KEYS', 1000))
    CLOUDFRONT_DOMAIN = os.getenv('CLOUDFRONT_DOMAIN', '')

    # Application settings
    DEBUG = False
    TESTING = False
    PORT = int(os.getenv('PORT', 5000))
    HOST = os.getenv('HOST', '0.0.0.0')

class ProductionConfig(Config):
    """Production configuration."""
    CONFIG_NAME = 'production'

class DevelopmentConfig(Config):
    """Development configuration."""
    CONFIG_NAME = 'development'
    DEBUG = True
    TESTING = False
    HOST = 'localhost'

class TestingConfig(Config):
    """Testing configuration."""
    CONFIG_NAME = 'testing'
    TESTING = True
    DEBUG = True
    HOST = 'localhost'

# Dictionary for easy config selection
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
