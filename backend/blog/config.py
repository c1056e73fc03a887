# Configuration settings
import os
from dotenv import load_dotenv

# This line loads the variables from your .env file
load_dotenv()


def _optional_float(name, default):
    raw = os.environ.get(name, default)
    if raw in (None, ''):
        return None
    value = float(raw)
    if value <= 0:
        return None
    return value


# This class holds all the configuration variables for the blog
class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-change-me')

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'SQLALCHEMY_DATABASE_URI', 'sqlite:///' + os.path.join(os.getcwd(), 'posts.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Avatars and images land in <ASSETS_FOLDER>/avatars and <ASSETS_FOLDER>/images
    ASSETS_FOLDER = os.environ.get('ASSETS_FOLDER', os.path.join(os.getcwd(), 'assets'))

    # Whole request body, then the uploaded image on its own
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 5 * 1024 * 1024))
    MAX_IMAGE_BYTES = int(os.environ.get('MAX_IMAGE_BYTES', 4 * 1024 * 1024))

    # Seconds; empty, zero or negative disables the timeout
    AVATAR_FETCH_TIMEOUT = _optional_float('AVATAR_FETCH_TIMEOUT', '10')

    # The post status is dropped if the feed is not reloaded within this window
    SESSION_LIFETIME_SECONDS = int(os.environ.get('SESSION_LIFETIME_SECONDS', 10))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()
