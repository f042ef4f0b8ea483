"""Development settings for the hotel manager.

Extends the base settings with debug enabled and verbose logging of the
hotels app. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

ALLOWED_HOSTS = ['*']

LOGGING["loggers"]["apps.hotels"]["level"] = "DEBUG"  # noqa: F405
