"""Test settings: in-memory SQLite and quiet logging."""

from .base import *  # noqa: F401,F403

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

HOTELS = {
    'RECENT_BOOKINGS_COUNT': 5,
    'ROOM_TYPE_CAPACITY': {},
}

LOGGING["loggers"]["apps.hotels"]["level"] = "WARNING"  # noqa: F405
LOGGING["loggers"]["shared"]["level"] = "WARNING"  # noqa: F405
