"""Production settings for the hotel manager.

Sensitive values must come from environment variables. PostgreSQL is
expected here: its row locks back the per-room booking scope.
"""

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)  # noqa: F405

DATABASES['default']['ENGINE'] = get_env(  # noqa: F405
    'DB_ENGINE', 'django.db.backends.postgresql'
)
DATABASES['default']['CONN_MAX_AGE'] = int(get_env('DB_CONN_MAX_AGE', 60))  # noqa: F405
