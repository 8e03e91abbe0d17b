"""Test settings for Airnest project.

Uses an in-memory SQLite database, a local-memory cache for throttle
counters and a fast password hasher. Uploads go to a temporary directory.
"""

import tempfile

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key-not-for-production'
SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY  # noqa: F405

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'airnest-tests',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix='airnest-uploads-'))  # noqa: F405

LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['django']['level'] = 'CRITICAL'  # noqa: F405
