"""Development settings for Airnest project.

This module extends the base settings with development specific
configuration: debug mode, all hosts allowed, the browsable API and
verbose application logging. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Browsable API is handy while developing
REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [  # noqa: F405
    'rest_framework.renderers.JSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
]

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
