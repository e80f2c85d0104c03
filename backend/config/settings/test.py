"""
Test settings for Part-DB project.
"""

from .base import *

# In-memory SQLite, no external database needed
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

PARTDB_MIN_PASSWORD_LENGTH = 6

# Let records reach the root logger so tests can capture them
for _logger in ('partdb', 'domain', 'application', 'infrastructure'):
    LOGGING['loggers'][_logger]['handlers'] = []
    LOGGING['loggers'][_logger]['propagate'] = True
    LOGGING['loggers'][_logger]['level'] = 'DEBUG'
