"""
Development settings for Part-DB project.
"""

from .base import *

# =============================================================================
# DEBUG
# =============================================================================
DEBUG = True

# =============================================================================
# ALLOWED HOSTS
# =============================================================================
ALLOWED_HOSTS = ['*']

# =============================================================================
# DATABASE - Development Override
# =============================================================================
# SQLite unless a PostgreSQL database is configured explicitly
if config('DB_ENGINE', default='sqlite') == 'sqlite':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'partdb-dev.sqlite3',
        }
    }

# =============================================================================
# PASSWORDS - Development (fast hashing)
# =============================================================================
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
] + PASSWORD_HASHERS

# =============================================================================
# LOGGING - Development
# =============================================================================
LOGGING['root']['level'] = 'DEBUG'
for _logger in ('partdb', 'domain', 'application', 'infrastructure'):
    LOGGING['loggers'][_logger]['level'] = 'DEBUG'
