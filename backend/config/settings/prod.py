"""
Production settings for Part-DB project.
"""

from .base import *

# =============================================================================
# SECURITY
# =============================================================================
DEBUG = False

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# HTTPS settings (when behind a reverse proxy with SSL)
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_SSL_REDIRECT = config('SECURE_SSL_REDIRECT', default=True, cast=bool)

# =============================================================================
# ALLOWED HOSTS - Production
# =============================================================================
ALLOWED_HOSTS = config('ALLOWED_HOSTS', cast=Csv())

# =============================================================================
# DATABASE - Production
# =============================================================================
DATABASES['default']['CONN_MAX_AGE'] = 300
DATABASES['default']['OPTIONS'] = {
    'connect_timeout': 10,
    'sslmode': config('DB_SSL_MODE', default='prefer'),
}

# =============================================================================
# SENTRY (Error Tracking)
# =============================================================================
SENTRY_DSN = config('SENTRY_DSN', default='')
if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[
            DjangoIntegration(),
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,
    )

# =============================================================================
# LOGGING - Production
# =============================================================================
LOGGING['handlers']['file']['filename'] = config(
    'LOG_FILE', default='/var/log/partdb/partdb.log'
)
