"""Production settings for the booking service.

This module extends the base settings with production specific
configuration. Ensure that sensitive values are provided via
environment variables.
"""

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

# Keep connections open between commands of the same process
DATABASES['default']['CONN_MAX_AGE'] = int(os.environ.get('DB_CONN_MAX_AGE', 60))
