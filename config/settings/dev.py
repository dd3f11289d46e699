"""Development settings for the booking service.

This module extends the base settings with development specific
configuration, such as enabling debug and human readable log output.
Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Readable log lines unless JSON is asked for explicitly
if os.environ.get('LOG_FORMAT') is None:
    LOGGING['handlers']['console']['formatter'] = 'console'
