"""Test settings: in-memory SQLite and quiet logging."""

from .base import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

LOGGING['handlers']['console']['level'] = 'WARNING'

# Application records go through root only, where pytest's caplog listens
for name in ('apps', 'shared'):
    LOGGING['loggers'][name]['handlers'] = []
    LOGGING['loggers'][name]['propagate'] = True
