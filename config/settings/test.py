"""Test settings for ParkBoard project.

Runs the suite against a file-backed SQLite database with a fast password
hasher, so tests that use several connections see the same store. Set
``TEST_DB_ENGINE`` and friends to run against PostgreSQL instead.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': os.environ.get('TEST_DB_ENGINE', 'django.db.backends.sqlite3'),  # noqa: F405
        'NAME': os.environ.get('TEST_DB_NAME', BASE_DIR / 'db.sqlite3'),  # noqa: F405
        'USER': os.environ.get('TEST_DB_USER', ''),  # noqa: F405
        'PASSWORD': os.environ.get('TEST_DB_PASSWORD', ''),  # noqa: F405
        'HOST': os.environ.get('TEST_DB_HOST', ''),  # noqa: F405
        'PORT': os.environ.get('TEST_DB_PORT', ''),  # noqa: F405
    }
}

if DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':
    DATABASES['default']['OPTIONS'] = SQLITE_OPTIONS  # noqa: F405
    DATABASES['default']['TEST'] = {
        'NAME': os.environ.get('TEST_DB_FILE', BASE_DIR / 'test_parkboard.sqlite3'),  # noqa: F405
    }

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

LOGGING['handlers']['console']['level'] = 'WARNING'  # noqa: F405
