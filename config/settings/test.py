"""
Test settings: SQLite and in-memory email, no external services.
"""
import os

for name, value in {
    'SECRET_KEY': 'test-secret-key',
    'DB_NAME': 'test',
    'DB_USER': '',
    'DB_PASSWORD': '',
    'DB_HOST': '',
    'DB_PORT': '',
}.items():
    os.environ.setdefault(name, value)

from .base import *  # noqa: E402

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

PLATFORM_MASTER_KEY = 'test-master-key'
PLATFORM_OWNER_EMAIL = 'owner@platform.test'
JWT_SECRET_KEY = 'test-jwt-secret'

LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['apps']['level'] = 'WARNING'
