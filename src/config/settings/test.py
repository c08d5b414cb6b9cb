"""
Django test settings for the portfolio site.
"""

from .base import *  # noqa: F403

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Never talk to a real backend from tests; urlopen is patched per test
BACKEND_URL = "http://backend.test"
BACKEND_TIMEOUT = 1.0

# Use simple static files storage in tests
STORAGES = {
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}
