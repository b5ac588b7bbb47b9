# backend/tradies_backend/settings/test.py
import tempfile

from .base import *

DEBUG = False
SECRET_KEY = "test-secret"
SIMPLE_JWT["SIGNING_KEY"] = SECRET_KEY

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}
MEDIA_ROOT = tempfile.mkdtemp(prefix="tradies-media-")

REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"

SEARCH_INTENT = {"PROVIDER": "keywords", "FALLBACK": True}
OPENAI = {"API_KEY": "", "MODEL": "gpt-4o-mini", "TIMEOUT": 1.0}
BILLING = {
    "CHECKOUT_URL": "https://billing.test/create-checkout-session",
    "TIMEOUT": 1.0,
    "PRICE_IDS": {"pro": "price_pro_test", "enterprise": "price_enterprise_test"},
}
# tests that exercise the notify call override this and patch requests
NOTIFY_ADMIN_URL = ""
