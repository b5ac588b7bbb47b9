# backend/tradies_backend/settings/dev.py
from .base import *

DEBUG = True

ALLOWED_HOSTS = ["*", "localhost", "127.0.0.1"]

# The frontend origin
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")
# The backend origin (where the API is served)
BACKEND_ORIGIN = os.getenv("BACKEND_ORIGIN", "http://localhost:8000")

CSRF_TRUSTED_ORIGINS = [FRONTEND_ORIGIN, BACKEND_ORIGIN]

# Use a specific allow-list for CORS instead of allowing all origins.
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = [FRONTEND_ORIGIN, BACKEND_ORIGIN]

DATABASES = {
    "default": {"ENGINE": "django.db.backends.sqlite3", "NAME": str(BASE_DIR / "db.sqlite3")}
}

# No broker locally: run the notification task inline
CELERY_TASK_ALWAYS_EAGER = True
