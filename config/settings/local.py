"""
Development settings: runserver on :8000 with the student frontend dev
server calling the API from another origin.
"""

from .base import *  # noqa: F403
from .base import INSTALLED_APPS
from .base import MIDDLEWARE
from .base import env

DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="Lp2WmX9aQe4TzR7cKv1NbH5uYd8GsJ3fOi6wEtA0rMnBxCyV",
)
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "team-portal-backend"]

USE_DOCKER = env.bool("USE_DOCKER", default=False)

# CACHE AND SESSIONS
# ------------------------------------------------------------------------------
# The compose stack ships Redis; a bare checkout runs on local memory.
if USE_DOCKER:
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": env("REDIS_URL", default="redis://redis:6379/0"),
            "OPTIONS": {"CLIENT_CLASS": "django_redis.client.DefaultClient"},
        },
    }
else:
    CACHES = {
        "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"},
    }

# Session snapshots survive runserver reloads through the database copy
SESSION_ENGINE = "django.contrib.sessions.backends.cached_db"
SESSION_COOKIE_AGE = 60 * 60 * 12
SESSION_COOKIE_SAMESITE = "Lax"

# FRONTEND
# ------------------------------------------------------------------------------
FRONTEND_ORIGINS = env.list(
    "FRONTEND_ORIGINS",
    default=["http://localhost:5173", "http://127.0.0.1:5173"],
)
CSRF_TRUSTED_ORIGINS = FRONTEND_ORIGINS
CSRF_COOKIE_SAMESITE = "Lax"

# REVIEW ATTACHMENTS
# ------------------------------------------------------------------------------
# Uploaded files are served by runserver from MEDIA_URL
SITE_URL = env("SITE_URL", default="http://localhost:8000")

# DEVELOPMENT TOOLS
# ------------------------------------------------------------------------------
INSTALLED_APPS = [
    "whitenoise.runserver_nostatic",
    *INSTALLED_APPS,
    "debug_toolbar",
    "django_extensions",
]
MIDDLEWARE += ["debug_toolbar.middleware.DebugToolbarMiddleware"]
DEBUG_TOOLBAR_CONFIG = {
    "DISABLE_PANELS": ["debug_toolbar.panels.redirects.RedirectsPanel"],
    # The API answers JSON; the toolbar is only useful on the admin pages
    "SHOW_TOOLBAR_CALLBACK": lambda request: DEBUG and not request.path.startswith("/api/"),
}
INTERNAL_IPS = ["127.0.0.1"]
