from .base import *

DEBUG = False
SECRET_KEY = "test-secret"
ALLOWED_HOSTS = ["testserver", "127.0.0.1", "localhost"]

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}

STORAGES["staticfiles"] = {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"}

IDENTITY_CENTURY_PIVOT = 50
IDENTITY_THROTTLE_MINUTE = "10000/min"
IDENTITY_THROTTLE_DAY = "100000/day"

LOGGING["loggers"]["agentcheck"]["level"] = "WARNING"
