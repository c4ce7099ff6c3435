"""Django settings for the box office project.

Only the management command runs in this project: no database, no URLs.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("BOXOFFICE_SECRET_KEY", "django-insecure-boxoffice-dev-key")

DEBUG = os.environ.get("BOXOFFICE_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "tickets",
]

USE_TZ = True

TIME_ZONE = "America/La_Paz"

LANGUAGE_CODE = "es-bo"

# Ticket type label -> base price. Order is the order shown to the customer.
TICKET_PRICES = {
    "2D": "20.0",
    "3D": "30.0",
    "VIP": "50.0",
}

TICKET_CURRENCY = "Bs."

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "tickets": {
            "handlers": ["console"],
            "level": os.environ.get("BOXOFFICE_LOG_LEVEL", "WARNING"),
        },
    },
}
