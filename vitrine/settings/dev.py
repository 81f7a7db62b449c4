# vitrine/settings/dev.py
# export DJANGO_SETTINGS_MODULE=vitrine.settings.dev

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

# Dev: fichiers servis par STATIC_URL, plus lisible que l'inline
UI_INLINE_ASSETS = env_flag("UI_INLINE_ASSETS", default=False)

LOGGING['loggers'].update({
    "ui.assets": {"handlers": ["console"], "level": "DEBUG", "propagate": False},
})
