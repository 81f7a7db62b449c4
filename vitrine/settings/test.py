# vitrine/settings/test.py
from .base import *  # noqa: F401,F403

DEBUG = False
ALLOWED_HOSTS = ["testserver"]

# Rendu déterministe pour les assertions
UI_INLINE_ASSETS = True
UI_ASSET_MATCH = "strict"

LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["ui"]["level"] = "WARNING"
