# apps/ui/apps.py
from django.apps import AppConfig
import logging

log = logging.getLogger("ui.apps")


class UiConfig(AppConfig):
    name = "apps.ui"
    label = "ui"
    verbose_name = "UI components"

    def ready(self):
        # Enregistrement des composants natifs + system checks
        from . import checks  # noqa: F401
        from .components import notification  # noqa: F401
        from .components import registry
        from django.conf import settings

        log.info(
            "UiConfig ready: %d component(s) registered, %d asset dir(s), inline=%s, match=%s",
            len(registry.all_identifiers()),
            len(getattr(settings, "UI_COMPONENT_ASSET_DIRS", []) or []),
            getattr(settings, "UI_INLINE_ASSETS", True),
            getattr(settings, "UI_ASSET_MATCH", "strict"),
        )
