# apps/ui/components/notification.py
from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from django.utils import dateformat, timezone
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from apps.ui.assets.errors import InvalidComponentValueError
from apps.ui.assets.handler import NATIVE_ASSET_DIR

from . import registry
from .base import Component
from .validation import ValidationResult, check_choice

log = logging.getLogger("ui.components.notification")

TYPES = ("info", "success", "warning", "error", "notice")

FORMAT_HUMAN = "j M Y, H:i"

# en secondes
NOW_WINDOW = 5
TODAY_WINDOW = 12 * 60 * 60


# SVG intégrés, un par type ; `notice` sert de repli
ICONS = {
    "success": '<svg class="icon" fill="currentColor" viewbox="0 0 16 16"><path d="M16 8A8 8 0 1 1 0 8a8 8 0 0 1 16 0zm-3.97-3.03a.75.75 0 0 0-1.08.022L7.477 9.417 5.384 7.323a.75.75 0 0 0-1.06 1.06L6.97 11.03a.75.75 0 0 0 1.079-.02l3.992-4.99a.75.75 0 0 0-.01-1.05z"/></svg>',
    "info": '<svg class="icon" fill="currentColor" viewbox="0 0 16 16"><path d="M8 16A8 8 0 1 0 8 0a8 8 0 0 0 0 16zm.93-9.412-1 4.705c-.07.34.029.533.304.533.194 0 .487-.07.686-.246l-.088.416c-.287.346-.92.598-1.465.598-.703 0-1.002-.422-.808-1.319l.738-3.468c.064-.293.006-.399-.287-.47l-.451-.081.082-.381 2.29-.287zM8 5.5a1 1 0 1 1 0-2 1 1 0 0 1 0 2z"/></svg>',
    "error": '<svg class="icon" fill="currentColor" viewbox="0 0 16 16"><path d="M16 8A8 8 0 1 1 0 8a8 8 0 0 1 16 0zM5.354 4.646a.5.5 0 1 0-.708.708L7.293 8l-2.647 2.646a.5.5 0 0 0 .708.708L8 8.707l2.646 2.647a.5.5 0 0 0 .708-.708L8.707 8l2.647-2.646a.5.5 0 0 0-.708-.708L8 7.293 5.354 4.646z"/></svg>',
    "warning": '<svg class="icon" fill="none" viewbox="0 0 16 16"><path fill="currentColor" fill-rule="evenodd" clip-rule="evenodd" d="M9.336.757c-.594-1.01-2.078-1.01-2.672 0L.21 11.73C-.385 12.739.357 14 1.545 14h12.91c1.188 0 1.93-1.261 1.336-2.27L9.336.757ZM9 4.5C9 4 9 4 8 4s-1 0-1 .5l.383 3.538c.103.505.103.505.617.505s.514 0 .617-.505L9 4.5Zm-1 7.482c1.028 0 1.028 0 1.028-1.01 0-1.009 0-1.009-1.028-1.009s-1.028.094-1.028 1.01c0 1.008 0 1.008 1.028 1.008Z"/></svg>',
    "notice": '<svg class="icon" fill="none" viewbox="0 0 16 16"><path fill="currentColor" fill-rule="evenodd" clip-rule="evenodd" d="M6.983 1.006a.776.776 0 0 1 .667.634l1.781 9.967 1.754-3.925a.774.774 0 0 1 .706-.46h3.335c.427 0 .774.348.774.778 0 .43-.347.778-.774.778h-2.834L9.818 14.54a.774.774 0 0 1-1.468-.181L6.569 4.393 4.816 8.318a.774.774 0 0 1-.707.46H.774A.776.776 0 0 1 0 8c0-.43.347-.778.774-.778h2.834L6.182 1.46a.774.774 0 0 1 .8-.453Z"/></svg>',
}


def validate_type(value: Any) -> ValidationResult:
    return check_choice("type", value, TYPES, owner="Notification")


@registry.register("notification")
class Notification(Component):
    """
    Message utilisateur (toast).

    - type: un de `info`, `success`, `warning`, `error`, `notice`
    - message: texte principal
    - description: détails optionnels
    - timeout: durée d'affichage en millisecondes ; 0 = fermeture manuelle,
      None = défaut du front
    """

    def __init__(
        self,
        type: str,
        message: str,
        description: Optional[str] = None,
        timeout: Optional[int] = None,
        attributes: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(attributes)
        self._parameters: Dict[str, Any] = {
            "type": None,
            "message": (message or "").strip(),
            "description": description.strip() if description else None,
            "timeout": timeout,
        }
        self._set_type(type)
        self._instances: List[datetime] = [timezone.now()]

    @classmethod
    def get_assets(cls) -> List[str]:
        return [
            str(NATIVE_ASSET_DIR / "notification.css"),
            str(NATIVE_ASSET_DIR / "notification.js"),
        ]

    def template_path(self) -> str:
        return "ui/components/notification.html"

    def state(self) -> Dict[str, Any]:
        return dict(self._parameters)

    # ---------------------------
    # Accesseurs
    # ---------------------------
    @property
    def key(self) -> str:
        payload = json.dumps(self._parameters, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]

    @property
    def type(self) -> str:
        return self._parameters["type"]

    @property
    def message(self) -> str:
        return self._parameters["message"]

    @property
    def description(self) -> Optional[str]:
        return self._parameters["description"]

    @property
    def timeout(self) -> Optional[int]:
        return self._parameters["timeout"]

    @property
    def icon(self) -> SafeString:
        return mark_safe(ICONS.get(self.type, ICONS["notice"]))

    @property
    def instances(self) -> List[datetime]:
        return list(self._instances)

    @property
    def latest(self) -> datetime:
        return self._instances[-1]

    @property
    def unix_timestamp(self) -> int:
        return int(self.latest.timestamp())

    @property
    def when(self) -> SafeString:
        elapsed = (timezone.now() - self.latest).total_seconds()
        stamp = self.timestamp()
        if elapsed < NOW_WINDOW:
            return format_html('<span class="datetime-when">Now</span><span class="datetime-timestamp">{}</span>', stamp)
        if elapsed < TODAY_WINDOW:
            return format_html('<span class="datetime-when">Today</span><span class="datetime-timestamp">{}</span>', stamp)
        return format_html("{}", stamp)

    def timestamp(self, format: str = FORMAT_HUMAN) -> str:
        # USE_TZ=False : datetimes naïfs, rien à convertir
        value = timezone.localtime(self.latest) if timezone.is_aware(self.latest) else self.latest
        return dateformat.format(value, format)

    def count(self) -> int:
        """Nombre de déclenchements depuis le dernier rendu."""
        return len(self._instances)

    # ---------------------------
    # Mutateurs
    # ---------------------------
    def bump(self) -> "Notification":
        """Le même message a été vu à nouveau."""
        self._instances.append(timezone.now())
        return self

    def notice(self) -> "Notification":
        return self._set_type("notice")

    def info(self) -> "Notification":
        return self._set_type("info")

    def success(self) -> "Notification":
        return self._set_type("success")

    def warning(self) -> "Notification":
        return self._set_type("warning")

    def error(self) -> "Notification":
        return self._set_type("error")

    def set_timeout(self, milliseconds: Optional[int]) -> "Notification":
        # plage recommandée : 3500 - 8000
        if milliseconds is not None and milliseconds < 0:
            raise InvalidComponentValueError(
                ValidationResult("timeout", milliseconds, ok=False, error=f"Invalid timeout '{milliseconds}' (must be >= 0)")
            )
        self._parameters["timeout"] = milliseconds
        return self

    def _set_type(self, value: str) -> "Notification":
        result = validate_type(value)
        if not result:
            log.warning(result.error)
            raise InvalidComponentValueError(result)
        self._parameters["type"] = value
        return self

    def __repr__(self) -> str:
        return f"Notification(type={self.type!r}, message={self.message!r})"
