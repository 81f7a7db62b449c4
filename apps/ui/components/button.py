# apps/ui/components/button.py
from __future__ import annotations

from typing import Any, Mapping, Optional

from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString


class Button:
    """Élément <button> simple (pas de template, pas d'assets propres)."""

    tag = "button"

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, content: Any = None) -> None:
        self.attributes = dict(attributes or {})
        self.attributes.setdefault("type", "button")
        self.content = content

    @classmethod
    def close(cls, label: str = "Close") -> "Button":
        return cls({"class": "icon close", "aria-label": label})

    def render(self) -> SafeString:
        return format_html("<{tag}{attrs}>{content}</{tag}>", tag=self.tag, attrs=flatatt(self.attributes), content=self.content or "")

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()
