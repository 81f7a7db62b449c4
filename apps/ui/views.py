# apps/ui/views.py
from __future__ import annotations

from django.template.response import TemplateResponse

from apps.ui.components.notification import Notification


def preview(request):
    """Page de démonstration : une notification par type."""
    notifications = [
        Notification(kind, f"{kind.capitalize()} message", description="Preview", timeout=5000)
        for kind in ("info", "success", "warning", "error", "notice")
    ]
    return TemplateResponse(request, "ui/preview.html", {"notifications": notifications})
