# apps/ui/components/runtime.py
from __future__ import annotations

from typing import Optional

from .notification import Notification


class ComponentRuntime:
    """Fabriques exposées aux templates (`{% toast %}`)."""

    def toast(self, type: str, title: str, description: Optional[str] = None, timeout: Optional[int] = None) -> Notification:
        return Notification(type, title, description=description, timeout=timeout)


runtime = ComponentRuntime()
