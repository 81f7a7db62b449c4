from .base import Component
from .button import Button
from .notification import Notification

__all__ = ["Button", "Component", "Notification"]
