# apps/ui/components/registry.py
from __future__ import annotations

from typing import Callable, Dict, List, Type, TypeVar

from apps.ui.assets.called import normalize_identifier

T = TypeVar("T", bound=type)

# identifiant -> classe de composant (mapping explicite, pas de déduction par nom de classe)
_COMPONENTS: Dict[str, type] = {}


class ComponentNotRegistered(KeyError):
    """Aucun composant enregistré pour cet identifiant."""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:  # pragma: no cover - string repr helper
        return f"Component '{self.identifier}' is not registered. Known: {all_identifiers()}"


def register(identifier: str) -> Callable[[T], T]:
    """Décorateur de classe : `@register("notification")`."""
    key = normalize_identifier(identifier)
    if not key:
        raise ValueError("Component identifier must not be empty")

    def decorator(cls: T) -> T:
        existing = _COMPONENTS.get(key)
        if existing is not None and existing is not cls:
            raise ValueError(f"Identifier '{key}' already registered by {existing.__module__}.{existing.__qualname__}")
        cls.identifier = key
        _COMPONENTS[key] = cls
        return cls

    return decorator


def unregister(identifier: str) -> None:
    _COMPONENTS.pop(normalize_identifier(identifier), None)


def get(identifier: str) -> Type:
    key = normalize_identifier(identifier)
    try:
        return _COMPONENTS[key]
    except KeyError:
        raise ComponentNotRegistered(key) from None


def exists(identifier: str) -> bool:
    return normalize_identifier(identifier) in _COMPONENTS


def all_identifiers() -> List[str]:
    return list(_COMPONENTS.keys())
