# apps/ui/assets/called.py
from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple, Type

from .records import DEFAULT_PREFIX


def normalize_identifier(value: str) -> str:
    return (value or "").strip().lower()


class CalledComponentRegistry:
    """Composants rendus pendant une passe : premier enregistrement gagnant, ordre d'apparition."""

    def __init__(self) -> None:
        self._called: Dict[str, Type] = {}

    def register(self, identifier: str, component_class: Type) -> bool:
        key = normalize_identifier(identifier)
        if not key:
            raise ValueError("Component identifier must not be empty")
        if key in self._called:
            return False
        self._called[key] = component_class
        return True

    def list_unique(self) -> List[Tuple[str, Type]]:
        return list(self._called.items())

    def __contains__(self, identifier: str) -> bool:
        return normalize_identifier(identifier) in self._called

    def __len__(self) -> int:
        return len(self._called)


class IgnoredComponentSet:
    """
    Identifiants exclus de l'émission d'assets.

    Accepte un identifiant simple (`notification`) ou un id d'asset complet
    (`component-notification-1a2b3c4d`), auquel cas on en extrait le nom.
    """

    def __init__(self, values: Iterable[str] = (), *, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self._ignored: Set[str] = set()
        for value in values or ():
            self.ignore(value)

    def _component_name(self, value: str) -> str:
        key = normalize_identifier(value)
        marker = f"{self.prefix}-"
        if key.startswith(marker) and "-" in key[len(marker):]:
            key = key[len(marker):].rsplit("-", 1)[0]
        return key

    def ignore(self, value: str) -> str:
        name = self._component_name(value)
        if name:
            self._ignored.add(name)
        return name

    def __contains__(self, identifier: str) -> bool:
        return normalize_identifier(identifier) in self._ignored

    def __len__(self) -> int:
        return len(self._ignored)
