# apps/ui/assets/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from apps.ui.components.validation import ValidationResult

__all__ = [
    "ComponentAssetError",
    "FrozenRegistryError",
    "UnreadableAssetError",
    "UnsupportedAssetKindError",
    "InvalidComponentValueError",
]


class ComponentAssetError(Exception):
    """Base des erreurs du pipeline composants/assets."""


class FrozenRegistryError(ComponentAssetError, RuntimeError):
    """Le chemin de recherche est figé : plus aucun répertoire ne peut être ajouté."""

    def __init__(self, path: str):
        super().__init__(
            f"Directory search path is frozen (a resolution already happened); cannot add '{path}'."
        )
        self.path = path


class UnreadableAssetError(ComponentAssetError, OSError):
    """Fichier d'asset découvert mais illisible."""

    def __init__(self, path: str):
        super().__init__(f'File "{path}" is not readable')
        self.path = path


class UnsupportedAssetKindError(ComponentAssetError, ValueError):
    """Extension hors {css, js}."""

    def __init__(self, path: str, extension: str):
        super().__init__(f"Unexpected file extension '{extension}' for asset '{path}'")
        self.path = path
        self.extension = extension


class InvalidComponentValueError(ComponentAssetError, ValueError):
    """Valeur invalide passée à un composant (ex: type de notification)."""

    def __init__(self, result: "ValidationResult"):
        super().__init__(result.error or f"Invalid value {result.value!r} for '{result.field}'")
        self.result = result
