# apps/ui/assets/paths.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .errors import FrozenRegistryError

log = logging.getLogger("ui.assets.paths")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DirectoryPath:
    """Chemin résolu + métadonnées figées au moment de la construction."""

    path: Path
    url: Optional[str] = None
    is_readable: bool = False
    extension: str = ""

    @classmethod
    def of(cls, value: Union[PathLike, Mapping[str, Any], "DirectoryPath"], url: Optional[str] = None) -> "DirectoryPath":
        if isinstance(value, DirectoryPath):
            return value
        if isinstance(value, Mapping):
            url = url or value.get("url")
            value = value.get("path") or ""
        raw = str(value).strip()
        if not raw:
            raise ValueError("Directory path must not be empty")

        resolved = Path(raw).expanduser().resolve()
        extension = resolved.suffix.lstrip(".").lower() if resolved.is_file() else ""
        return cls(
            path=resolved,
            url=_normalize_url(url),
            is_readable=os.access(resolved, os.R_OK),
            extension=extension,
        )

    @property
    def key(self) -> str:
        return str(self.path)

    def __str__(self) -> str:
        return self.key


def _normalize_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    url = str(url).strip()
    if not url:
        return None
    return url if url.endswith("/") else url + "/"


class DirectorySearchPath:
    """
    Liste ordonnée de répertoires de recherche, unique par chemin résolu.

    Append-only jusqu'au premier `freeze_and_list()` ; ensuite l'ordre et le
    contenu ne bougent plus. Le répertoire natif est toujours consulté en dernier.
    """

    def __init__(
        self,
        directories: Iterable[Union[PathLike, Mapping[str, Any], DirectoryPath]] = (),
        *,
        native: Union[PathLike, Mapping[str, Any], DirectoryPath, None] = None,
    ) -> None:
        self._directories: Dict[str, DirectoryPath] = {}
        self._native = DirectoryPath.of(native) if native is not None else None
        self._frozen = False
        self._snapshot: Tuple[DirectoryPath, ...] = ()
        for directory in directories or ():
            self.add_directory(directory)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def native(self) -> Optional[DirectoryPath]:
        return self._native

    @property
    def directories(self) -> Tuple[DirectoryPath, ...]:
        if self._frozen:
            return self._snapshot
        return tuple(self._directories.values())

    def add_directory(
        self,
        path: Union[PathLike, Mapping[str, Any], DirectoryPath],
        url: Optional[str] = None,
    ) -> "DirectorySearchPath":
        if self._frozen:
            raise FrozenRegistryError(str(path))

        directory = DirectoryPath.of(path, url=url)
        # premier enregistrement conservé (position comprise)
        self._directories.setdefault(directory.key, directory)
        return self

    def freeze_and_list(self) -> Tuple[DirectoryPath, ...]:
        if self._frozen:
            return self._snapshot

        if self._native is not None:
            # l'utilisateur a pu l'ajouter lui-même : on le repousse en fin de chaîne
            existing = self._directories.pop(self._native.key, None)
            native = self._native
            if existing is not None and existing.url and not native.url:
                native = existing
            self._directories[native.key] = native

        self._snapshot = tuple(self._directories.values())
        self._frozen = True
        log.info(
            "Component asset search path frozen (%d directories): %s",
            len(self._snapshot),
            ", ".join(d.key for d in self._snapshot),
        )
        return self._snapshot
