# apps/ui/assets/resolver.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .paths import DirectoryPath, DirectorySearchPath
from .records import DEFAULT_PREFIX, AssetRecord, build_record

log = logging.getLogger("ui.assets.resolver")

MATCH_STRICT = "strict"
MATCH_PREFIX = "prefix"
MATCH_MODES = (MATCH_STRICT, MATCH_PREFIX)

AssetMap = Dict[str, AssetRecord]


def _matches(identifier: str, filename: str, mode: str) -> bool:
    if not filename.startswith(identifier):
        return False
    if mode == MATCH_PREFIX:
        return True
    # strict: `button` accepte button.css / button.min.js mais pas button-group.css
    rest = filename[len(identifier):]
    return rest.startswith(".")


def find_candidates(directory: DirectoryPath, identifier: str, mode: str = MATCH_STRICT) -> List[Path]:
    """Glob `identifier*` dans un répertoire (non récursif), fichiers uniquement, triés par nom."""
    root = directory.path
    if not root.is_dir():
        return []
    found = [
        p for p in root.glob(f"{identifier}*")
        if not p.is_dir() and _matches(identifier, p.name, mode)
    ]
    return sorted(found, key=lambda p: p.name)


class AssetResolver:
    """
    Résout un identifiant de composant en assets (css/js).

    - premier répertoire qui matche = gagnant, les suivants ne sont jamais consultés
    - à défaut, liste déclarée par la classe du composant (fallback)
    - résultat mis en cache par identifiant pour la durée de vie du resolver
    """

    def __init__(
        self,
        search_path: DirectorySearchPath,
        *,
        inline: bool = True,
        prefix: str = DEFAULT_PREFIX,
        match: str = MATCH_STRICT,
    ) -> None:
        if match not in MATCH_MODES:
            raise ValueError(f"Unknown match mode '{match}'. Known: {MATCH_MODES}")
        self.search_path = search_path
        self.inline = inline
        self.prefix = prefix
        self.match = match
        self._cache: Dict[str, AssetMap] = {}

    def is_cached(self, identifier: str) -> bool:
        return identifier in self._cache

    def cached(self, identifier: str) -> Optional[AssetMap]:
        return self._cache.get(identifier)

    def resolve(self, identifier: str, fallback: Optional[Sequence[Union[str, Path]]] = None) -> AssetMap:
        cached = self._cache.get(identifier)
        if cached is not None:
            return cached

        candidates, source = self._search(identifier)
        if not candidates and fallback:
            candidates = [(Path(p), None) for p in fallback]
            source = None
            log.debug("No directory match for '%s'; using %d declared asset(s)", identifier, len(candidates))

        records: AssetMap = {}
        for path, base_url in candidates:
            record = build_record(
                path,
                name=identifier,
                inline=self.inline,
                prefix=self.prefix,
                base_url=base_url,
            )
            records[record.asset_id] = record

        self._cache[identifier] = records
        log.debug(
            "Resolved '%s' -> %d asset(s) from %s",
            identifier,
            len(records),
            source.key if source is not None else "declared assets",
        )
        return records

    def core_assets(self, directory: Union[str, Path, Mapping[str, Any], DirectoryPath, None], *, name: str = "core") -> AssetMap:
        """Tous les fichiers présents directement dans `directory` (non mis en cache)."""
        if directory is None:
            return {}
        root = DirectoryPath.of(directory)
        if not root.path.is_dir():
            return {}
        records: AssetMap = {}
        for path in sorted(p for p in root.path.iterdir() if not p.is_dir()):
            record = build_record(path, name=name, inline=self.inline, prefix=self.prefix, base_url=root.url)
            records[record.asset_id] = record
        return records

    def _search(self, identifier: str) -> Tuple[List[Tuple[Path, Optional[str]]], Optional[DirectoryPath]]:
        for directory in self.search_path.freeze_and_list():
            found = find_candidates(directory, identifier, self.match)
            if found:
                return [(p, directory.url) for p in found], directory
        return [], None
