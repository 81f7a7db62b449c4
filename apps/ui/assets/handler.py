# apps/ui/assets/handler.py
from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Type, Union

from django.conf import settings

from . import injector
from .called import CalledComponentRegistry, IgnoredComponentSet, normalize_identifier
from .paths import DirectoryPath, DirectorySearchPath
from .records import DEFAULT_PREFIX, AssetRecord
from .resolver import MATCH_STRICT, AssetMap, AssetResolver

log = logging.getLogger("ui.assets.handler")

APP_DIR = Path(__file__).resolve().parents[1]
NATIVE_ASSET_DIR = APP_DIR / "static" / "ui" / "components"
CORE_ASSET_DIR = APP_DIR / "static" / "ui" / "styles"


class NoRenderPassError(RuntimeError):
    """Aucune passe de rendu active dans ce contexte."""


# ---------------------------------------------------------------------------
# Environnement process-wide : chemin de recherche + cache de résolution
# ---------------------------------------------------------------------------
class AssetEnvironment:
    def __init__(
        self,
        directories: Iterable[Union[str, Path, Mapping[str, Any], DirectoryPath]] = (),
        *,
        native: Union[str, Path, Mapping[str, Any], DirectoryPath, None] = None,
        core: Union[str, Path, Mapping[str, Any], DirectoryPath, None] = None,
        inline: bool = True,
        prefix: str = DEFAULT_PREFIX,
        match: str = MATCH_STRICT,
    ) -> None:
        self.search_path = DirectorySearchPath(directories, native=native)
        self.resolver = AssetResolver(self.search_path, inline=inline, prefix=prefix, match=match)
        self.core = core

    @classmethod
    def from_settings(cls) -> "AssetEnvironment":
        static_url = getattr(settings, "STATIC_URL", "/static/") or "/static/"
        native = {
            "path": getattr(settings, "UI_NATIVE_ASSET_DIR", NATIVE_ASSET_DIR),
            "url": getattr(settings, "UI_NATIVE_ASSET_URL", f"{static_url.rstrip('/')}/ui/components/"),
        }
        core = {
            "path": getattr(settings, "UI_CORE_ASSET_DIR", CORE_ASSET_DIR),
            "url": getattr(settings, "UI_CORE_ASSET_URL", f"{static_url.rstrip('/')}/ui/styles/"),
        }
        return cls(
            getattr(settings, "UI_COMPONENT_ASSET_DIRS", []) or [],
            native=native,
            core=core,
            inline=bool(getattr(settings, "UI_INLINE_ASSETS", True)),
            prefix=getattr(settings, "UI_ASSET_PREFIX", DEFAULT_PREFIX) or DEFAULT_PREFIX,
            match=getattr(settings, "UI_ASSET_MATCH", MATCH_STRICT) or MATCH_STRICT,
        )

    @property
    def prefix(self) -> str:
        return self.resolver.prefix

    def add_directory(self, path: Union[str, Path, Mapping[str, Any], DirectoryPath], url: Optional[str] = None) -> "AssetEnvironment":
        self.search_path.add_directory(path, url=url)
        return self

    def directories(self):
        return self.search_path.freeze_and_list()

    def resolve(self, identifier: str, fallback: Optional[Sequence[Union[str, Path]]] = None) -> AssetMap:
        return self.resolver.resolve(normalize_identifier(identifier), fallback)

    def core_assets(self) -> AssetMap:
        return self.resolver.core_assets(self.core)


SETTING_NAMES = (
    "STATIC_URL",
    "UI_COMPONENT_ASSET_DIRS",
    "UI_NATIVE_ASSET_DIR",
    "UI_NATIVE_ASSET_URL",
    "UI_CORE_ASSET_DIR",
    "UI_CORE_ASSET_URL",
    "UI_INLINE_ASSETS",
    "UI_ASSET_PREFIX",
    "UI_ASSET_MATCH",
)


def _settings_sentinel() -> str:
    return repr(tuple(getattr(settings, name, None) for name in SETTING_NAMES))


@lru_cache(maxsize=1)
def _environment_cached(sentinel: str) -> AssetEnvironment:
    # sentinel n'est pas utilisé directement, mais force un nouvel environnement quand les settings changent.
    return AssetEnvironment.from_settings()


def get_environment() -> AssetEnvironment:
    return _environment_cached(_settings_sentinel())


def reset_environment() -> None:
    """Oublie l'environnement partagé (tests, rechargement de settings)."""
    _environment_cached.cache_clear()


# ---------------------------------------------------------------------------
# Passe de rendu : composants appelés pendant une requête
# ---------------------------------------------------------------------------
_CURRENT_PASS: ContextVar[Optional["RenderPass"]] = ContextVar("ui_render_pass", default=None)


def current_pass(required: bool = False) -> Optional["RenderPass"]:
    render_pass = _CURRENT_PASS.get()
    if render_pass is None and required:
        raise NoRenderPassError("No active RenderPass; wrap the render in `with RenderPass():`.")
    return render_pass


class RenderPass:
    """
    État d'une passe de rendu (une requête) :
    composants appelés, composants ignorés, assets accumulés.
    """

    def __init__(self, environment: Optional[AssetEnvironment] = None, *, ignored: Iterable[str] = ()) -> None:
        self.environment = environment or get_environment()
        self.called = CalledComponentRegistry()
        self.ignored = IgnoredComponentSet(ignored, prefix=self.environment.prefix)
        self._assets: Dict[str, AssetRecord] = {}
        self._emitted: set[str] = set()
        self._token: Optional[Token] = None

    def register_component(self, identifier: str, component_class: Type) -> bool:
        return self.called.register(identifier, component_class)

    def ignore(self, value: str) -> "RenderPass":
        self.ignored.ignore(value)
        return self

    def pending_assets(self) -> Dict[str, AssetRecord]:
        for identifier, component_class in self.called.list_unique():
            if identifier in self.ignored:
                continue
            declared = getattr(component_class, "get_assets", None)
            fallback = list(declared()) if callable(declared) else None
            for asset_id, record in self.environment.resolve(identifier, fallback).items():
                self._assets.setdefault(asset_id, record)
        return self._assets

    def asset_tags(self) -> List[str]:
        return [str(record.to_html()) for record in self.pending_assets().values()]

    def emit(self) -> List[str]:
        """Tags pas encore émis (marqués comme émis)."""
        return self.emit_records(self.pending_assets())

    def emit_records(self, records: Mapping[str, AssetRecord]) -> List[str]:
        tags: List[str] = []
        for asset_id, record in records.items():
            if asset_id in self._emitted:
                continue
            self._emitted.add(asset_id)
            tags.append(str(record.to_html()))
        return tags

    def inject(self, html: str) -> str:
        return injector.inject(html, self.emit())

    def __enter__(self) -> "RenderPass":
        self._token = _CURRENT_PASS.set(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self._token is not None:
            _CURRENT_PASS.reset(self._token)
            self._token = None
        return False
