# apps/ui/assets/records.py
from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .errors import UnreadableAssetError, UnsupportedAssetKindError

STYLESHEET = "stylesheet"
SCRIPT = "script"

# extension -> type d'asset
ASSET_KINDS = {
    "css": STYLESHEET,
    "js": SCRIPT,
}

DEFAULT_PREFIX = "component"


def asset_digest(path: Union[str, Path], length: int = 8) -> str:
    data = str(path).encode("utf-8")
    return hashlib.sha256(data).hexdigest()[:length]


def make_asset_id(prefix: str, name: str, path: Union[str, Path]) -> str:
    return f"{prefix}-{name}-{asset_digest(path)}"


def is_readable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


@dataclass(frozen=True)
class AssetRecord:
    asset_id: str
    path: Path
    kind: str
    name: str
    inline: bool = True
    prefix: str = DEFAULT_PREFIX
    href: Optional[str] = None

    @property
    def is_stylesheet(self) -> bool:
        return self.kind == STYLESHEET

    @property
    def is_script(self) -> bool:
        return self.kind == SCRIPT

    def read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise UnreadableAssetError(str(self.path)) from exc

    def to_html(self) -> SafeString:
        if self.inline or not self.href:
            body = mark_safe(self.read())
            if self.is_stylesheet:
                return format_html('<style id="{}">{}</style>', self.asset_id, body)
            return format_html('<script id="{}">{}</script>', self.asset_id, body)

        if self.is_stylesheet:
            return format_html('<link rel="stylesheet" id="{}" href="{}">', self.asset_id, self.href)
        return format_html('<script id="{}" src="{}" defer></script>', self.asset_id, self.href)

    def __str__(self) -> str:
        return str(self.to_html())


def build_record(
    path: Union[str, Path],
    *,
    name: str,
    inline: bool = True,
    prefix: str = DEFAULT_PREFIX,
    base_url: Optional[str] = None,
) -> AssetRecord:
    """
    Construit un AssetRecord pour un fichier candidat.
    Lève UnreadableAssetError si illisible, UnsupportedAssetKindError si extension inconnue.
    """
    file_path = Path(path).expanduser().absolute()
    if not is_readable(file_path):
        raise UnreadableAssetError(str(file_path))

    extension = file_path.suffix.lstrip(".").lower()
    kind = ASSET_KINDS.get(extension)
    if kind is None:
        raise UnsupportedAssetKindError(str(file_path), extension)

    resolved = file_path.resolve()
    return AssetRecord(
        asset_id=make_asset_id(prefix, name, resolved),
        path=resolved,
        kind=kind,
        name=name,
        inline=inline,
        prefix=prefix,
        href=f"{base_url}{file_path.name}" if base_url else None,
    )
