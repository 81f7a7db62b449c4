from __future__ import annotations

from pathlib import Path
from typing import Iterable


def write_files(root: Path, names: Iterable[str], content: str = "/* asset */") -> list[Path]:
    root.mkdir(parents=True, exist_ok=True)
    out = []
    for name in names:
        p = root / name
        p.write_text(f"{content} {name}", encoding="utf-8")
        out.append(p)
    return out
