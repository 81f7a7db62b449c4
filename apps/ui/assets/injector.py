# apps/ui/assets/injector.py
from __future__ import annotations

from typing import Iterable

HEAD_CLOSE = "</head>"


def inject(html: str, tags: Iterable[str]) -> str:
    """
    Insère les tags d'assets juste avant le premier `</head>`, sinon en tête du document.
    Transformation purement textuelle : rien d'autre n'est analysé.
    """
    lines = "".join(f"\t{tag}\n" for tag in tags)
    if not lines:
        return html

    if HEAD_CLOSE in html:
        head, body = html.split(HEAD_CLOSE, 1)
        return head + lines + HEAD_CLOSE + body

    return lines + html
