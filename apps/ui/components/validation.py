# apps/ui/components/validation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class ValidationResult:
    field: str
    value: Any
    ok: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


def check_choice(field: str, value: Any, choices: Iterable[str], *, owner: str = "") -> ValidationResult:
    allowed = tuple(choices)
    if value in allowed:
        return ValidationResult(field=field, value=value, ok=True)
    where = f" used for {owner}" if owner else ""
    return ValidationResult(
        field=field,
        value=value,
        ok=False,
        error=f"Invalid {field} '{value}'{where}. Allowed: {', '.join(allowed)}",
    )
