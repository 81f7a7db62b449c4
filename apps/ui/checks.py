from __future__ import annotations
from pathlib import Path

from django.conf import settings
from django.core.checks import register, Warning, Error

from .assets.resolver import MATCH_MODES
from .components import registry


def _dir_path(entry) -> str:
    if isinstance(entry, dict):
        return str(entry.get("path") or "")
    return str(entry or "")


@register()
def asset_dirs_exist_check(app_configs, **kwargs):
    # Pas bloquant : un répertoire absent ne matchera simplement jamais
    warns = []
    for entry in getattr(settings, "UI_COMPONENT_ASSET_DIRS", []) or []:
        raw = _dir_path(entry)
        if not raw or not Path(raw).expanduser().is_dir():
            warns.append(Warning(
                f"Répertoire d'assets composants introuvable: {raw!r}",
                hint="Corrige UI_COMPONENT_ASSET_DIRS ou crée le répertoire.",
                id="ui.W001"))
    return warns


@register()
def asset_match_mode_check(app_configs, **kwargs):
    mode = getattr(settings, "UI_ASSET_MATCH", "strict")
    if mode not in MATCH_MODES:
        return [Error(
            f"UI_ASSET_MATCH invalide: {mode!r}",
            hint=f"Valeurs possibles: {', '.join(MATCH_MODES)}",
            id="ui.E001")]
    return []


@register()
def registered_identifiers_check(app_configs, **kwargs):
    errors = []
    for identifier in registry.all_identifiers():
        if not identifier.strip():
            errors.append(Error(
                "Composant enregistré avec un identifiant vide.",
                id="ui.E002"))
    return errors
