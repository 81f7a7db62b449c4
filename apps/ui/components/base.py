# apps/ui/components/base.py
from __future__ import annotations

import hashlib
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from django.forms.utils import flatatt
from django.template.loader import render_to_string
from django.utils.safestring import SafeString, mark_safe

from apps.ui.assets.handler import RenderPass, current_pass

log = logging.getLogger("ui.components")


class Component(ABC):
    """
    Fragment d'UI rendu côté serveur.

    Au rendu, le composant s'enregistre dans la passe courante (pour que ses
    assets soient injectés une seule fois dans le <head>), puis rend son
    template avec lui-même exposé sous `identifier`.
    """

    identifier: ClassVar[str] = ""

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None) -> None:
        self._attributes: Dict[str, Any] = dict(attributes or {})
        self._component_id: Optional[str] = None

    @classmethod
    @abstractmethod
    def get_assets(cls) -> List[str]:
        """Chemins absolus css/js utilisés si aucun répertoire d'assets ne matche."""

    @abstractmethod
    def template_path(self) -> str:
        ...

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    @property
    def component_id(self) -> Optional[str]:
        return self._component_id

    def attr(self) -> SafeString:
        attrs = {k: v for k, v in self._attributes.items() if v is not None and v is not False}
        return mark_safe(flatatt(attrs).strip())

    def state(self) -> Dict[str, Any]:
        """Paramètres propres au composant, repris dans `component_id`."""
        return {}

    def _make_component_id(self) -> str:
        # contenu + identité : deux instances identiques gardent des ids distincts
        payload = {
            "component": f"{type(self).__module__}.{type(self).__qualname__}:{self.identifier}",
            "attributes": sorted(self._attributes.items()),
            "state": self.state(),
            "instance": id(self),
        }
        token = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.sha256(token.encode("utf-8")).hexdigest()[:12]

    def render(self, render_pass: Optional[RenderPass] = None) -> SafeString:
        if not self.identifier:
            raise TypeError(f"{type(self).__qualname__} has no identifier; decorate it with @registry.register(...)")

        self._component_id = self._make_component_id()
        render_pass = render_pass or current_pass()
        if render_pass is not None:
            render_pass.register_component(self.identifier, type(self))
        else:
            log.debug("Rendering '%s' outside of a RenderPass; assets will not be injected", self.identifier)

        return mark_safe(render_to_string(self.template_path(), {self.identifier: self}))

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()
