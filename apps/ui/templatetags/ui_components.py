"""
Templatetags des composants UI.

    {% load ui_components %}
    {% toast "success" "Saved" %}
    {% component "notification" type="info" message="Hello" %}
    {% component_assets %}   {# optionnel : sinon injection auto par le middleware #}
"""
from __future__ import annotations

from typing import Optional

from django import template
from django.utils.safestring import SafeString, mark_safe

from apps.ui.assets.handler import current_pass, get_environment
from apps.ui.components import registry
from apps.ui.components.button import Button
from apps.ui.components.runtime import runtime

register = template.Library()


@register.simple_tag
def toast(type: str, title: str, description: Optional[str] = None, timeout: Optional[int] = None) -> SafeString:
    return runtime.toast(type, title, description=description, timeout=timeout).render()


@register.simple_tag
def component(identifier: str, **kwargs) -> SafeString:
    component_class = registry.get(identifier)
    return component_class(**kwargs).render()


@register.simple_tag
def component_assets() -> SafeString:
    """Émet ici les assets des composants déjà rendus ; le middleware n'émettra que le reste."""
    render_pass = current_pass()
    if render_pass is None:
        return mark_safe("")
    return mark_safe("\n".join(render_pass.emit()))


@register.simple_tag
def core_assets() -> SafeString:
    render_pass = current_pass()
    if render_pass is not None:
        records = render_pass.environment.core_assets()
        # déjà émis plus haut dans la page (layout + partial)
        return mark_safe("\n".join(render_pass.emit_records(records)))
    records = get_environment().core_assets()
    return mark_safe("\n".join(str(r.to_html()) for r in records.values()))


@register.simple_tag
def close_button(label: str = "Close") -> SafeString:
    return Button.close(label).render()
