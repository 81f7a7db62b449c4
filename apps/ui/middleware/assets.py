# apps/ui/middleware/assets.py
from __future__ import annotations

import logging

from django.conf import settings

from apps.ui.assets.handler import RenderPass

log = logging.getLogger("ui.middleware.assets")


class ComponentAssetsMiddleware:
    """
    Ouvre une RenderPass par requête puis injecte les assets des composants
    rendus dans le <head> des réponses HTML.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        ignored = getattr(settings, "UI_IGNORED_COMPONENTS", ()) or ()
        with RenderPass(ignored=ignored) as render_pass:
            request.ui_render_pass = render_pass
            response = self.get_response(request)
            if hasattr(response, "render") and callable(response.render) and not getattr(response, "is_rendered", True):
                response.render()
            if self._should_inject(response):
                self._inject(response, render_pass)
        return response

    @staticmethod
    def _should_inject(response) -> bool:
        if not getattr(settings, "UI_INJECT_ASSETS", True):
            return False
        if getattr(response, "streaming", False):
            return False
        content_type = response.get("Content-Type", "") or ""
        return content_type.split(";")[0].strip().lower() == "text/html"

    def _inject(self, response, render_pass: RenderPass) -> None:
        if not len(render_pass.called):
            return
        charset = getattr(response, "charset", None) or settings.DEFAULT_CHARSET
        html = response.content.decode(charset)
        injected = render_pass.inject(html)
        if injected is html:
            return
        response.content = injected.encode(charset)
        if response.has_header("Content-Length"):
            response["Content-Length"] = str(len(response.content))
        log.debug("Injected component assets for %d component(s)", len(render_pass.called))
