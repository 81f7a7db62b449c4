from __future__ import annotations

import tempfile
from pathlib import Path

from django.template import Context, Template
from django.test import SimpleTestCase

from apps.ui.assets.handler import AssetEnvironment, NATIVE_ASSET_DIR, RenderPass
from apps.ui.components.registry import ComponentNotRegistered

from .utils import write_files


class UiComponentsTagsTests(SimpleTestCase):
    def _render(self, source: str, render_pass: RenderPass) -> str:
        with render_pass:
            return Template("{% load ui_components %}" + source).render(Context({}))

    def _pass(self) -> RenderPass:
        return RenderPass(AssetEnvironment([], native=NATIVE_ASSET_DIR))

    def test_toast_tag_renders_and_registers(self) -> None:
        render_pass = self._pass()
        html = self._render('{% toast "success" "Saved" %}', render_pass)

        self.assertIn("notification-success", html)
        self.assertIn("Saved", html)
        self.assertIn("notification", render_pass.called)

    def test_component_tag_looks_up_registry(self) -> None:
        render_pass = self._pass()
        html = self._render('{% component "notification" type="info" message="Hi" %}', render_pass)
        self.assertIn("notification-info", html)

    def test_component_tag_unknown_identifier(self) -> None:
        with self.assertRaises(ComponentNotRegistered):
            self._render('{% component "carousel" %}', self._pass())

    def test_component_assets_tag_emits_once(self) -> None:
        render_pass = self._pass()
        html = self._render('{% toast "info" "A" %}{% component_assets %}{% component_assets %}', render_pass)

        self.assertEqual(html.count('id="component-notification-'), 2)
        self.assertEqual(render_pass.emit(), [])

    def test_component_assets_outside_pass_is_empty(self) -> None:
        html = Template("{% load ui_components %}{% component_assets %}").render(Context({}))
        self.assertEqual(html, "")

    def test_close_button_tag(self) -> None:
        html = Template('{% load ui_components %}{% close_button "Dismiss" %}').render(Context({}))
        self.assertIn('aria-label="Dismiss"', html)

    def test_core_assets_emitted_once_per_pass(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            core = Path(tmp).resolve() / "core"
            write_files(core, ["core.css", "layout.css"])
            render_pass = RenderPass(AssetEnvironment([], native=NATIVE_ASSET_DIR, core=core))
            html = self._render("{% core_assets %}{% core_assets %}", render_pass)

        self.assertEqual(html.count("<style "), 2)
        self.assertEqual(html.count("core.css"), 1)
        self.assertEqual(html.count("layout.css"), 1)
