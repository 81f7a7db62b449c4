from __future__ import annotations

import tempfile
from pathlib import Path

from django.test import SimpleTestCase

from apps.ui.assets.records import build_record

from .utils import write_files


class AssetRecordTests(SimpleTestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.css, self.js = write_files(self.root, ["card.css", "card.js"], content="x")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_inline_stylesheet_embeds_contents(self) -> None:
        record = build_record(self.css, name="card")
        html = str(record.to_html())
        self.assertTrue(html.startswith(f'<style id="{record.asset_id}">'))
        self.assertIn("x card.css", html)

    def test_inline_script_embeds_contents(self) -> None:
        record = build_record(self.js, name="card")
        self.assertEqual(str(record.to_html()), f'<script id="{record.asset_id}">x card.js</script>')

    def test_linked_assets_use_base_url(self) -> None:
        css = build_record(self.css, name="card", inline=False, base_url="/static/ui/")
        js = build_record(self.js, name="card", inline=False, base_url="/static/ui/")

        self.assertEqual(str(css.to_html()), f'<link rel="stylesheet" id="{css.asset_id}" href="/static/ui/card.css">')
        self.assertEqual(str(js.to_html()), f'<script id="{js.asset_id}" src="/static/ui/card.js" defer></script>')

    def test_not_inline_without_url_falls_back_to_inline(self) -> None:
        record = build_record(self.css, name="card", inline=False)
        self.assertIsNone(record.href)
        self.assertTrue(str(record.to_html()).startswith("<style"))

    def test_custom_prefix_in_asset_id(self) -> None:
        record = build_record(self.css, name="card", prefix="ui")
        self.assertTrue(record.asset_id.startswith("ui-card-"))
        self.assertEqual(record.prefix, "ui")
