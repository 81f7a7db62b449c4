from __future__ import annotations

import tempfile
from pathlib import Path
from unittest import mock

from django.test import SimpleTestCase

from apps.ui.assets.errors import UnreadableAssetError, UnsupportedAssetKindError
from apps.ui.assets.paths import DirectorySearchPath
from apps.ui.assets.records import SCRIPT, STYLESHEET
from apps.ui.assets.resolver import MATCH_PREFIX, AssetResolver

from .utils import write_files


class AssetResolverTests(SimpleTestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.dir_a = self.root / "a"
        self.dir_b = self.root / "b"
        self.native = self.root / "native"
        for d in (self.dir_a, self.dir_b, self.native):
            d.mkdir()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _resolver(self, *dirs, **kwargs) -> AssetResolver:
        return AssetResolver(DirectorySearchPath(dirs, native=self.native), **kwargs)

    def test_same_identifier_twice_returns_identical_collection(self) -> None:
        write_files(self.dir_a, ["button.css", "button.js"])
        resolver = self._resolver(self.dir_a)

        first = resolver.resolve("button")
        second = resolver.resolve("button")

        self.assertIs(first, second)
        self.assertEqual(list(first.keys()), list(second.keys()))
        self.assertEqual(len(first), 2)

    def test_resolution_freezes_search_path(self) -> None:
        resolver = self._resolver(self.dir_a)
        self.assertFalse(resolver.search_path.frozen)
        resolver.resolve("anything")
        self.assertTrue(resolver.search_path.frozen)

    def test_first_matching_directory_wins(self) -> None:
        write_files(self.dir_a, ["button.css"])
        write_files(self.dir_b, ["button.css", "button.js"])
        resolver = self._resolver(self.dir_a, self.dir_b)

        records = resolver.resolve("button")

        self.assertEqual(len(records), 1)
        record = next(iter(records.values()))
        self.assertEqual(record.path.parent, self.dir_a)

    def test_user_directory_takes_precedence_over_native(self) -> None:
        write_files(self.native, ["button.css"])
        write_files(self.dir_b, ["button.js"])
        resolver = self._resolver(self.dir_b)

        records = resolver.resolve("button")
        self.assertEqual([r.path.parent for r in records.values()], [self.dir_b])

    def test_fallback_used_when_no_directory_matches(self) -> None:
        declared_dir = self.root / "declared"
        css, js = write_files(declared_dir, ["x.css", "y.js"])
        resolver = self._resolver()

        records = resolver.resolve("widget", fallback=[str(css), str(js)])

        kinds = [(r.path.name, r.kind) for r in records.values()]
        self.assertEqual(kinds, [("x.css", STYLESHEET), ("y.js", SCRIPT)])

    def test_fallback_ignored_when_directory_matches(self) -> None:
        write_files(self.dir_a, ["widget.css"])
        declared = write_files(self.root / "declared", ["other.js"])
        resolver = self._resolver(self.dir_a)

        records = resolver.resolve("widget", fallback=[str(p) for p in declared])
        self.assertEqual([r.path.name for r in records.values()], ["widget.css"])

    def test_no_match_and_no_fallback_caches_empty_mapping(self) -> None:
        resolver = self._resolver(self.dir_a)
        self.assertEqual(resolver.resolve("ghost"), {})
        self.assertTrue(resolver.is_cached("ghost"))

    def test_unreadable_file_fails_and_is_not_cached(self) -> None:
        write_files(self.dir_a, ["button.css"])
        resolver = self._resolver(self.dir_a)

        with mock.patch("apps.ui.assets.records.os.access", return_value=False):
            with self.assertRaises(UnreadableAssetError):
                resolver.resolve("button")

        self.assertFalse(resolver.is_cached("button"))
        self.assertIsNone(resolver.cached("button"))

    def test_missing_fallback_file_is_unreadable(self) -> None:
        resolver = self._resolver()
        with self.assertRaises(UnreadableAssetError):
            resolver.resolve("widget", fallback=[str(self.root / "nope.css")])
        self.assertFalse(resolver.is_cached("widget"))

    def test_unsupported_extension_fails(self) -> None:
        write_files(self.dir_a, ["button.css", "button.txt"])
        resolver = self._resolver(self.dir_a)

        with self.assertRaises(UnsupportedAssetKindError) as ctx:
            resolver.resolve("button")
        self.assertEqual(ctx.exception.extension, "txt")
        self.assertFalse(resolver.is_cached("button"))

    def test_strict_match_excludes_prefix_collisions(self) -> None:
        write_files(self.dir_a, ["button.css", "button.min.js", "button-group.css"])
        resolver = self._resolver(self.dir_a)

        names = [r.path.name for r in resolver.resolve("button").values()]
        self.assertEqual(names, ["button.css", "button.min.js"])

    def test_prefix_match_keeps_raw_glob_behaviour(self) -> None:
        write_files(self.dir_a, ["button.css", "button-group.css"])
        resolver = self._resolver(self.dir_a, match=MATCH_PREFIX)

        names = sorted(r.path.name for r in resolver.resolve("button").values())
        self.assertEqual(names, ["button-group.css", "button.css"])

    def test_subdirectories_are_not_candidates(self) -> None:
        (self.dir_a / "button.d").mkdir()
        write_files(self.dir_a, ["button.css"])
        resolver = self._resolver(self.dir_a)

        names = [r.path.name for r in resolver.resolve("button").values()]
        self.assertEqual(names, ["button.css"])

    def test_unknown_match_mode_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self._resolver(match="fuzzy")

    def test_asset_ids_are_stable_and_prefixed(self) -> None:
        write_files(self.dir_a, ["button.css"])
        one = self._resolver(self.dir_a).resolve("button")
        two = self._resolver(self.dir_a).resolve("button")

        self.assertEqual(list(one.keys()), list(two.keys()))
        self.assertTrue(next(iter(one)).startswith("component-button-"))

    def test_core_assets_lists_directory_uncached(self) -> None:
        core = self.root / "core"
        write_files(core, ["base.css", "base.js"])
        resolver = self._resolver()

        records = resolver.core_assets(core)
        self.assertEqual([r.path.name for r in records.values()], ["base.css", "base.js"])
        self.assertFalse(resolver.is_cached("core"))
        self.assertEqual(resolver.core_assets(self.root / "missing"), {})
