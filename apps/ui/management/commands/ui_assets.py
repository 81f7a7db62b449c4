"""Dump the component asset search path and what each registered component resolves to."""
from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from apps.ui.assets.errors import ComponentAssetError
from apps.ui.assets.handler import get_environment
from apps.ui.components import registry


class Command(BaseCommand):
    help = "Inspect component asset directories and resolved assets."

    def add_arguments(self, parser):
        parser.add_argument("identifiers", nargs="*", help="Components to resolve (default: all registered).")

    def handle(self, *args, **options) -> None:
        env = get_environment()
        self.stdout.write("=== component assets ===")
        for idx, directory in enumerate(env.directories()):
            url = directory.url or "(inline only)"
            self.stdout.write(f"[{idx}] {directory.path} -> {url}")

        identifiers = options.get("identifiers") or registry.all_identifiers()
        failures = 0
        for identifier in identifiers:
            fallback = None
            if registry.exists(identifier):
                fallback = registry.get(identifier).get_assets()
            try:
                records = env.resolve(identifier, fallback)
            except ComponentAssetError as exc:
                failures += 1
                self.stderr.write(f"{identifier}: ERROR {exc}")
                continue
            self.stdout.write(f"{identifier}: {len(records)} asset(s)")
            for record in records.values():
                self.stdout.write(f"  - {record.asset_id} [{record.kind}] {record.path}")

        if failures:
            raise CommandError(f"{failures} component(s) failed to resolve")
        self.stdout.write("=== end ===")
