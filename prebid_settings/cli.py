"""Loads the configured file settings once and reports what was indexed."""

from __future__ import annotations

import logging
import sys

from .config import get_server_config
from .settings import SettingsError, build_settings


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    config = get_server_config()
    try:
        application_settings = build_settings(config)
    except SettingsError as exc:
        print(f"settings check failed: {exc}", file=sys.stderr)
        return 1
    snapshot = application_settings.snapshot
    print(f"settings file: {config.settings.filename}")
    print(f"stored requests dir: {config.settings.stored_requests_dir}")
    print(f"accounts: {len(snapshot.accounts)}")
    print(f"ad unit configs: {len(snapshot.configs)}")
    print(f"stored requests: {len(snapshot.stored_requests)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
