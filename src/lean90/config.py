"""Environment-variable-based configuration for the app and the CLI report."""

from __future__ import annotations

import os
from pathlib import Path

from lean90.models.enums import DEFAULT_START_DATE_ISO

DATA_DIR: Path = Path(os.environ.get("LEAN90_DATA_DIR", "~/.lean90")).expanduser()
# One record per schema version; bumping the key starts a fresh record.
STORAGE_KEY: str = os.environ.get("LEAN90_STORAGE_KEY", "lean90_v2")
START_DATE_ISO: str = os.environ.get("LEAN90_START_DATE", DEFAULT_START_DATE_ISO)
RESEED_EMPTY: bool = os.environ.get("LEAN90_RESEED_EMPTY", "1").strip().lower() not in (
    "0",
    "false",
    "no",
)
LOG_LEVEL: str = os.environ.get("LEAN90_LOG_LEVEL", "INFO").upper()
