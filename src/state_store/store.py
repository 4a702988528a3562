"""JSON file store for the single application state record.

One file per schema-version key (``<data_dir>/<key>.json``), replaced
wholesale on every save. There is no migration: a new key simply starts a new
record and the old file is left where it is.

Two API levels:

* ``read`` / ``write`` / ``clear`` raise :mod:`state_store.exceptions` errors.
* ``load`` / ``save`` / ``load_or_default`` never raise for storage problems:
  a malformed or unreadable record is treated as no record, and a failed write
  is logged and dropped. The in-memory state stays authoritative.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from lean90.log_store import reset_state
from lean90.models.app_state import AppState
from lean90.models.enums import DEFAULT_START_DATE_ISO
from lean90.serialization import state_from_json_string, state_to_json_string

from state_store.exceptions import StateDecodeError, StateWriteError

logger = logging.getLogger(__name__)

_DEFAULT_DATA_DIR = Path("~/.lean90").expanduser()
_DEFAULT_KEY = "lean90_v2"


class JsonStateStore:
    """Persists one AppState as a JSON document."""

    def __init__(
        self,
        data_dir: Path | str = _DEFAULT_DATA_DIR,
        key: str = _DEFAULT_KEY,
    ) -> None:
        self._data_dir = Path(data_dir).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._data_dir / f"{self._key}.json"

    # ------------------------------------------------------------------
    # Strict API
    # ------------------------------------------------------------------

    def read(self) -> AppState | None:
        """Read the stored state, or None if there is no record.

        Raises:
            StateDecodeError: The record exists but cannot be decoded.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StateDecodeError(f"Could not read {self.path}: {exc}", self.path) from exc

        if not text.strip():
            return None
        try:
            return state_from_json_string(text)
        except (ValueError, TypeError, KeyError) as exc:
            raise StateDecodeError(f"Malformed state in {self.path}: {exc}", self.path) from exc

    def write(self, state: AppState) -> None:
        """Atomically replace the stored record with *state*.

        Raises:
            StateWriteError: The file could not be written.
        """
        payload = state_to_json_string(state, indent=2) + "\n"
        temp_path: Path | None = None
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w", dir=self._data_dir, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tmp:
                tmp.write(payload)
                temp_path = Path(tmp.name)
            os.replace(temp_path, self.path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StateWriteError(f"Could not write {self.path}: {exc}", self.path) from exc

    def clear(self) -> None:
        """Delete the stored record if present.

        Raises:
            StateWriteError: The file exists but could not be removed.
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StateWriteError(f"Could not remove {self.path}: {exc}", self.path) from exc

    # ------------------------------------------------------------------
    # Lenient API
    # ------------------------------------------------------------------

    def load(self) -> AppState | None:
        """Like :meth:`read`, but a malformed record counts as no record."""
        try:
            return self.read()
        except StateDecodeError as exc:
            logger.warning("Ignoring stored state: %s", exc)
            return None

    def save(self, state: AppState) -> bool:
        """Best-effort :meth:`write`. Returns False if the write failed."""
        try:
            self.write(state)
        except StateWriteError as exc:
            logger.warning("State not saved: %s", exc)
            return False
        logger.debug("Saved state to %s", self.path)
        return True

    def load_or_default(
        self,
        today_iso: str,
        start_date_iso: str = DEFAULT_START_DATE_ISO,
        reseed_empty: bool = True,
    ) -> AppState:
        """Stored state, or fresh defaults with today selected and seeded."""
        state = self.load()
        if state is None:
            logger.info("No stored state under %s, starting fresh", self.path)
            return reset_state(today_iso, start_date_iso, reseed_empty=reseed_empty)
        return state

    def reset(
        self,
        today_iso: str,
        start_date_iso: str = DEFAULT_START_DATE_ISO,
        reseed_empty: bool = True,
    ) -> AppState:
        """Reset operation: drop the record and return fresh defaults."""
        try:
            self.clear()
        except StateWriteError as exc:
            logger.warning("Stored state not cleared: %s", exc)
        return reset_state(today_iso, start_date_iso, reseed_empty=reseed_empty)
