"""Custom exception hierarchy for the state store."""

from __future__ import annotations

from pathlib import Path


class StateStoreError(Exception):
    """Base exception for all state_store errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StateDecodeError(StateStoreError):
    """The stored record is not valid JSON or not a valid state document."""


class StateWriteError(StateStoreError):
    """Writing or removing the record failed at the filesystem level."""
