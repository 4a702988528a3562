"""Local persistence for Lean90 — all disk I/O lives here."""

from state_store.exceptions import StateDecodeError, StateStoreError, StateWriteError
from state_store.store import JsonStateStore

__all__ = [
    "JsonStateStore",
    "StateDecodeError",
    "StateStoreError",
    "StateWriteError",
]
