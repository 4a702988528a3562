"""Serialization module — AppState to and from the persisted JSON document."""

from lean90.serialization.state_json import (
    state_from_dict,
    state_from_json_string,
    state_to_dict,
    state_to_json_string,
)

__all__ = [
    "state_from_dict",
    "state_from_json_string",
    "state_to_dict",
    "state_to_json_string",
]
