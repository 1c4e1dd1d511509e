"""Persistence of named resources and JSON serialization of models."""

from roibridge.io.json_bridge import (
    from_json,
    from_typed_json,
    kind_of,
    to_json,
    to_typed_json,
)
from roibridge.io.resources import (
    JsonResourceStore,
    PickleResourceStore,
    ResourceStore,
    StringResourceStore,
)

__all__ = [
    "from_json",
    "from_typed_json",
    "kind_of",
    "to_json",
    "to_typed_json",
    "JsonResourceStore",
    "PickleResourceStore",
    "ResourceStore",
    "StringResourceStore",
]
