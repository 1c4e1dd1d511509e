"""JSON serialization of ROI models, keyed by their kind."""

from __future__ import annotations

import json
from typing import Union
from roibridge.exceptions import UnknownKindError
from roibridge.standards.roi import (
    RoiListModel,
    RoiModel,
    pick_roi_model,
    roi_type_name,
)

_ROI_LIST_KIND = "roilist"

Model = Union[RoiModel, RoiListModel]


def kind_of(model: Model) -> str:
    """Return the kind tag of a model."""
    if isinstance(model, RoiListModel):
        return _ROI_LIST_KIND
    if isinstance(model, RoiModel):
        return roi_type_name(type(model))
    raise UnknownKindError(f"Cannot serialize {type(model).__name__}.")


def model_type_for(kind: str) -> type[Model]:
    if kind == _ROI_LIST_KIND:
        return RoiListModel
    try:
        return pick_roi_model(kind)
    except ValueError:
        raise UnknownKindError(f"Unknown model kind: {kind!r}") from None


def to_json(model: Model) -> str:
    """Serialize a model to JSON."""
    kind_of(model)
    return model.model_dump_json()


def from_json(text: str, kind: str) -> Model:
    """Deserialize a model of the given kind from JSON."""
    return model_type_for(kind).model_validate_json(text)


def to_typed_json(model: Model) -> str:
    """Serialize a model to JSON, with its kind stored in the "type" field."""
    return json.dumps(model.model_dump_typed())


def from_typed_json(text: str) -> Model:
    """Deserialize a model serialized by `to_typed_json`."""
    data = json.loads(text)
    if not isinstance(data, dict) or "type" not in data:
        raise UnknownKindError("JSON object has no 'type' field.")
    kind = data.pop("type")
    return model_type_for(kind).model_validate(data)
