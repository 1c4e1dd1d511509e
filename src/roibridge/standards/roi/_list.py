from __future__ import annotations

from typing import Iterator
from pydantic import field_serializer
from pydantic_compat import BaseModel, Field, field_validator
from roibridge.standards.roi._base import Roi2D, RoiModel
from roibridge.types import PlaneIndex


class RoiListModel(BaseModel):
    """List of ROIs, with useful methods."""

    rois: list[RoiModel] = Field(default_factory=list, description="List of ROIs.")

    def model_dump_typed(self) -> dict:
        return {"type": "roilist", **self.model_dump()}

    @field_serializer("rois")
    def _serialize_rois(self, v: list[RoiModel]) -> list[dict]:
        return [roi.model_dump_typed() for roi in v]

    @field_validator("rois", mode="before")
    def _validate_rois(cls, v) -> list[RoiModel]:
        out = []
        for roi in v:
            if isinstance(roi, dict):
                roi_dict = dict(roi)
                roi_type = roi_dict.pop("type", None)
                if roi_type is None:
                    raise ValueError(f"ROI dictionary has no 'type' field: {roi!r}")
                roi = RoiModel.construct(roi_type, roi_dict)
            elif not isinstance(roi, RoiModel):
                raise ValueError(f"Expected a dictionary for 'rois', got: {roi!r}")
            out.append(roi)
        return out

    @classmethod
    def construct(cls, dict_: dict) -> RoiListModel:
        """Construct an instance from a dictionary."""
        return cls.model_validate({"rois": dict_["rois"]})

    def __getitem__(self, key: int) -> RoiModel:
        return self.rois[key]

    def __iter__(self) -> Iterator[RoiModel]:
        return iter(self.rois)

    def __len__(self) -> int:
        return len(self.rois)

    def filter_plane(self, plane: PlaneIndex) -> RoiListModel:
        """Return the ROIs on the given plane. Channel -1 matches any channel."""
        rois = [
            _roi
            for _roi in self
            if isinstance(_roi, Roi2D) and _roi.plane.matches(plane)
        ]
        return RoiListModel(rois=rois)
