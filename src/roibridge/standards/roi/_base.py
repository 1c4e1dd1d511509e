from __future__ import annotations

from functools import cache
from typing import TYPE_CHECKING
from pydantic_compat import BaseModel, Field
from roibridge.consts import PYDANTIC_CONFIG_STRICT
from roibridge.types import PlaneIndex, Rect
from roibridge._utils import iter_subclasses

if TYPE_CHECKING:
    from typing import Self
    from roibridge.geometry import PlanarRegion


class RoiModel(BaseModel):
    """Base class for ROIs (Region of Interest) in images."""

    model_config = PYDANTIC_CONFIG_STRICT

    name: str | None = Field(None, description="Name of the ROI.")

    def model_dump_typed(self) -> dict:
        return {
            "type": roi_type_name(type(self)),
            **self.model_dump(),
        }

    @classmethod
    def construct(cls, typ: str, dict_: dict) -> RoiModel:
        """Construct an instance from a dictionary."""
        model_type = pick_roi_model(typ)
        return model_type.model_validate(dict_)


@cache
def pick_roi_model(typ: str) -> type[RoiModel]:
    for sub in iter_subclasses(RoiModel):
        if roi_type_name(sub) == typ:
            return sub
    raise ValueError(f"Unknown ROI type: {typ!r}")


def roi_type_name(cls: type[RoiModel]) -> str:
    """Return the type name used to serialize ROIs of the given class."""
    typ = cls.__name__.lower()
    if typ.endswith("roi"):
        typ = typ[:-3]
    return typ


class Roi2D(RoiModel):
    """A 2D ROI on one plane of a multi-dimensional image."""

    plane: PlaneIndex = Field(
        default_factory=PlaneIndex, description="Plane that the ROI belongs to."
    )

    def with_plane(self, plane: PlaneIndex) -> Self:
        """Return a copy of the ROI on another plane."""
        return self.model_copy(update={"plane": plane})

    def bbox(self) -> Rect[float]:
        """Return the bounding box of the ROI."""
        raise NotImplementedError

    def shifted(self, dx: float, dy: float) -> Self:
        """Return a new 2D ROI translated by the given amount."""
        raise NotImplementedError

    def is_area(self) -> bool:
        """True if the ROI encloses an area."""
        return False

    def to_region(self) -> PlanarRegion:
        """Return the area enclosed by the ROI."""
        raise TypeError(f"{type(self).__name__} does not enclose an area.")

    def contains(self, x: float, y: float) -> bool:
        """True if the point (x, y) is inside the ROI."""
        if not self.is_area():
            return False
        return self.to_region().contains(x, y)
