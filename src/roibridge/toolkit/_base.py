from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING
from roibridge.types import Rect

if TYPE_CHECKING:
    from roibridge.toolkit.core import ShapeRoi


class RoiType(IntEnum):
    """Type tags of the toolkit ROIs."""

    RECTANGLE = 0
    OVAL = 1
    POLYGON = 2
    FREEROI = 3
    TRACED_ROI = 4
    LINE = 5
    POLYLINE = 6
    FREELINE = 7
    ANGLE = 8
    COMPOSITE = 9
    POINT = 10


_AREA_TYPES = frozenset(
    [RoiType.RECTANGLE, RoiType.OVAL, RoiType.POLYGON, RoiType.FREEROI,
     RoiType.TRACED_ROI, RoiType.COMPOSITE]
)  # fmt: skip
_LINE_TYPES = frozenset([RoiType.LINE, RoiType.POLYLINE, RoiType.FREELINE])
UNKNOWN_TYPE = -1


def type_name(typ: int) -> str:
    """Return the name of a type tag, which may not be a known RoiType."""
    if typ == UNKNOWN_TYPE:
        return "UNKNOWN"
    try:
        return RoiType(typ).name
    except ValueError:
        return str(typ)


class ToolkitRoi:
    """Base class of the toolkit ROIs, defined in toolkit pixel coordinates."""

    def __init__(self, name: str | None = None):
        self._name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{type_name(self.type)}>{tuple(self.bounds())}"

    @property
    def type(self) -> int:
        """The type tag of this ROI, or UNKNOWN_TYPE if it has none."""
        return UNKNOWN_TYPE

    @property
    def name(self) -> str | None:
        return self._name

    def bounds(self) -> Rect[float]:
        """Bounding box in toolkit pixel coordinates."""
        raise NotImplementedError

    @property
    def x_base(self) -> float:
        return self.bounds().left

    @property
    def y_base(self) -> float:
        return self.bounds().top

    def is_area(self) -> bool:
        """True if the ROI encloses a filled area."""
        return self.type in _AREA_TYPES

    def is_line(self) -> bool:
        """True if the ROI is a straight, segmented or freehand line."""
        return self.type in _LINE_TYPES

    def contains(self, x: float, y: float) -> bool:
        """True if the point (x, y) is inside the ROI."""
        return False

    def to_shape(self) -> ShapeRoi:
        """Convert the ROI into a general shape ROI."""
        raise TypeError(f"{type(self).__name__} cannot be converted to a shape.")
