from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterator, Union
import numpy as np
from pydantic import field_serializer, model_validator
from pydantic_compat import Field, field_validator
from roibridge.geometry import PlanarRegion
from roibridge.standards.roi._base import Roi2D
from roibridge.types import Point2D, Rect

if TYPE_CHECKING:
    from numpy.typing import NDArray


class RectangleRoi(Roi2D):
    """ROI that represents a rectangle."""

    x: Union[int, float] = Field(
        ..., description="X-coordinate of the top-left corner."
    )
    y: Union[int, float] = Field(
        ..., description="Y-coordinate of the top-left corner."
    )
    width: Union[int, float] = Field(..., description="Width of the rectangle.")
    height: Union[int, float] = Field(..., description="Height of the rectangle.")

    def shifted(self, dx: float, dy: float) -> RectangleRoi:
        """Return a new rectangle shifted by the given amount."""
        return self.model_copy(update={"x": self.x + dx, "y": self.y + dy})

    def area(self) -> float:
        return self.width * self.height

    def bbox(self) -> Rect[float]:
        return Rect(self.x, self.y, self.width, self.height)

    def is_area(self) -> bool:
        return True

    def to_region(self) -> PlanarRegion:
        return PlanarRegion.from_rect(self.bbox())

    def contains(self, x: float, y: float) -> bool:
        return self.bbox().contains(x, y)


class EllipseRoi(Roi2D):
    """ROI that represents an axis-aligned ellipse defined by its bounding box."""

    x: Union[int, float] = Field(
        ..., description="X-coordinate of the top-left corner of the bounding box."
    )
    y: Union[int, float] = Field(
        ..., description="Y-coordinate of the top-left corner of the bounding box."
    )
    width: Union[int, float] = Field(..., description="Diameter along the x-axis.")
    height: Union[int, float] = Field(..., description="Diameter along the y-axis.")

    def shifted(self, dx: float, dy: float) -> EllipseRoi:
        return self.model_copy(update={"x": self.x + dx, "y": self.y + dy})

    def area(self) -> float:
        return math.pi * self.width * self.height / 4

    def circumference(self) -> float:
        a, b = self.width / 2, self.height / 2
        return math.pi * (3 * (a + b) - math.sqrt((3 * a + b) * (a + 3 * b)))

    def center(self) -> Point2D:
        return Point2D(self.x + self.width / 2, self.y + self.height / 2)

    def bbox(self) -> Rect[float]:
        return Rect(self.x, self.y, self.width, self.height)

    def is_area(self) -> bool:
        return True

    def to_region(self) -> PlanarRegion:
        return PlanarRegion.from_ellipse(self.bbox())

    def contains(self, x: float, y: float) -> bool:
        if self.width <= 0 or self.height <= 0:
            return False
        cx, cy = self.center()
        dx = (x - cx) / (self.width / 2)
        dy = (y - cy) / (self.height / 2)
        return dx**2 + dy**2 < 1


class LineRoi(Roi2D):
    """ROI that represents a straight line segment."""

    x1: float = Field(..., description="X-coordinate of the first point.")
    y1: float = Field(..., description="Y-coordinate of the first point.")
    x2: float = Field(..., description="X-coordinate of the second point.")
    y2: float = Field(..., description="Y-coordinate of the second point.")

    def shifted(self, dx: float, dy: float) -> LineRoi:
        return self.model_copy(
            update={
                "x1": self.x1 + dx,
                "y1": self.y1 + dy,
                "x2": self.x2 + dx,
                "y2": self.y2 + dy,
            }
        )

    def start(self) -> Point2D:
        return Point2D(self.x1, self.y1)

    def end(self) -> Point2D:
        return Point2D(self.x2, self.y2)

    def length(self) -> float:
        """Length of the line."""
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    def degree(self) -> float:
        """Angle in degrees."""
        return math.degrees(math.atan2(self.y2 - self.y1, self.x2 - self.x1))

    def bbox(self) -> Rect[float]:
        return Rect.from_corners(self.x1, self.y1, self.x2, self.y2)


class PointsRoi(Roi2D):
    """ROI that represents a set of points with no implied connectivity."""

    xs: Any = Field(..., description="List of x-coordinates.")
    ys: Any = Field(..., description="List of y-coordinates.")

    @field_validator("xs", "ys")
    def _validate_np_arrays(cls, v) -> NDArray[np.float64]:
        out = np.asarray(v)
        if out.size == 0:
            return np.zeros(0, dtype=np.float64)
        if out.dtype.kind not in "iuf":
            raise ValueError("Must be a numerical array.")
        if out.ndim != 1:
            raise ValueError(f"Must be a 1D array, got shape {out.shape}.")
        return out.astype(np.float64, copy=False)

    @model_validator(mode="after")
    def _validate_same_length(self):
        if self.xs.shape != self.ys.shape:
            raise ValueError(
                f"xs and ys must have the same length, got {self.xs.size} and "
                f"{self.ys.size}."
            )
        return self

    @field_serializer("xs", "ys")
    def _serialize_array(self, v: NDArray[np.float64]) -> list[float]:
        return v.tolist()

    @classmethod
    def from_points(cls, points, **kwargs) -> PointsRoi:
        """Construct from a sequence of (x, y) points."""
        arr = np.asarray(list(points), dtype=np.float64).reshape(-1, 2)
        return cls(xs=arr[:, 0], ys=arr[:, 1], **kwargs)

    def __len__(self) -> int:
        return self.xs.size

    def iter_points(self) -> Iterator[Point2D]:
        for x, y in zip(self.xs.tolist(), self.ys.tolist()):
            yield Point2D(x, y)

    def points(self) -> list[Point2D]:
        return list(self.iter_points())

    def is_empty(self) -> bool:
        return self.xs.size == 0

    def shifted(self, dx: float, dy: float) -> PointsRoi:
        return self.model_copy(update={"xs": self.xs + dx, "ys": self.ys + dy})

    def bbox(self) -> Rect[float]:
        if self.is_empty():
            return Rect(0.0, 0.0, 0.0, 0.0)
        xmin, xmax = np.min(self.xs), np.max(self.xs)
        ymin, ymax = np.min(self.ys), np.max(self.ys)
        return Rect(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))


class PolylineRoi(PointsRoi):
    """ROI that represents an open line through the points, in order."""

    def length(self) -> float:
        return float(np.sum(np.hypot(np.diff(self.xs), np.diff(self.ys))))


class PolygonRoi(PolylineRoi):
    """ROI that represents a closed polygon.

    The closing edge from the last to the first vertex is implicit.
    """

    def length(self) -> float:
        xs = np.append(self.xs, self.xs[:1])
        ys = np.append(self.ys, self.ys[:1])
        return float(np.sum(np.hypot(np.diff(xs), np.diff(ys))))

    def area(self) -> float:
        """Area enclosed by the polygon (shoelace formula)."""
        if len(self) < 3:
            return 0.0
        xs, ys = self.xs, self.ys
        return float(abs(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1))) / 2)

    def is_area(self) -> bool:
        return True

    def to_region(self) -> PlanarRegion:
        return PlanarRegion.from_rings([np.stack([self.xs, self.ys], axis=1)])


class AreaRoi(Roi2D):
    """ROI that represents a general area, possibly disjoint and with holes."""

    region: PlanarRegion = Field(
        default_factory=PlanarRegion, description="Contours and holes of the area."
    )

    @field_validator("region", mode="before")
    def _validate_region(cls, v) -> PlanarRegion:
        if isinstance(v, PlanarRegion):
            return v
        return PlanarRegion.from_list(v)

    @field_serializer("region")
    def _serialize_region(self, v: PlanarRegion) -> list[list]:
        return v.to_list()

    def is_empty(self) -> bool:
        return self.region.is_empty()

    def area(self) -> float:
        return self.region.area()

    def shifted(self, dx: float, dy: float) -> AreaRoi:
        return self.model_copy(update={"region": self.region.shifted(dx, dy)})

    def bbox(self) -> Rect[float]:
        return self.region.bbox()

    def is_area(self) -> bool:
        return True

    def to_region(self) -> PlanarRegion:
        return self.region
