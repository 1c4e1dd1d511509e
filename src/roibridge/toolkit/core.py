from __future__ import annotations

import math
from typing import TYPE_CHECKING
import numpy as np
from matplotlib.path import Path
from roibridge.toolkit._base import RoiType, ToolkitRoi
from roibridge.toolkit import _path
from roibridge.types import Rect

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


class Roi(ToolkitRoi):
    """Rectangular ROI, optionally with rounded corners."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner_diameter: float = 0,
        name: str | None = None,
    ):
        super().__init__(name)
        self._rect = Rect(float(x), float(y), float(width), float(height))
        self._corner_diameter = float(corner_diameter)

    @property
    def type(self) -> int:
        return RoiType.RECTANGLE

    @property
    def corner_diameter(self) -> float:
        return self._corner_diameter

    def bounds(self) -> Rect[float]:
        return self._rect

    def contains(self, x: float, y: float) -> bool:
        if self._corner_diameter > 0:
            return self.to_shape().contains(x, y)
        return self._rect.contains(x, y)

    def to_shape(self) -> ShapeRoi:
        path = _path.rounded_rect_path(self._rect, self._corner_diameter)
        return ShapeRoi(path, name=self.name)


class OvalRoi(ToolkitRoi):
    """Elliptical ROI defined by its bounding box."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        name: str | None = None,
    ):
        super().__init__(name)
        self._rect = Rect(float(x), float(y), float(width), float(height))

    @property
    def type(self) -> int:
        return RoiType.OVAL

    def bounds(self) -> Rect[float]:
        return self._rect

    def contains(self, x: float, y: float) -> bool:
        rect = self._rect
        if rect.width <= 0 or rect.height <= 0:
            return False
        dx = (x - rect.left - rect.width / 2) / (rect.width / 2)
        dy = (y - rect.top - rect.height / 2) / (rect.height / 2)
        return dx**2 + dy**2 < 1

    def to_shape(self) -> ShapeRoi:
        return ShapeRoi(_path.ellipse_path(self._rect), name=self.name)


class Line(ToolkitRoi):
    """Straight line ROI between two sub-pixel end points."""

    def __init__(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        name: str | None = None,
    ):
        super().__init__(name)
        self.x1d = float(x1)
        self.y1d = float(y1)
        self.x2d = float(x2)
        self.y2d = float(y2)

    @property
    def type(self) -> int:
        return RoiType.LINE

    def bounds(self) -> Rect[float]:
        return Rect.from_corners(self.x1d, self.y1d, self.x2d, self.y2d)

    def length(self) -> float:
        return math.hypot(self.x2d - self.x1d, self.y2d - self.y1d)


class PolygonRoi(ToolkitRoi):
    """ROI made of an ordered list of float vertices.

    The type tag tells how the vertices are interpreted: ``POLYGON``, ``FREEROI`` and
    ``TRACED_ROI`` are closed areas, ``POLYLINE`` and ``FREELINE`` are open lines and
    ``ANGLE`` is a three-point angle.
    """

    _allowed_types = frozenset(
        [RoiType.POLYGON, RoiType.FREEROI, RoiType.TRACED_ROI, RoiType.POLYLINE,
         RoiType.FREELINE, RoiType.ANGLE]
    )  # fmt: skip

    def __init__(
        self,
        xs: ArrayLike,
        ys: ArrayLike,
        type: int = RoiType.POLYGON,
        name: str | None = None,
    ):
        super().__init__(name)
        if type not in self._allowed_types:
            raise ValueError(f"Invalid polygon type: {type!r}")
        self._xs = np.array(xs, dtype=np.float64).ravel()
        self._ys = np.array(ys, dtype=np.float64).ravel()
        if self._xs.shape != self._ys.shape:
            raise ValueError(
                f"xs and ys must have the same length, got {self._xs.size} and "
                f"{self._ys.size}."
            )
        self._type = RoiType(type)

    @property
    def type(self) -> int:
        return self._type

    @property
    def n_coordinates(self) -> int:
        return self._xs.size

    def float_polygon(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Copies of the x and y coordinates of the vertices."""
        return self._xs.copy(), self._ys.copy()

    def bounds(self) -> Rect[float]:
        if self._xs.size == 0:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect.from_corners(
            float(self._xs.min()),
            float(self._ys.min()),
            float(self._xs.max()),
            float(self._ys.max()),
        )

    def contains(self, x: float, y: float) -> bool:
        if not self.is_area():
            return False
        return self.to_shape().contains(x, y)

    def to_shape(self) -> ShapeRoi:
        if not self.is_area():
            raise TypeError(f"{self._type.name} polygon does not enclose an area.")
        return ShapeRoi(_path.polygon_path(self._xs, self._ys), name=self.name)


class PointRoi(PolygonRoi):
    """ROI made of independent points."""

    _allowed_types = frozenset([RoiType.POINT])

    def __init__(self, xs: ArrayLike, ys: ArrayLike, name: str | None = None):
        super().__init__(xs, ys, type=RoiType.POINT, name=name)


class ShapeRoi(ToolkitRoi):
    """General ROI defined by a compound path, filled with the even-odd rule.

    The path is stored relative to the base, the top-left corner of its bounding box.
    """

    def __init__(self, path: Path, name: str | None = None):
        super().__init__(name)
        bounds = _path.path_bounds(path)
        self._bounds = bounds
        self._path = _path.translate_path(path, -bounds.left, -bounds.top)

    @property
    def type(self) -> int:
        return RoiType.COMPOSITE

    def bounds(self) -> Rect[float]:
        return self._bounds

    def shape(self) -> Path:
        """The path relative to (x_base, y_base)."""
        return self._path

    def absolute_path(self) -> Path:
        """The path in toolkit pixel coordinates."""
        return _path.translate_path(self._path, self.x_base, self.y_base)

    def is_empty(self) -> bool:
        return len(_path.rings_from_path(self._path)) == 0

    def contains(self, x: float, y: float) -> bool:
        return _path.path_contains(self._path, x - self.x_base, y - self.y_base)

    def to_shape(self) -> ShapeRoi:
        return self
