"""Planar regions made of contours with holes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator, NamedTuple
import numpy as np
import shapely
from shapely import affinity
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from roibridge.consts import AREA_TOLERANCE, ELLIPSE_SEGMENTS
from roibridge.types import Rect

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

_LOGGER = logging.getLogger(__name__)


class Contour(NamedTuple):
    """A closed outer boundary and the holes cut out of it.

    Coordinates are (N, 2) float64 arrays without the repeated closing vertex.
    """

    exterior: NDArray[np.float64]
    holes: tuple[NDArray[np.float64], ...] = ()


class PlanarRegion:
    """A general planar region, possibly disjoint and with holes.

    The set-algebra backend (shapely) is only used here. ROI models and converters
    see contours, affine transforms and point membership.
    """

    __slots__ = ("_geom",)

    def __init__(self, geometry: BaseGeometry | None = None):
        if geometry is None:
            geometry = Polygon()
        self._geom = _polygonal_part(geometry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_contours={len(self)}, area={self.area():.4g})"

    def __len__(self) -> int:
        return len(_iter_polygons(self._geom))

    @classmethod
    def from_contours(
        cls,
        contours: Iterable[Contour | tuple[ArrayLike, Iterable[ArrayLike]]],
    ) -> PlanarRegion:
        """Construct a region as the union of the given contours."""
        polygons = []
        for exterior, holes in contours:
            exterior = _as_ring(exterior)
            if exterior is None:
                continue
            hole_rings = [h for h in (_as_ring(h) for h in holes) if h is not None]
            poly = _polygonal_part(shapely.make_valid(Polygon(exterior, hole_rings)))
            polygons.append(poly)
        if not polygons:
            return cls()
        return cls(shapely.union_all(polygons))

    @classmethod
    def from_rings(cls, rings: Iterable[ArrayLike]) -> PlanarRegion:
        """Construct a region from closed rings with the even-odd rule.

        A point is inside the region if it is enclosed by an odd number of rings, which
        is computed as the symmetric difference of all the rings.
        """
        geom: BaseGeometry = Polygon()
        for ring in rings:
            coords = _as_ring(ring)
            if coords is None:
                _LOGGER.warning("Dropped a degenerate ring with %d vertices", len(ring))
                continue
            poly = _polygonal_part(shapely.make_valid(Polygon(coords)))
            geom = shapely.symmetric_difference(geom, poly)
        return cls(geom)

    @classmethod
    def from_rect(cls, rect: Rect[Any]) -> PlanarRegion:
        return cls(shapely.box(rect.left, rect.top, rect.right, rect.bottom))

    @classmethod
    def from_ellipse(cls, rect: Rect[Any]) -> PlanarRegion:
        """Construct a polygonal approximation of the ellipse inscribed in rect."""
        if rect.width <= 0 or rect.height <= 0:
            return cls()
        cx = rect.left + rect.width / 2
        cy = rect.top + rect.height / 2
        circle = shapely.Point(0, 0).buffer(1.0, quad_segs=ELLIPSE_SEGMENTS // 4)
        scaled = affinity.scale(circle, rect.width / 2, rect.height / 2, origin=(0, 0))
        return cls(affinity.translate(scaled, cx, cy))

    @property
    def geometry(self) -> BaseGeometry:
        """The backend geometry."""
        return self._geom

    def is_empty(self) -> bool:
        return self._geom.is_empty

    def area(self) -> float:
        return float(self._geom.area)

    def bbox(self) -> Rect[float]:
        if self.is_empty():
            return Rect(0.0, 0.0, 0.0, 0.0)
        xmin, ymin, xmax, ymax = self._geom.bounds
        return Rect(xmin, ymin, xmax - xmin, ymax - ymin)

    def contours(self) -> list[Contour]:
        """Return all the contours with their holes."""
        return list(self.iter_contours())

    def iter_contours(self) -> Iterator[Contour]:
        for poly in _iter_polygons(self._geom):
            yield Contour(
                _ring_array(poly.exterior),
                tuple(_ring_array(interior) for interior in poly.interiors),
            )

    def iter_rings(self) -> Iterator[NDArray[np.float64]]:
        """Iterate over all the exterior and hole rings."""
        for contour in self.iter_contours():
            yield contour.exterior
            yield from contour.holes

    def transformed(self, matrix: tuple[float, ...]) -> PlanarRegion:
        """Return the region transformed by the matrix (a, b, d, e, xoff, yoff)."""
        return PlanarRegion(affinity.affine_transform(self._geom, list(matrix)))

    def shifted(self, dx: float, dy: float) -> PlanarRegion:
        return PlanarRegion(affinity.translate(self._geom, dx, dy))

    def contains(self, x: float, y: float) -> bool:
        return bool(shapely.contains_xy(self._geom, x, y))

    def contains_points(self, xs: ArrayLike, ys: ArrayLike) -> NDArray[np.bool_]:
        """Vectorized point membership test."""
        return np.asarray(shapely.contains_xy(self._geom, xs, ys), dtype=bool)

    def equals(self, other: PlanarRegion, tolerance: float = 1e-6) -> bool:
        """True if the two regions cover the same set of points within tolerance."""
        diff = shapely.symmetric_difference(self._geom, other._geom)
        return diff.area <= tolerance * max(self.area(), other.area(), 1.0)

    def to_list(self) -> list[list]:
        """Nested list representation: [[exterior, [hole, ...]], ...]."""
        return [
            [c.exterior.tolist(), [h.tolist() for h in c.holes]]
            for c in self.iter_contours()
        ]

    @classmethod
    def from_list(cls, data: list) -> PlanarRegion:
        return cls.from_contours((exterior, holes) for exterior, holes in data)


def _polygonal_part(geom: BaseGeometry) -> BaseGeometry:
    if isinstance(geom, (Polygon, MultiPolygon)):
        return geom
    if isinstance(geom, GeometryCollection):
        polygons = _iter_polygons(geom)
        if not polygons:
            return Polygon()
        return shapely.union_all(polygons)
    # points and lines enclose no area
    return Polygon()


def _iter_polygons(geom: BaseGeometry) -> list[Polygon]:
    if geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        return [geom]
    out: list[Polygon] = []
    for part in getattr(geom, "geoms", ()):
        out.extend(_iter_polygons(part))
    return out


def _as_ring(coords: ArrayLike) -> NDArray[np.float64] | None:
    arr = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
    if arr.shape[0] > 1 and np.allclose(
        arr[0], arr[-1], rtol=0, atol=AREA_TOLERANCE
    ):
        arr = arr[:-1]
    if arr.shape[0] < 3:
        return None
    return arr


def _ring_array(ring) -> NDArray[np.float64]:
    return np.asarray(ring.coords, dtype=np.float64)[:-1]
