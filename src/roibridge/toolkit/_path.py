"""Construction and flattening of toolkit shape paths."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable
import numpy as np
from matplotlib.path import Path
from matplotlib.transforms import Affine2D
from roibridge.consts import CORNER_SEGMENTS, ELLIPSE_SEGMENTS
from roibridge.types import Rect

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def empty_path() -> Path:
    return Path(np.zeros((0, 2), dtype=np.float64))


def path_from_rings(rings: Iterable[ArrayLike]) -> Path:
    """Build a compound path with one closed subpath per ring."""
    vertices: list[NDArray[np.float64]] = []
    codes: list[NDArray[np.uint8]] = []
    for ring in rings:
        arr = np.asarray(ring, dtype=np.float64).reshape(-1, 2)
        if arr.shape[0] == 0:
            continue
        sub_codes = np.full(arr.shape[0] + 1, Path.LINETO, dtype=Path.code_type)
        sub_codes[0] = Path.MOVETO
        sub_codes[-1] = Path.CLOSEPOLY
        vertices.append(np.concatenate([arr, arr[:1]], axis=0))
        codes.append(sub_codes)
    if not vertices:
        return empty_path()
    return Path(np.concatenate(vertices), np.concatenate(codes))


def polygon_path(xs: ArrayLike, ys: ArrayLike) -> Path:
    return path_from_rings([np.stack([np.asarray(xs), np.asarray(ys)], axis=1)])


def rings_from_path(path: Path) -> list[NDArray[np.float64]]:
    """Flatten a path into closed rings, without the repeated closing vertex.

    Curves are approximated by line segments and open subpaths are closed.
    """
    if len(path.vertices) == 0:
        return []
    rings = []
    for poly in path.to_polygons(closed_only=True):
        arr = np.asarray(poly, dtype=np.float64)
        if arr.shape[0] > 1 and np.array_equal(arr[0], arr[-1]):
            arr = arr[:-1]
        if arr.shape[0] >= 3:
            rings.append(arr)
    return rings


def path_bounds(path: Path) -> Rect[float]:
    if len(path.vertices) == 0:
        return Rect(0.0, 0.0, 0.0, 0.0)
    ext = path.get_extents()
    return Rect(ext.x0, ext.y0, ext.width, ext.height)


def path_contains(path: Path, x: float, y: float) -> bool:
    """Even-odd point membership test over all the subpaths."""
    count = 0
    for ring in rings_from_path(path):
        if Path(ring).contains_point((x, y)):
            count += 1
    return count % 2 == 1


def transform_path(path: Path, matrix: tuple[float, ...]) -> Path:
    """Transform a path by an affine matrix (a, b, d, e, xoff, yoff).

    The matrix maps ``x' = a * x + b * y + xoff`` and ``y' = d * x + e * y + yoff``.
    """
    if len(path.vertices) == 0:
        return path
    a, b, d, e, xoff, yoff = matrix
    return Affine2D.from_values(a, d, b, e, xoff, yoff).transform_path(path)


def translate_path(path: Path, dx: float, dy: float) -> Path:
    if len(path.vertices) == 0:
        return path
    return Affine2D().translate(dx, dy).transform_path(path)


def ellipse_path(rect: Rect[Any], segments: int = ELLIPSE_SEGMENTS) -> Path:
    """Polygonal path of the ellipse inscribed in the rectangle."""
    if rect.width <= 0 or rect.height <= 0:
        return empty_path()
    theta = np.linspace(0, 2 * math.pi, segments, endpoint=False)
    cx = rect.left + rect.width / 2
    cy = rect.top + rect.height / 2
    xs = cx + rect.width / 2 * np.cos(theta)
    ys = cy + rect.height / 2 * np.sin(theta)
    return polygon_path(xs, ys)


def rounded_rect_path(
    rect: Rect[Any],
    corner_diameter: float,
    segments: int = CORNER_SEGMENTS,
) -> Path:
    """Polygonal path of a rectangle with rounded corners."""
    if rect.width <= 0 or rect.height <= 0:
        return empty_path()
    rx = min(corner_diameter / 2, rect.width / 2)
    ry = min(corner_diameter / 2, rect.height / 2)
    if rx <= 0 or ry <= 0:
        return polygon_path(
            [rect.left, rect.right, rect.right, rect.left],
            [rect.top, rect.top, rect.bottom, rect.bottom],
        )
    # corner centers and the starting angle of each quarter arc, clockwise on screen
    corners = [
        (rect.right - rx, rect.top + ry, -math.pi / 2),
        (rect.right - rx, rect.bottom - ry, 0.0),
        (rect.left + rx, rect.bottom - ry, math.pi / 2),
        (rect.left + rx, rect.top + ry, math.pi),
    ]
    xs: list[float] = []
    ys: list[float] = []
    for cx, cy, start in corners:
        theta = np.linspace(start, start + math.pi / 2, segments + 1)
        xs.extend((cx + rx * np.cos(theta)).tolist())
        ys.extend((cy + ry * np.sin(theta)).tolist())
    return polygon_path(xs, ys)
