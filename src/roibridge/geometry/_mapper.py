"""Mapping between source (full-resolution) and toolkit pixel coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol
import numpy as np
from roibridge.consts import DEFAULT_DOWNSAMPLE, DEFAULT_ORIGIN
from roibridge.types import Rect

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    Affine = tuple[float, float, float, float, float, float]


class ImageHandle(Protocol):
    """An image that knows its calibration origin and downsample factor."""

    @property
    def calibration_origin(self) -> tuple[float, float] | None: ...

    @property
    def downsample_factor(self) -> float: ...


@dataclass(frozen=True)
class CoordinateContext:
    """Affine map between the source and the toolkit coordinate spaces.

    ``toolkit = source / downsample + origin`` and
    ``source = (toolkit - origin) * downsample``, for x and y independently.
    """

    origin_x: float = DEFAULT_ORIGIN[0]
    origin_y: float = DEFAULT_ORIGIN[1]
    downsample: float = DEFAULT_DOWNSAMPLE

    @classmethod
    def from_image(cls, image: ImageHandle | None) -> CoordinateContext:
        """Derive the context from an image's calibration and downsample factor."""
        if image is None:
            return cls()
        origin = image.calibration_origin
        if origin is None:
            origin = DEFAULT_ORIGIN
        ox, oy = origin
        return cls(float(ox), float(oy), float(image.downsample_factor))

    @property
    def origin(self) -> tuple[float, float]:
        return self.origin_x, self.origin_y

    def affine_to_toolkit(self) -> Affine:
        """Affine matrix (a, b, d, e, xoff, yoff) from source to toolkit space."""
        scale = 1.0 / self.downsample
        return (scale, 0.0, 0.0, scale, self.origin_x, self.origin_y)

    def affine_to_source(self, x_base: float = 0.0, y_base: float = 0.0) -> Affine:
        """Affine matrix from base-relative toolkit coordinates to source space.

        The base offset is in toolkit pixels, so it is applied before the origin is
        removed and the result is scaled by the downsample factor.
        """
        d = self.downsample
        return (
            d,
            0.0,
            0.0,
            d,
            (x_base - self.origin_x) * d,
            (y_base - self.origin_y) * d,
        )


def to_toolkit(v: float, origin: float, downsample: float) -> float:
    return v / downsample + origin


def to_source(v: float, origin: float, downsample: float) -> float:
    return (v - origin) * downsample


def points_to_toolkit(
    xs: ArrayLike, ys: ArrayLike, ctx: CoordinateContext
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Map point coordinates to toolkit space, preserving order."""
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    return (
        to_toolkit(xs, ctx.origin_x, ctx.downsample),
        to_toolkit(ys, ctx.origin_y, ctx.downsample),
    )


def points_to_source(
    xs: ArrayLike, ys: ArrayLike, ctx: CoordinateContext
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Map point coordinates to source space, preserving order."""
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    return (
        to_source(xs, ctx.origin_x, ctx.downsample),
        to_source(ys, ctx.origin_y, ctx.downsample),
    )


def bounds_to_toolkit(rect: Rect[Any], ctx: CoordinateContext) -> Rect[float]:
    x1 = to_toolkit(rect.left, ctx.origin_x, ctx.downsample)
    y1 = to_toolkit(rect.top, ctx.origin_y, ctx.downsample)
    x2 = to_toolkit(rect.right, ctx.origin_x, ctx.downsample)
    y2 = to_toolkit(rect.bottom, ctx.origin_y, ctx.downsample)
    return Rect.from_corners(x1, y1, x2, y2)


def bounds_to_source(rect: Rect[Any], ctx: CoordinateContext) -> Rect[float]:
    x1 = to_source(rect.left, ctx.origin_x, ctx.downsample)
    y1 = to_source(rect.top, ctx.origin_y, ctx.downsample)
    x2 = to_source(rect.right, ctx.origin_x, ctx.downsample)
    y2 = to_source(rect.bottom, ctx.origin_y, ctx.downsample)
    return Rect.from_corners(x1, y1, x2, y2)
