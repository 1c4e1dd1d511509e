from __future__ import annotations

import math
from typing import TYPE_CHECKING
import numpy as np
from roibridge.exceptions import InvalidContext, MalformedGeometry
from roibridge.geometry import CoordinateContext

if TYPE_CHECKING:
    from numpy.typing import ArrayLike
    from roibridge.types import Rect


def resolve_context(context: CoordinateContext | None) -> CoordinateContext:
    """Return a usable coordinate context, or raise InvalidContext."""
    if context is None:
        return CoordinateContext()
    if not isinstance(context, CoordinateContext):
        raise InvalidContext(
            f"Expected a CoordinateContext, got {type(context).__name__}. Use "
            "CoordinateContext.from_image() to derive one from an image."
        )
    ds = context.downsample
    if not math.isfinite(ds) or ds <= 0:
        raise InvalidContext(f"Downsample factor must be positive, got {ds!r}.")
    if not (math.isfinite(context.origin_x) and math.isfinite(context.origin_y)):
        raise InvalidContext(f"Origin must be finite, got {context.origin!r}.")
    return context


def check_finite(kind: str, *values: float) -> None:
    for v in values:
        if not math.isfinite(v):
            raise MalformedGeometry(f"{kind} has a non-finite coordinate: {v!r}.")


def check_finite_array(kind: str, *arrays: ArrayLike) -> None:
    for arr in arrays:
        if not np.all(np.isfinite(arr)):
            raise MalformedGeometry(f"{kind} has non-finite coordinates.")


def check_bounds(kind: str, rect: Rect[float]) -> None:
    check_finite(kind, *rect)
    if rect.width < 0 or rect.height < 0:
        raise MalformedGeometry(
            f"{kind} has a negative size: width={rect.width!r}, "
            f"height={rect.height!r}."
        )
