from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Generic, NamedTuple, TypeVar
from pydantic_compat import BaseModel, Field
from roibridge.consts import PYDANTIC_CONFIG_STRICT

_V = TypeVar("_V", int, float)


class Point2D(NamedTuple):
    """A point in 2D space."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect(Generic[_V]):
    """Axis-aligned rectangle."""

    left: _V
    top: _V
    width: _V
    height: _V

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    def __iter__(self):
        """Iterate over the field to make this class tuple-like."""
        return iter((self.left, self.top, self.width, self.height))

    @classmethod
    def from_corners(cls, x1: _V, y1: _V, x2: _V, y2: _V) -> Rect[_V]:
        """Construct a rectangle from two opposite corners in any order."""
        left, right = min(x1, x2), max(x1, x2)
        top, bottom = min(y1, y2), max(y1, y2)
        return cls(left, top, right - left, bottom - top)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self)

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


class PlaneIndex(BaseModel):
    """The (channel, z, t) coordinate of a 2D plane in a multi-dimensional image.

    A channel of -1 means that the region belongs to all channels.
    """

    model_config = PYDANTIC_CONFIG_STRICT

    c: int = Field(-1, description="Channel index, or -1 for all channels.", ge=-1)
    z: int = Field(0, description="Z-slice index.", ge=0)
    t: int = Field(0, description="Time point index.", ge=0)

    @classmethod
    def default(cls) -> PlaneIndex:
        return cls()

    @classmethod
    def with_channel(cls, c: int, z: int = 0, t: int = 0) -> PlaneIndex:
        return cls(c=c, z=z, t=t)

    def matches(self, other: PlaneIndex) -> bool:
        """True if the other plane is the same, treating channel -1 as a wildcard."""
        if self.z != other.z or self.t != other.t:
            return False
        return self.c == -1 or other.c == -1 or self.c == other.c
