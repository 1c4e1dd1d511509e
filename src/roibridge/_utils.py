from __future__ import annotations

from typing import Iterator, TypeVar

_T = TypeVar("_T", bound=type)


def iter_subclasses(cls: _T) -> Iterator[_T]:
    """Recursively iterate over all the subclasses of the given class."""
    for sub in cls.__subclasses__():
        yield sub
        yield from iter_subclasses(sub)
