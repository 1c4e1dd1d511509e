"""Named resources stored as files in a directory."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from pathlib import Path
import pickle
from typing import Any, Generic, TypeVar
from pydantic_compat import BaseModel
from roibridge.consts import (
    JSON_RESOURCE_EXT,
    SERIALIZED_RESOURCE_EXT,
    STRING_RESOURCE_EXT,
)
from roibridge.exceptions import ResourceNotFoundError

_T = TypeVar("_T")
_M = TypeVar("_M", bound=BaseModel)
_LOGGER = logging.getLogger(__name__)


class ResourceStore(ABC, Generic[_T]):
    """Store resources by name as files with a common extension in one directory."""

    def __init__(self, dir_path: str | Path, ext: str):
        self._dir = Path(dir_path)
        if not ext.startswith("."):
            ext = "." + ext
        self._ext = ext

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._dir.as_posix()!r}, ext={self._ext!r})"

    @property
    def directory(self) -> Path:
        return self._dir

    @property
    def ext(self) -> str:
        return self._ext

    def names(self) -> list[str]:
        """Return the names of all the resources, sorted."""
        if not self._dir.is_dir():
            return []
        out = []
        for path in self._dir.iterdir():
            if path.is_file() and path.name.endswith(self._ext):
                out.append(path.name[: -len(self._ext)])
        return sorted(out)

    def __contains__(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def get(self, name: str) -> _T:
        """Read the resource of the given name."""
        path = self._path_for(name)
        if not path.is_file():
            raise ResourceNotFoundError(f"No resource found with name {name!r}.")
        return self._read(path)

    def put(self, name: str, value: _T) -> None:
        """Write the resource, replacing any resource with the same name."""
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for(name)
        self._write(path, value)
        _LOGGER.debug("Wrote resource %r to %s", name, path)
        return None

    def _path_for(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"Invalid resource name: {name!r}")
        return self._dir / f"{name}{self._ext}"

    @abstractmethod
    def _read(self, path: Path) -> _T:
        """Read a resource from the file."""

    @abstractmethod
    def _write(self, path: Path, value: _T) -> None:
        """Write a resource to the file."""


class StringResourceStore(ResourceStore[str]):
    """Store text resources such as scripts."""

    def __init__(self, dir_path: str | Path, ext: str = STRING_RESOURCE_EXT):
        super().__init__(dir_path, ext)

    def _read(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def _write(self, path: Path, value: str) -> None:
        path.write_text(value, encoding="utf-8")


class PickleResourceStore(ResourceStore[Any]):
    """Store any picklable Python object."""

    def __init__(self, dir_path: str | Path, ext: str = SERIALIZED_RESOURCE_EXT):
        super().__init__(dir_path, ext)

    def _read(self, path: Path) -> Any:
        with path.open("rb") as f:
            return pickle.load(f)

    def _write(self, path: Path, value: Any) -> None:
        with path.open("wb") as f:
            pickle.dump(value, f)


class JsonResourceStore(ResourceStore[_M]):
    """Store pydantic models as JSON files."""

    def __init__(
        self,
        dir_path: str | Path,
        model_type: type[_M],
        ext: str = JSON_RESOURCE_EXT,
    ):
        super().__init__(dir_path, ext)
        self._model_type = model_type

    def _read(self, path: Path) -> _M:
        return self._model_type.model_validate_json(path.read_text(encoding="utf-8"))

    def _write(self, path: Path, value: _M) -> None:
        if not isinstance(value, self._model_type):
            raise TypeError(
                f"Expected {self._model_type.__name__}, got {type(value).__name__}."
            )
        path.write_text(value.model_dump_json(), encoding="utf-8")
