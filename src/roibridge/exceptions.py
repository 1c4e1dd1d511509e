from __future__ import annotations


class RoiConversionError(Exception):
    """Base class for errors raised while converting ROIs."""


class InvalidContext(RoiConversionError, ValueError):
    """Exception raised when a coordinate context cannot be used for conversion."""


class MalformedGeometry(RoiConversionError, ValueError):
    """Exception raised when the ROI geometry is structurally invalid."""


class UnsupportedShapeKind(RoiConversionError, TypeError):
    """Exception raised when no converter exists for the given ROI kind."""

    def __init__(self, kind: str):
        super().__init__(f"Unsupported ROI kind: {kind}")
        self.kind = kind


class ResourceNotFoundError(KeyError):
    """Exception raised when a named resource does not exist."""


class UnknownKindError(ValueError):
    """Exception raised when a serialized model kind is not known."""
