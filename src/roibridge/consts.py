PYDANTIC_CONFIG_STRICT = {
    "extra": "forbid",
    "frozen": True,
    "arbitrary_types_allowed": True,
}

DEFAULT_ORIGIN = (0.0, 0.0)
DEFAULT_DOWNSAMPLE = 1.0

# Number of segments used to flatten a full oval into a shape path.
ELLIPSE_SEGMENTS = 72
# Number of segments used to flatten each rounded corner.
CORNER_SEGMENTS = 8
# Coordinate tolerance for cleaning set-algebra output.
AREA_TOLERANCE = 1e-9

STRING_RESOURCE_EXT = ".txt"
SERIALIZED_RESOURCE_EXT = ".serialized"
JSON_RESOURCE_EXT = ".json"
