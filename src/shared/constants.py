"""Shared constants used across the engine."""
from __future__ import annotations

# Structured log identity; module loggers live under the package namespace
SERVICE_NAME: str = "schematic"
LOGGER_NAMESPACE: str = "src.schematic"

# Primitive type tags understood by type inference
TYPE_BOOLEAN: str = "boolean"
TYPE_STRING: str = "string"
TYPE_NUMBER: str = "number"
TYPE_INTEGER: str = "integer"
TYPE_ARRAY: str = "array"
TYPE_OBJECT: str = "object"
TYPE_ANY: str = "any"
TYPE_NULL: str = "null"

DATE_TIME_FORMAT: str = "date-time"

# Identifier normalization
ACRONYMS: list[str] = [
    "Url", "Http", "Id", "Io", "Uuid", "Api", "Uri", "Ssl", "Cname", "Oauth", "Otp",
]
IDENTIFIER_SEPARATORS: str = r"[-.$/:_{}\s]"

# Link relations
REL_SELF: str = "self"
REL_INSTANCES: str = "instances"

# Synthetic parameters and fixed return types
BODY_PARAMETER: str = "o"
RANGE_PARAMETER: str = "lr"
RANGE_TYPE: str = "ListRange"
ERROR_TYPE: str = "error"

# Comment wrapping width for emitted doc comments
COMMENT_WIDTH: int = 70
