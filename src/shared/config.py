"""Shared configuration management using pydantic-settings."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from src.shared.constants import (
    BODY_PARAMETER,
    ERROR_TYPE,
    RANGE_PARAMETER,
    RANGE_TYPE,
)


class SharedConfig(BaseSettings):
    """Base configuration shared across all entry points."""
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class GeneratorConfig(SharedConfig):
    """Configuration for signature generation.

    Primitive names control the destination syntax the renderer emits; the
    defaults produce Go source.
    """
    boolean_type: str = Field(default="bool", validation_alias="SCHEMATIC_BOOLEAN_TYPE")
    string_type: str = Field(default="string", validation_alias="SCHEMATIC_STRING_TYPE")
    timestamp_type: str = Field(
        default="time.Time", validation_alias="SCHEMATIC_TIMESTAMP_TYPE"
    )
    number_type: str = Field(default="float64", validation_alias="SCHEMATIC_NUMBER_TYPE")
    integer_type: str = Field(default="int", validation_alias="SCHEMATIC_INTEGER_TYPE")
    dynamic_type: str = Field(
        default="interface{}", validation_alias="SCHEMATIC_DYNAMIC_TYPE"
    )
    body_parameter: str = Field(
        default=BODY_PARAMETER, validation_alias="SCHEMATIC_BODY_PARAMETER"
    )
    range_parameter: str = Field(
        default=RANGE_PARAMETER, validation_alias="SCHEMATIC_RANGE_PARAMETER"
    )
    range_type: str = Field(default=RANGE_TYPE, validation_alias="SCHEMATIC_RANGE_TYPE")
    error_type: str = Field(default=ERROR_TYPE, validation_alias="SCHEMATIC_ERROR_TYPE")
