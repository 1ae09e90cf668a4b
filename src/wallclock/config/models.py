"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wallclock.toml only contains
overrides.  An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from wallclock.domain.errors import RangeError
from wallclock.domain.fields import ChronoField
from wallclock.domain.registry import lookup_field, lookup_unit
from wallclock.services.time import DEFAULT_FIELDS

# --- wallclock.toml sections ---


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    fields: tuple[str, ...] = DEFAULT_FIELDS
    hex_uppercase: bool = False

    @field_validator("fields")
    @classmethod
    def _known_builtin_fields(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for name in value:
            field = lookup_field(name)
            if not isinstance(field, ChronoField) or not field.is_time_based():
                msg = f"not a built-in time field: {name!r}"
                raise ValueError(msg)
        return value


class ArithmeticConfig(BaseModel):
    """[arithmetic] section."""

    model_config = {"frozen": True}

    default_unit: str = "seconds"

    @field_validator("default_unit")
    @classmethod
    def _known_unit(cls, value: str) -> str:
        # Plugin units are registered after config loads, so only built-ins qualify here.
        if lookup_unit(value) is None:
            msg = f"unknown unit: {value!r}"
            raise ValueError(msg)
        return value


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    offset_seconds: int | None = None

    @field_validator("offset_seconds")
    @classmethod
    def _valid_offset(cls, value: int | None) -> int | None:
        if value is not None:
            try:
                ChronoField.OFFSET_SECONDS.check_valid_value(value)
            except RangeError as exc:
                raise ValueError(str(exc)) from exc
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".wallclock/plugins"


class WallclockConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    arithmetic: ArithmeticConfig = Field(default_factory=ArithmeticConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
