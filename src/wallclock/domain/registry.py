"""Name registry for temporal fields and units.

Built-in :class:`ChronoField` and :class:`ChronoUnit` members are always
present.  Extensions add their own descriptors with :func:`register_field`
and :func:`register_unit`; built-in names are reserved and each name may be
registered once.

Lookups are forgiving about spelling: ``hour-of-day``, ``HOUR_OF_DAY``,
``HourOfDay`` and ``hour of day`` all resolve to the same field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wallclock.domain.fields import ChronoField
from wallclock.domain.units import ChronoUnit

if TYPE_CHECKING:
    from wallclock.domain.contracts import TemporalField, TemporalUnit


def normalize_name(name: str) -> str:
    """Lower-case *name* and strip separators."""
    return "".join(c for c in name.lower() if c not in "-_ ")


_BUILTIN_FIELDS: dict[str, ChronoField] = {}
for _field in ChronoField:
    _BUILTIN_FIELDS[normalize_name(_field.name)] = _field
    _BUILTIN_FIELDS[normalize_name(_field.display_name)] = _field

_BUILTIN_UNITS: dict[str, ChronoUnit] = {}
for _unit in ChronoUnit:
    _BUILTIN_UNITS[normalize_name(_unit.name)] = _unit
    _BUILTIN_UNITS[normalize_name(_unit.display_name)] = _unit

_extra_fields: dict[str, TemporalField] = {}
_extra_units: dict[str, TemporalUnit] = {}


def register_field(name: str, field: TemporalField) -> None:
    """Make *field* resolvable by *name*.

    Raises:
        ValueError: If the name is empty, reserved, or already registered.
    """
    key = _claim(name, _BUILTIN_FIELDS, _extra_fields, "field")
    _extra_fields[key] = field


def register_unit(name: str, unit: TemporalUnit) -> None:
    """Make *unit* resolvable by *name*.

    Raises:
        ValueError: If the name is empty, reserved, or already registered.
    """
    key = _claim(name, _BUILTIN_UNITS, _extra_units, "unit")
    _extra_units[key] = unit


def lookup_field(name: str) -> TemporalField | None:
    key = normalize_name(name)
    return _BUILTIN_FIELDS.get(key) or _extra_fields.get(key)


def lookup_unit(name: str) -> TemporalUnit | None:
    key = normalize_name(name)
    return _BUILTIN_UNITS.get(key) or _extra_units.get(key)


def registered_fields() -> dict[str, TemporalField]:
    """All fields by display name: built-ins first, then extensions."""
    result: dict[str, TemporalField] = {str(f): f for f in ChronoField}
    result.update({str(f): f for f in _extra_fields.values()})
    return result


def registered_units() -> dict[str, TemporalUnit]:
    """All units by display name: built-ins first, then extensions."""
    result: dict[str, TemporalUnit] = {str(u): u for u in ChronoUnit}
    result.update({str(u): u for u in _extra_units.values()})
    return result


def clear_extensions() -> None:
    """Forget every extension registration (built-ins stay)."""
    _extra_fields.clear()
    _extra_units.clear()


def _claim(name: str, builtins: dict[str, object], extras: dict[str, object], kind: str) -> str:
    key = normalize_name(name)
    if not key:
        msg = f"Cannot register a {kind} with an empty name"
        raise ValueError(msg)
    if key in builtins:
        msg = f"'{name}' is a built-in {kind} name"
        raise ValueError(msg)
    if key in extras:
        msg = f"A {kind} named '{name}' is already registered"
        raise ValueError(msg)
    return key
