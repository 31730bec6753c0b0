"""Length conversion between named units."""

from __future__ import annotations

from lengthconv.core.conversion.results import (
    ConversionResult,
    NameNotFound,
    NamesNotFound,
    Success,
)
from lengthconv.utils.units import LENGTH_UNITS, UnitTable


def convert(
    source: str,
    target: str,
    value: float,
    table: UnitTable = LENGTH_UNITS,
) -> ConversionResult:
    """Convert `value` from `source` units to `target` units.

    Unit names are used exactly as given. Unknown names produce a
    not-found result instead of an exception; when both are unknown the
    source is reported first.
    """
    source_factor = table.lookup(source)
    target_factor = table.lookup(target)

    if source_factor is None and target_factor is None:
        return NamesNotFound(source, target, table.valid_units())
    if source_factor is None:
        return NameNotFound(source, table.valid_units())
    if target_factor is None:
        return NameNotFound(target, table.valid_units())

    return Success(value * source_factor / target_factor)


def describe_failure(result: ConversionResult, category: str = "length") -> str:
    """Render a not-found result as a user-facing message."""
    label = category[:1].upper() + category[1:]
    if isinstance(result, NamesNotFound):
        return (
            f"{label} units '{result.unit_name}' and '{result.other_unit_name}' "
            f"not found. Try {result.valid_units}."
        )
    if isinstance(result, NameNotFound):
        return f"{label} unit '{result.unit_name}' not found. Try {result.valid_units}."
    raise ValueError(f"Nothing to describe for a successful conversion: {result!r}")
