"""Unit tables. Each table maps a unit name to its factor relative to the base unit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class UnitEntry:
    name: str
    factor: float  # one `name` expressed in the base unit


class UnitTable:
    """Immutable, insertion-ordered lookup of unit name -> conversion factor.

    Lookups are exact: case-sensitive, no trimming, no aliases. A missing
    name is a normal outcome and yields ``None``.
    """

    __slots__ = ("category", "base_unit", "_factors")

    def __init__(self, category: str, entries: Iterable[tuple[str, float]]):
        factors: dict[str, float] = {}
        for name, factor in entries:
            if name in factors:
                raise ValueError(f"Duplicate {category} unit '{name}'")
            if not math.isfinite(factor) or factor <= 0:
                raise ValueError(f"Factor for '{name}' must be positive, got {factor}")
            factors[name] = float(factor)
        if not factors:
            raise ValueError(f"Unit table '{category}' has no units")

        base = [name for name, factor in factors.items() if factor == 1.0]
        self.category = category
        self.base_unit: Optional[str] = base[0] if base else None
        self._factors = MappingProxyType(factors)

    def lookup(self, name: str) -> Optional[float]:
        """Return the factor for `name`, or None if it is not a known unit."""
        return self._factors.get(name)

    def list_names(self) -> tuple[str, ...]:
        return tuple(self._factors)

    def valid_units(self) -> str:
        """Comma-joined unit names in table order, for diagnostics."""
        return ", ".join(self._factors)

    def entries(self) -> tuple[UnitEntry, ...]:
        return tuple(UnitEntry(name, factor) for name, factor in self._factors.items())

    def __contains__(self, name: object) -> bool:
        return name in self._factors

    def __iter__(self) -> Iterator[str]:
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __repr__(self) -> str:
        return f"UnitTable({self.category!r}, {list(self._factors.items())!r})"


LENGTH_UNITS = UnitTable(
    "length",
    [
        ("meter", 1.0),
        ("millimeter", 1e-3),
        ("kilometer", 1e3),
    ],
)
