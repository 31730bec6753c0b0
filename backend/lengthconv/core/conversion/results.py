"""Result variants returned by the converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(frozen=True)
class Success:
    value: float
    kind: Literal["success"] = field(default="success", init=False)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class NameNotFound:
    """Exactly one of the two requested units is unknown."""

    unit_name: str
    valid_units: str
    kind: Literal["name_not_found"] = field(default="name_not_found", init=False)

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class NamesNotFound:
    """Neither requested unit is known. `unit_name` is always the source."""

    unit_name: str
    other_unit_name: str
    valid_units: str
    kind: Literal["names_not_found"] = field(default="names_not_found", init=False)

    @property
    def ok(self) -> bool:
        return False


ConversionResult = Union[Success, NameNotFound, NamesNotFound]
