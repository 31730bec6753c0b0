"""Tests for length conversion."""

import itertools

import pytest

from lengthconv.core.conversion.converter import convert, describe_failure
from lengthconv.core.conversion.results import NameNotFound, NamesNotFound, Success
from lengthconv.utils.units import LENGTH_UNITS, UnitTable

VALID = "meter, millimeter, kilometer"
NAMES = LENGTH_UNITS.list_names()


class TestConvert:
    def test_millimeter_to_meter(self):
        assert convert("millimeter", "meter", 1000.0) == Success(pytest.approx(1.0))

    def test_kilometer_to_meter(self):
        assert convert("kilometer", "meter", 1.0) == Success(1000.0)

    def test_meter_to_millimeter_negative(self):
        assert convert("meter", "millimeter", -2.0) == Success(-2000.0)

    def test_zero(self):
        assert convert("meter", "meter", 0.0) == Success(0.0)

    @pytest.mark.parametrize("unit", NAMES)
    @pytest.mark.parametrize("x", [0.0, 1.0, -3.5, 1e12])
    def test_identity(self, unit, x):
        assert convert(unit, unit, x) == Success(pytest.approx(x))

    @pytest.mark.parametrize("a,b", list(itertools.permutations(NAMES, 2)))
    def test_pairs_and_round_trip(self, a, b):
        x = 12.5
        result = convert(a, b, x)
        assert result.ok
        assert result.value == pytest.approx(x * LENGTH_UNITS.lookup(a) / LENGTH_UNITS.lookup(b))
        assert convert(b, a, result.value).value == pytest.approx(x)

    def test_custom_table(self):
        table = UnitTable("length", [("foot", 0.3048), ("inch", 0.0254)])
        assert convert("foot", "inch", 1.0, table).value == pytest.approx(12.0)


class TestNotFound:
    def test_unknown_source(self):
        assert convert("bogus", "meter", 5.0) == NameNotFound("bogus", VALID)

    def test_unknown_target(self):
        assert convert("meter", "bogus", 5.0) == NameNotFound("bogus", VALID)

    def test_both_unknown_source_first(self):
        assert convert("bogus1", "bogus2", 5.0) == NamesNotFound("bogus1", "bogus2", VALID)
        assert convert("bogus2", "bogus1", 5.0) == NamesNotFound("bogus2", "bogus1", VALID)

    def test_case_sensitive(self):
        result = convert("Meter", "meter", 1.0)
        assert isinstance(result, NameNotFound)
        assert result.unit_name == "Meter"
        assert not result.ok

    def test_kinds(self):
        assert convert("meter", "meter", 1.0).kind == "success"
        assert convert("x", "meter", 1.0).kind == "name_not_found"
        assert convert("x", "y", 1.0).kind == "names_not_found"


class TestDescribeFailure:
    def test_single_name(self):
        msg = describe_failure(convert("bogus", "meter", 1.0))
        assert msg == "Length unit 'bogus' not found. Try meter, millimeter, kilometer."

    def test_both_names(self):
        msg = describe_failure(convert("bogus1", "bogus2", 1.0))
        assert msg == (
            "Length units 'bogus1' and 'bogus2' not found. "
            "Try meter, millimeter, kilometer."
        )

    def test_success_rejected(self):
        with pytest.raises(ValueError):
            describe_failure(Success(1.0))
