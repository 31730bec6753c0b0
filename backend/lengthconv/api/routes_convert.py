"""Conversion endpoints — thin HTTP layer over the length converter."""

import math

from fastapi import APIRouter, HTTPException

from lengthconv.core.conversion.converter import convert, describe_failure
from lengthconv.core.conversion.results import Success
from lengthconv.logging import get_logger, new_correlation_id
from lengthconv.models.schemas import UnitInfo, UnitListResponse
from lengthconv.utils.units import LENGTH_UNITS

router = APIRouter(tags=["length"])
logger = get_logger(__name__)


@router.get("/length/units", response_model=UnitListResponse)
async def list_length_units():
    """List the known length units and their factors relative to the base unit."""
    return UnitListResponse(
        category=LENGTH_UNITS.category,
        base_unit=LENGTH_UNITS.base_unit,
        units=[UnitInfo(name=e.name, factor=e.factor) for e in LENGTH_UNITS.entries()],
    )


@router.get("/length/{source}/{target}/{value}")
async def convert_length(source: str, target: str, value: float) -> float:
    """Convert `value` from `source` to `target`. Unknown units give a 404."""
    new_correlation_id()
    if not math.isfinite(value):
        raise HTTPException(422, detail=[{"message": "Input must be a finite number", "value": str(value)}])

    result = convert(source, target, value, LENGTH_UNITS)
    if isinstance(result, Success):
        if not math.isfinite(result.value):
            logger.info("length_conversion_overflow", source=source, target=target, value=value)
            raise HTTPException(422, detail=[{"message": "Converted value is out of range", "value": str(value)}])
        logger.debug("length_converted", source=source, target=target, value=value, result=result.value)
        return result.value

    message = describe_failure(result, LENGTH_UNITS.category)
    logger.info("length_unit_not_found", source=source, target=target, kind=result.kind)
    raise HTTPException(404, detail=message)
