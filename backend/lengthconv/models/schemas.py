"""Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel


class UnitInfo(BaseModel):
    name: str
    factor: float


class UnitListResponse(BaseModel):
    category: str
    base_unit: str | None = None
    units: list[UnitInfo]


class HealthResponse(BaseModel):
    status: str
    version: str
