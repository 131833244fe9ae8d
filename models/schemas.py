"""Pydantic schemas for the structured (JSON) report output."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from models.records import LookupStatus


class TemperatureFields(BaseModel):
    """Fahrenheit values of the temperature measurement."""

    ambient: Decimal
    freezer: Decimal
    refrigerator: Decimal


class CompensationFields(BaseModel):
    """Fahrenheit deltas of the compensation measurement."""

    low: Decimal
    high: Decimal


class CompensationStatus(BaseModel):
    status: LookupStatus
    path: Optional[str] = None
    reason: Optional[str] = None


class TelemetryReportSchema(BaseModel):
    """Full record of one collection run."""

    temperature: TemperatureFields
    compensation: Optional[CompensationFields] = None
    compensation_lookup: CompensationStatus
    lines: List[str] = Field(
        default_factory=list, description="Metric lines exactly as written to stdout."
    )
