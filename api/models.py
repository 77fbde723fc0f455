"""
Pydantic Models for API Responses

Every data endpoint answers with the same envelope:

    {"status": "success" | "error", "messages": "...", <payload-key>: ...}

The payload key differs per endpoint (rows, data, series, energyData).
These models drive response serialization and the OpenAPI docs.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


# =========================================
# Enums
# =========================================

class ResponseStatus(str, Enum):
    """Envelope status values."""
    SUCCESS = "success"
    ERROR = "error"


Number = Union[int, float]


# =========================================
# Envelope
# =========================================

class Envelope(BaseModel):
    """Fields shared by every JSON response."""
    status: ResponseStatus = Field(
        default=ResponseStatus.SUCCESS,
        description="Outcome of the request"
    )
    messages: str = Field(
        default="",
        description="Human-readable result or error description"
    )


class ErrorResponse(Envelope):
    """Error envelope returned for 4xx/5xx responses."""
    status: ResponseStatus = ResponseStatus.ERROR

    class Config:
        json_schema_extra = {
            "example": {
                "status": "error",
                "messages": "Missing required parameter(s): siteId"
            }
        }


# =========================================
# Efficiency & Analytics
# =========================================

class EfficiencyResponse(Envelope):
    """Intraday actual/target efficiency curves."""
    rows: List[Dict[str, Union[str, Number]]] = Field(
        default_factory=list,
        description="70 readings at 15-minute intervals"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "status": "success",
                "messages": "Efficiency data fetched successfully",
                "rows": [
                    {
                        "date": "10-19-2026 00:00",
                        "chiller_1_actual_efficiency": 0.52,
                        "chiller_2_actual_efficiency": 0.47,
                        "chiller_3_actual_efficiency": 0.58,
                        "chiller_1_target_efficiency": 0.55,
                        "chiller_2_target_efficiency": 0.49,
                        "chiller_3_target_efficiency": 0.61
                    }
                ]
            }
        }


class AnalyticsResponse(Envelope):
    """Per-equipment metric series."""
    data: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="22 records at 2-hour intervals, keys prefixed per equipment"
    )


# =========================================
# Notifications
# =========================================

class Priority(str, Enum):
    """Notification priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Notification(BaseModel):
    """A single alert in the notification feed."""
    id: int = Field(..., description="Sequence number within the feed")
    cause: str
    equipment: str
    icon: str
    location: str
    message: str
    type: str
    solution: str
    duration: int = Field(..., description="Minutes the condition has lasted")
    priority: Priority
    siteRef: str = Field(..., description="Site the notification belongs to")
    monthlyCost: int = Field(..., description="Estimated monthly cost impact (USD)")


class NotificationResponse(Envelope):
    rows: List[Notification] = Field(default_factory=list)


# =========================================
# Management
# =========================================

class TonnageRecord(BaseModel):
    """Tonnage for one day or month, this year vs last year."""
    date: str
    currentYear: int
    previousYear: int


class TonnageResponse(Envelope):
    series: List[TonnageRecord] = Field(default_factory=list)


class EnergyCard(BaseModel):
    """A single energy summary metric."""
    label: str
    value: Number
    unit: str
    status: Optional[str] = Field(None, description="Badge text, if the card has one")
    color: Optional[str] = Field(None, description="Badge color, if the card has one")


class EnergySummaryResponse(Envelope):
    data: Dict[str, EnergyCard] = Field(default_factory=dict)


class ReportRecord(BaseModel):
    """Energy report values for one day or month."""
    date: str
    consumption: int = Field(..., description="Energy consumed (kWh)")
    demand: int = Field(..., description="Peak demand (kW)")
    cost: float = Field(..., description="Energy cost (USD)")
    totalCost: float = Field(..., description="Cumulative cost up to this point (USD)")


class ReportDashboardResponse(Envelope):
    energyData: List[ReportRecord] = Field(default_factory=list)


# =========================================
# System
# =========================================

class SystemHealth(BaseModel):
    """Liveness information."""
    status: str = Field(..., description="ok when the process is serving")
    version: str
    timestamp: datetime
