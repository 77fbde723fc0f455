"""
Analytics Endpoints

Side-by-side metric series for an arbitrary set of equipment.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_sampler
from api.models import AnalyticsResponse
from core.sampling import RangeSampler
from core.validators import parse_date, parse_equipment_list, require_params
from engine.analytics import generate_analytics_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/data",
    response_model=AnalyticsResponse,
    summary="Get analytics series",
    description="""
    Metric series for each requested equipment.

    **Parameters:**
    - `equipments`: Comma-separated list, e.g. `chiller1,pump2`
    - `date`: Day to simulate

    Each of the 22 records (2-hour intervals from midnight) holds a `date`
    plus eight metrics per equipment, prefixed by the equipment name with
    its number split off: `chiller_1_supply_temp`, `chiller_1_return_temp`,
    `chiller_1_efficiency`, `chiller_1_tonnage`, `chiller_1_vfd_speed`,
    `chiller_1_load`, `chiller_1_status`, `chiller_1_flow`.
    """
)
async def get_analytics_data(
    equipments: Optional[str] = Query(default=None, description="Comma-separated equipment names"),
    date: Optional[str] = Query(default=None, description="Day to simulate"),
    sampler: RangeSampler = Depends(get_sampler)
):
    """Get analytics series for a list of equipment."""
    params = require_params(
        {"equipments": equipments, "date": date},
        ["equipments", "date"]
    )
    prefixes = parse_equipment_list(params["equipments"])
    day = parse_date(params["date"])

    data = generate_analytics_data(prefixes, day, sampler)

    logger.info(f"Generated {len(data)} analytics records for {', '.join(prefixes)}")

    return AnalyticsResponse(
        messages="Analytics data fetched successfully",
        data=data
    )
