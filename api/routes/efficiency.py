"""
Efficiency Endpoints

Serves the plant efficiency page: actual vs target efficiency for each
chiller or pump over one day.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_sampler
from api.models import EfficiencyResponse
from core.sampling import RangeSampler
from core.validators import parse_choice, parse_date, require_params
from engine.efficiency import EquipmentType, generate_efficiency_rows

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/efficiency", tags=["Efficiency"])


@router.get(
    "/data",
    response_model=EfficiencyResponse,
    summary="Get efficiency curves",
    description="""
    Intraday actual and target efficiency (kW/ton) for three units of the
    requested equipment type.

    **Parameters:**
    - `siteId`: Site identifier
    - `equipmentType`: `chiller`, `cwPump` or `chwPump`
    - `date`: Day to simulate (e.g. `2026-10-19` or `10-19-2026`)

    Returns 70 rows at 15-minute intervals starting at midnight.
    """
)
async def get_efficiency_data(
    site_id: Optional[str] = Query(default=None, alias="siteId", description="Site identifier"),
    equipment_type: Optional[str] = Query(default=None, alias="equipmentType", description="chiller, cwPump or chwPump"),
    date: Optional[str] = Query(default=None, description="Day to simulate"),
    sampler: RangeSampler = Depends(get_sampler)
):
    """Get efficiency curves for a site and equipment type."""
    params = require_params(
        {"siteId": site_id, "equipmentType": equipment_type, "date": date},
        ["siteId", "equipmentType", "date"]
    )
    equipment = parse_choice(params["equipmentType"], EquipmentType, "equipmentType")
    day = parse_date(params["date"])

    rows = generate_efficiency_rows(equipment, day, sampler)

    logger.info(
        f"Generated {len(rows)} {equipment.value} efficiency rows "
        f"for site {params['siteId']} on {day.date()}"
    )

    return EfficiencyResponse(
        messages="Efficiency data fetched successfully",
        rows=rows
    )
