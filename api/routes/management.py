"""
Management Endpoints

This module serves the energy management pages:
- Tonnage history (this year vs last year) for a period
- Energy consumption / cost summary cards
- Energy report dashboard series for a period

Period-based series are computed relative to `today`, which is injected
so tests can pin the calendar.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_sampler, get_today
from api.models import (
    EnergySummaryResponse,
    ReportDashboardResponse,
    TonnageResponse,
)
from core.sampling import RangeSampler
from core.validators import parse_choice, require_params
from engine.energy import EnergySummaryType, generate_energy_summary
from engine.management import (
    ReportPeriod,
    TonnagePeriod,
    generate_report_data,
    generate_tonnage_series,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/management", tags=["Management"])


@router.get(
    "/tonnage/data",
    response_model=TonnageResponse,
    summary="Get tonnage history",
    description="""
    Cooling tonnage for the current year alongside the previous year.

    **Periods:**
    - `thisMonth`: one point per day, 1st of the month to today
    - `lastMonth`: one point per day of the previous month
    - `thisYear`: one point per month, January to the current month
    """
)
async def get_tonnage_data(
    site_id: Optional[str] = Query(default=None, alias="siteId", description="Site identifier"),
    period: Optional[str] = Query(default=None, description="thisMonth, lastMonth or thisYear"),
    sampler: RangeSampler = Depends(get_sampler),
    today: date = Depends(get_today)
):
    """Get tonnage series for a period."""
    params = require_params({"siteId": site_id, "period": period}, ["siteId", "period"])
    tonnage_period = parse_choice(params["period"], TonnagePeriod, "period")

    series = generate_tonnage_series(tonnage_period, today, sampler)

    logger.info(f"Generated {len(series)} tonnage points ({tonnage_period.value}) for site {params['siteId']}")

    return TonnageResponse(
        messages="Tonnage data fetched successfully",
        series=series
    )


@router.get(
    "/energy/cost/data",
    response_model=EnergySummaryResponse,
    response_model_exclude_none=True,
    summary="Get energy summary",
    description="""
    Headline energy metrics for a site.

    **Types:**
    - `consumption`: consumption, demand and efficiency cards
    - `cost`: cost breakdown and budget variance cards
    """
)
async def get_energy_cost_data(
    site_id: Optional[str] = Query(default=None, alias="siteId", description="Site identifier"),
    type: Optional[str] = Query(default=None, description="consumption or cost"),
    sampler: RangeSampler = Depends(get_sampler)
):
    """Get energy summary cards."""
    params = require_params({"siteId": site_id, "type": type}, ["siteId", "type"])
    summary_type = parse_choice(params["type"], EnergySummaryType, "type")

    data = generate_energy_summary(summary_type, sampler)

    logger.info(f"Generated {summary_type.value} summary for site {params['siteId']}")

    return EnergySummaryResponse(
        messages="Energy data fetched successfully",
        data=data
    )


@router.get(
    "/report/dashboard/data",
    response_model=ReportDashboardResponse,
    summary="Get energy report series",
    description="""
    Consumption, demand and cost per day or month, with a running cost total.

    **Periods:** `this-year`, `past-year`, `last-year`, `this-month`,
    `past-month`, `last-month`. Month periods are daily; year periods are monthly.
    """
)
async def get_report_dashboard_data(
    period: Optional[str] = Query(default=None, description="Reporting period"),
    site_id: Optional[str] = Query(default=None, alias="siteId", description="Site identifier"),
    sampler: RangeSampler = Depends(get_sampler),
    today: date = Depends(get_today)
):
    """Get energy report series for a period."""
    params = require_params({"period": period, "siteId": site_id}, ["period", "siteId"])
    report_period = parse_choice(params["period"], ReportPeriod, "period")

    energy_data = generate_report_data(report_period, today, sampler)

    logger.info(f"Generated {len(energy_data)} report points ({report_period.value}) for site {params['siteId']}")

    return ReportDashboardResponse(
        messages="Report data fetched successfully",
        energyData=energy_data
    )
