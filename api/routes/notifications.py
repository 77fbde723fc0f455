"""
Notification Endpoints
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_sampler
from api.models import NotificationResponse
from core.sampling import RangeSampler
from core.validators import require_params
from engine.notifications import generate_notifications

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get(
    "/data",
    response_model=NotificationResponse,
    summary="Get notification feed",
    description="Thirty mock alerts for a site, each with cause, equipment, priority and suggested solution."
)
async def get_notifications(
    site_id: Optional[str] = Query(default=None, alias="siteId", description="Site identifier"),
    sampler: RangeSampler = Depends(get_sampler)
):
    """Get the notification feed for a site."""
    params = require_params({"siteId": site_id}, ["siteId"])

    rows = generate_notifications(params["siteId"], sampler)

    logger.debug(f"Generated {len(rows)} notifications for site {params['siteId']}")

    return NotificationResponse(
        messages="Notifications fetched successfully",
        rows=rows
    )
