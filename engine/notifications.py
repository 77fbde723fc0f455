"""
Notification Mock Generator

Builds the alert feed for a site by sampling notification templates with
replacement and attaching per-notification random details. Entries are
independent draws, so the feed has no particular order.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from core.sampling import RangeSampler

NOTIFICATION_COUNT = 30

PRIORITIES = ("low", "medium", "high")

DURATION_MINUTES = (5, 720)
MONTHLY_COST = (50, 5000)   # USD


@dataclass(frozen=True)
class NotificationTemplate:
    """Static part of a notification, shared by every draw."""
    cause: str
    equipment: str
    icon: str
    location: str
    message: str
    type: str
    solution: str


NOTIFICATION_TEMPLATES = (
    NotificationTemplate(
        cause="High condenser approach temperature",
        equipment="Chiller 1",
        icon="thermometer",
        location="Central Plant - Level B1",
        message="Condenser approach has exceeded 3.5 °C for over an hour",
        type="efficiency",
        solution="Inspect condenser tubes for fouling and schedule brushing",
    ),
    NotificationTemplate(
        cause="Low chilled water delta-T",
        equipment="Chiller 2",
        icon="droplet",
        location="Central Plant - Level B1",
        message="Chilled water delta-T is below 3 °C at current load",
        type="efficiency",
        solution="Check AHU control valves and reset chilled water flow setpoint",
    ),
    NotificationTemplate(
        cause="Pump running at full speed",
        equipment="CHW Pump 1",
        icon="gauge",
        location="Pump Room - Level B1",
        message="VFD has held 100% speed for the last 2 hours",
        type="operational",
        solution="Verify differential pressure sensor reading and setpoint",
    ),
    NotificationTemplate(
        cause="Excessive vibration",
        equipment="CW Pump 2",
        icon="activity",
        location="Pump Room - Level B1",
        message="Vibration level is above 7.1 mm/s",
        type="maintenance",
        solution="Check coupling alignment and bearing condition",
    ),
    NotificationTemplate(
        cause="Cooling tower fan trip",
        equipment="Cooling Tower 1",
        icon="wind",
        location="Roof",
        message="Fan motor tripped on overload",
        type="fault",
        solution="Reset the overload relay and inspect the fan motor windings",
    ),
    NotificationTemplate(
        cause="Chiller short cycling",
        equipment="Chiller 3",
        icon="refresh-cw",
        location="Central Plant - Level B1",
        message="More than 6 starts recorded in the last hour",
        type="operational",
        solution="Review staging sequence and minimum run-time settings",
    ),
    NotificationTemplate(
        cause="Sensor out of range",
        equipment="CHW Supply Temperature Sensor",
        icon="alert-triangle",
        location="Central Plant - Header",
        message="Sensor reading is outside its calibrated range",
        type="fault",
        solution="Recalibrate or replace the temperature sensor",
    ),
)


def generate_notification(
    notification_id: int,
    site_id: str,
    sampler: RangeSampler
) -> Dict[str, Any]:
    """Draw one template and merge it with randomized details."""
    template = sampler.choice(NOTIFICATION_TEMPLATES)

    notification = asdict(template)
    notification.update({
        "id": notification_id,
        "duration": sampler.randint(*DURATION_MINUTES),
        "priority": sampler.choice(PRIORITIES),
        "siteRef": site_id,
        "monthlyCost": sampler.randint(*MONTHLY_COST),
    })
    return notification


def generate_notifications(
    site_id: str,
    sampler: RangeSampler,
    count: int = NOTIFICATION_COUNT
) -> List[Dict[str, Any]]:
    """
    Generate the notification feed for a site.

    Args:
        site_id: Site the notifications refer to
        sampler: Random source
        count: Number of notifications (default 30)

    Returns:
        List of notification dictionaries
    """
    return [
        generate_notification(i, site_id, sampler)
        for i in range(1, count + 1)
    ]
