"""
API Routes Module

Endpoint implementations organized by dashboard page:
- efficiency.py: chiller/pump efficiency curves
- analytics.py: multi-equipment metric series
- notifications.py: alert feed
- management.py: tonnage history, energy summary, energy report

All routers are combined in main.py to create the complete API.
"""

from .efficiency import router as efficiency_router
from .analytics import router as analytics_router
from .notifications import router as notifications_router
from .management import router as management_router

__all__ = [
    "efficiency_router",
    "analytics_router",
    "notifications_router",
    "management_router",
]
