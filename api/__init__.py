"""
API Module - FastAPI Backend

This module provides the REST API of the BMS mock data service.
All endpoints are read-only GETs that synthesize dashboard payloads.

Key Components:
- main.py: FastAPI application, exception handlers and root endpoints
- models.py: Pydantic response schemas
- dependencies.py: injectable random source and reference date
- routes/: endpoint implementations

Endpoints:
- GET /efficiency/data: Efficiency curves per equipment type
- GET /analytics/data: Metric series per equipment
- GET /notifications/data: Notification feed
- GET /management/tonnage/data: Tonnage history
- GET /management/energy/cost/data: Energy summary cards
- GET /management/report/dashboard/data: Energy report series
"""

__version__ = "0.1.0"
