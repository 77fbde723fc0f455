"""
Request-scoped dependencies.

Routes receive their random source and reference date through FastAPI's
dependency injection so tests can override both.
"""

from datetime import date

from core.sampling import RangeSampler


def get_sampler() -> RangeSampler:
    """Fresh, unseeded sampler for each request."""
    return RangeSampler()


def get_today() -> date:
    """Reference date for period-based series."""
    return date.today()
