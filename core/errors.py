"""
Error Types

Two kinds of failure exist in the mock data service:
- ValidationError: a required query parameter is missing or invalid (HTTP 400)
- InternalError: anything unexpected during generation (HTTP 500)

Both carry the HTTP status code the API layer should answer with.
"""

from typing import Optional


class MockDataError(Exception):
    """Base class for errors raised by the mock data service."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MockDataError):
    """A required parameter is missing, blank, or not an allowed value."""

    status_code = 400
    default_message = "Invalid request parameters"


class InternalError(MockDataError):
    """Unexpected failure while generating a payload."""

    status_code = 500
