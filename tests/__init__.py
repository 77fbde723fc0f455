"""
Test Suite for the BMS Mock Data API

This module contains tests for:
- Range sampling and time axes (test_timeseries.py)
- Request validation (test_validators.py)
- Payload generators (test_generators.py)
- API endpoints (test_api.py)

Run tests with:
    pytest tests/ -v
    pytest tests/ --cov=core --cov=engine --cov=api
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
