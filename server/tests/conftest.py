"""
Pytest configuration for server tests.

This file adds the server directory to Python path so tests can import from 'app'.
"""
import sys
from pathlib import Path

import pytest

# Add server directory to Python path
server_dir = Path(__file__).parent.parent
sys.path.insert(0, str(server_dir))


@pytest.fixture
def client():
    """FastAPI test client with a fresh rate-limit window."""
    from fastapi.testclient import TestClient
    from app.dependencies import limiter
    from app.main import app

    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service():
    """Analysis service with default limits."""
    from app.services.number_analysis import NumberAnalysisService

    return NumberAnalysisService()
