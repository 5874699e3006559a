"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from deal_analyzer.main import app
from tests.fixtures.deals import (
    brrrr_inputs,
    rental_financials,
    seller_financing_inputs,
    subject_to_inputs,
    wholesale_inputs,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def financials():
    """Single-unit rental financed at 80% LTV, 6% over 30 years."""
    return rental_financials()


@pytest.fixture
def wholesale():
    return wholesale_inputs()


@pytest.fixture
def subject_to():
    return subject_to_inputs()


@pytest.fixture
def seller_financing():
    return seller_financing_inputs()


@pytest.fixture
def brrrr():
    """BRRRR where the refinance pulls all cash back out."""
    return brrrr_inputs()
