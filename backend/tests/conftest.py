"""
Pytest Configuration and Shared Fixtures for Revenue Leak Calculator Backend Tests.

This module provides fixtures and configuration for all backend tests, supporting:
- Sample calculator inputs with hand-computed expected outputs
- Settings instances isolated from the process environment
- Settings cache reset so environment overrides take effect per test
- A FastAPI TestClient for endpoint tests

Reference scenario (sample_inputs):
- Lead response: 100 leads x $1,000 x (1 - 0.5) x 12 = 600,000
- Failed payments: 160,000 x 3% x 12 = 57,600
- Self-serve gap: 200 x (15% - 10%) x (160,000 / 20) x 12 = 960,000
- Process: 20 h x 52 x $50 x 0.7 = 36,400
- Total leak: 1,654,000 (70%: 1,157,800, 85%: 1,405,900)
- Lead score: 40 (ARR $2M) + 40 (leak >= $1M) + 12 (SaaS) = 92
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from backend.core.config import Settings, get_settings
from backend.models import CompanyInputs, LeakageBreakdown


# ============================================================
# PYTEST HOOKS
# ============================================================

def pytest_configure(config) -> None:
    """
    Configure custom pytest markers for test organization.

    Custom markers defined:
    - slow: Marks tests as slow (deselect with -m "not slow")
    - integration: Marks tests that exercise the full HTTP stack
    - parity: Marks tests pinning values the calculator front end relies on

    Args:
        config: Pytest configuration object
    """
    config.addinivalue_line(
        'markers',
        'slow: marks tests as slow (deselect with -m "not slow")'
    )
    config.addinivalue_line(
        'markers',
        'integration: marks tests that exercise the full HTTP stack'
    )
    config.addinivalue_line(
        'markers',
        'parity: marks tests pinning values the calculator front end relies on'
    )


# ============================================================
# SETTINGS FIXTURES
# ============================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Reset the cached settings around every test.

    Tests that set environment variables with monkeypatch get a fresh Settings
    instance, and later tests never see their overrides.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


# ============================================================
# SAMPLE DATA FIXTURES
# ============================================================

@pytest.fixture
def sample_inputs() -> CompanyInputs:
    """
    Mid-market SaaS submission with no validation warnings.

    See the module docstring for the expected breakdown.
    """
    return CompanyInputs(
        companyName="Acme Analytics",
        email="ops@acme.example",
        industry="saas-software",
        currentARR=2_000_000,
        monthlyLeads=100,
        averageDealValue=1000,
        leadResponseTimeHours=3,
        monthlyFreeSignups=200,
        freeToPaidConversionRate=10,
        monthlyMRR=160_000,
        failedPaymentRate=3,
        manualHoursPerWeek=20,
        hourlyRate=50,
    )


@pytest.fixture
def empty_inputs() -> CompanyInputs:
    """Submission where every field was left blank."""
    return CompanyInputs()


@pytest.fixture
def sample_breakdown() -> LeakageBreakdown:
    """Breakdown matching sample_inputs."""
    return LeakageBreakdown(
        leadResponseLoss=600_000,
        failedPaymentLoss=57_600,
        selfServeGap=960_000,
        processLoss=36_400,
        recoveryPotential70=1_654_000 * 0.70,
        recoveryPotential85=1_654_000 * 0.85,
    )


# ============================================================
# API FIXTURES
# ============================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient bound to the application, with lifespan events."""
    from backend.main import app

    with TestClient(app) as test_client:
        yield test_client
