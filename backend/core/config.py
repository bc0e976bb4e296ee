"""
Settings and environment management module for the Revenue Leak Calculator backend.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Sensible defaults for development
- Singleton pattern via @lru_cache for efficient access
- Realism bounds used by the result validator
- Leakage model constants (benchmark conversion, automation potential, recovery rates)

Environment Variables:
- APP_NAME: Display name returned by the root endpoint
- CORS_ORIGINS: JSON list of allowed browser origins for the calculator front end

Validator Bounds (fractions of ARR unless noted):
- lead_response_max_arr_ratio: 0.5 (lead response loss above this is capped)
- self_serve_max_arr_ratio: 1.0 (self-serve gap above this is capped)
- recovery_70_max_arr_ratio: 2.0 (70% recovery above this is flagged invalid)
- recovery_85_max_leak_ratio: 0.85 (fraction of total leak, warning only)

Usage:
    from backend.core.config import get_settings

    settings = get_settings()
    cap = settings.lead_response_max_arr_ratio * current_arr
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The class inherits from pydantic-settings BaseSettings which provides:
    - Automatic loading from environment variables (case-insensitive)
    - Support for .env file loading
    - Type validation and coercion
    - Default values for every setting (the engine needs no external services)

    Attributes:
        app_name: Name reported by the API root endpoint.
        cors_origins: Browser origins allowed to call the API.
        lead_response_max_arr_ratio: Max lead response loss as a fraction of ARR.
        self_serve_max_arr_ratio: Max self-serve gap as a fraction of ARR.
        recovery_70_max_arr_ratio: Max 70% recovery potential as a multiple of ARR.
        recovery_85_max_leak_ratio: Max 85% recovery potential as a fraction of total leak.
        lead_potential_max_arr_multiple: Annual lead potential multiple of ARR that triggers a warning.
        mrr_arr_tolerance: Allowed relative gap between MRR x 12 and ARR.
        total_leak_max_arr_ratio: Total leak as a fraction of ARR that triggers a warning.
        benchmark_conversion_rate: Free-to-paid conversion benchmark (decimal).
        automation_potential: Share of manual hours that automation can remove.
        recovery_rate_conservative: Capture rate for the conservative recovery scenario.
        recovery_rate_optimistic: Capture rate for the optimistic recovery scenario.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    # =========================================================================
    # Application
    # =========================================================================

    app_name: str = 'Revenue Leak Calculator API'

    # Next.js dev server and its loopback alias
    cors_origins: List[str] = [
        'http://localhost:3000',
        'http://127.0.0.1:3000',
    ]

    # =========================================================================
    # Result Validator Bounds
    # Comparisons are always value > ratio * ARR, never value / ARR, so a
    # zero ARR cannot raise ZeroDivisionError.
    # =========================================================================

    lead_response_max_arr_ratio: float = 0.5
    self_serve_max_arr_ratio: float = 1.0
    recovery_70_max_arr_ratio: float = 2.0

    # Warning only: does not flip recovery validity
    recovery_85_max_leak_ratio: float = 0.85

    # Input consistency checks (warnings only, evaluated when ARR > 0)
    lead_potential_max_arr_multiple: float = 10.0
    mrr_arr_tolerance: float = 0.5
    total_leak_max_arr_ratio: float = 1.5

    # =========================================================================
    # Leakage Model Constants
    # =========================================================================

    # 15% free-to-paid conversion benchmark
    benchmark_conversion_rate: float = 0.15

    # 70% of manual process hours considered automatable
    automation_potential: float = 0.7

    recovery_rate_conservative: float = 0.70
    recovery_rate_optimistic: float = 0.85


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns a cached Settings instance so environment variables are only read
    once during the application lifecycle.

    Returns:
        Settings: The application settings instance with all configuration values.

    Raises:
        pydantic.ValidationError: If an environment variable has an invalid value
            (e.g., LEAD_RESPONSE_MAX_ARR_RATIO=abc).

    Example:
        >>> settings = get_settings()
        >>> settings.self_serve_max_arr_ratio
        1.0

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
