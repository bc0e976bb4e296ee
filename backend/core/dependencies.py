"""
FastAPI dependency injection module for the Revenue Leak Calculator backend.

Provides reusable dependencies so endpoint handlers receive configuration
through injection instead of reaching for module globals. Tests can override
`get_settings_dependency` with `app.dependency_overrides`.

Dependencies Provided:
- get_settings_dependency: Returns the cached Settings singleton
- SettingsDep: Type alias for injecting Settings into endpoints

Usage Examples:
    @router.post("/validate")
    async def validate(payload: ValidationRequest, settings: SettingsDep):
        return validate_calculation_results(..., settings=settings)
"""

from typing import Annotated

from fastapi import Depends

from backend.core.config import Settings, get_settings


# =============================================================================
# Settings Dependency
# =============================================================================

def get_settings_dependency() -> Settings:
    """
    Return the application settings for endpoint injection.

    Wraps get_settings() so FastAPI can resolve it with Depends and tests can
    replace it through dependency overrides.

    Returns:
        Settings: The cached application settings instance.
    """
    return get_settings()


# Type alias for Settings dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]


__all__ = [
    'get_settings_dependency',
    'SettingsDep',
]
