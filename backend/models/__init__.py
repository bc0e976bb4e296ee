"""
Package initialization file for backend models.

Exports all Pydantic schemas and enumerations from schemas.py and enums.py so
other modules can import them from backend.models directly.

Usage:
    from backend.models import (
        CompanyInputs,
        LeakageBreakdown,
        SubmissionRecord,
        ConfidenceLevel,
    )
"""

# =============================================================================
# Enums
# =============================================================================

from backend.models.enums import (
    BenchmarkField,
    BenchmarkType,
    ConfidenceLevel,
    IndustryKey,
)

# =============================================================================
# Schemas
# =============================================================================

from backend.models.schemas import (
    # Core engine models
    CompanyInputs,
    LeakageBreakdown,
    ValidationResult,
    CalculationValidation,
    ConfidenceAssessment,
    SubmissionRecord,
    CalculationOutcome,
    # API request / response models
    LeadScoreRequest,
    LeadScoreResponse,
    ValidationRequest,
    ConfidenceRequest,
    EvaluateRequest,
    PreliminaryScoreRequest,
    PreliminaryScoreResponse,
    # Industry benchmark models
    IndustryDefaults,
    BestInClassTargets,
    Benchmark,
    IndustryBenchmarkResponse,
    # Batch rescoring
    ValidationError,
)

__all__ = [
    # Enums
    "BenchmarkField",
    "BenchmarkType",
    "ConfidenceLevel",
    "IndustryKey",
    # Core engine models
    "CompanyInputs",
    "LeakageBreakdown",
    "ValidationResult",
    "CalculationValidation",
    "ConfidenceAssessment",
    "SubmissionRecord",
    "CalculationOutcome",
    # API request / response models
    "LeadScoreRequest",
    "LeadScoreResponse",
    "ValidationRequest",
    "ConfidenceRequest",
    "EvaluateRequest",
    "PreliminaryScoreRequest",
    "PreliminaryScoreResponse",
    # Industry benchmark models
    "IndustryDefaults",
    "BestInClassTargets",
    "Benchmark",
    "IndustryBenchmarkResponse",
    # Batch rescoring
    "ValidationError",
]
