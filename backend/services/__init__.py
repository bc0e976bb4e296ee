"""
Backend Services Module

This module contains the calculation engine for the revenue leak calculator.
Every service is a set of pure functions over pydantic models, so each can be
tested and called on its own.

Services:
- leakage: Four leak categories and the two recovery scenarios
- lead_scoring: 0-100 lead score and the preliminary qualification score
- validation: Realism bounds on a breakdown and confidence assessment
- submission_mapper: Flat submission record for the persistence layer
- industry_benchmarks: Industry prefill values and best-in-class targets
- pipeline: End-to-end evaluation of one submission
- batch_scoring: CSV rescoring of stored submissions (pandas)

All services are designed to be consumed by the API layer (backend/api/).
"""

# =============================================================================
# Leakage Calculator Exports
# =============================================================================

from backend.services.leakage import (
    calculate_leakage,
    calculate_lead_response_loss,
    calculate_failed_payment_loss,
    calculate_self_serve_gap,
    calculate_process_loss,
    response_time_multiplier,
)

# =============================================================================
# Lead Scoring Exports
# =============================================================================

from backend.services.lead_scoring import (
    calculate_lead_score,
    calculate_preliminary_lead_score,
    score_lead,
    industry_weight,
)

# =============================================================================
# Validation and Confidence Exports
# =============================================================================

from backend.services.validation import (
    validate_calculation_results,
    assess_confidence,
    determine_confidence_level,
)

# =============================================================================
# Submission Mapper Exports
# =============================================================================

from backend.services.submission_mapper import (
    map_to_submission,
    round_currency,
    calculate_leak_percentage,
)

# =============================================================================
# Industry Benchmark Exports
# =============================================================================

from backend.services.industry_benchmarks import (
    get_industry_defaults,
    get_best_in_class_targets,
    get_benchmark,
    build_default_inputs,
    resolve_industry_key,
)

# =============================================================================
# Pipeline and Batch Exports
# =============================================================================

from backend.services.pipeline import (
    CalculationPipeline,
    evaluate_submission,
)

from backend.services.batch_scoring import (
    parse_submissions_csv,
    rescore_submissions,
)


__all__ = [
    # Leakage
    "calculate_leakage",
    "calculate_lead_response_loss",
    "calculate_failed_payment_loss",
    "calculate_self_serve_gap",
    "calculate_process_loss",
    "response_time_multiplier",
    # Lead scoring
    "calculate_lead_score",
    "calculate_preliminary_lead_score",
    "score_lead",
    "industry_weight",
    # Validation
    "validate_calculation_results",
    "assess_confidence",
    "determine_confidence_level",
    # Submission mapper
    "map_to_submission",
    "round_currency",
    "calculate_leak_percentage",
    # Industry benchmarks
    "get_industry_defaults",
    "get_best_in_class_targets",
    "get_benchmark",
    "build_default_inputs",
    "resolve_industry_key",
    # Pipeline
    "CalculationPipeline",
    "evaluate_submission",
    "parse_submissions_csv",
    "rescore_submissions",
]
