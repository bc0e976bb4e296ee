"""
FastAPI router module for the revenue leak calculator engine.

Exposes the calculation engine to the calculator front end and to the backend
functions that persist submissions and trigger marketing automation. Every
endpoint is a pure computation: nothing is stored and nothing is read back.

Key Endpoints:
- POST /calculator/leakage - Leakage breakdown for raw inputs
- POST /calculator/lead-score - Lead score (computes the breakdown if omitted)
- POST /calculator/validate - Advisory validation of a breakdown
- POST /calculator/confidence - Confidence assessment
- POST /calculator/evaluate - Full pipeline including the submission record
- POST /calculator/preliminary-score - Early qualification score
- GET /calculator/industries/{industry}/defaults - Prefill values, targets and benchmarks

Error Handling:
- Malformed bodies are rejected by pydantic with 422
- Unexpected engine failures are logged and returned as 500
"""

import logging

from fastapi import APIRouter, HTTPException

from backend.core.dependencies import SettingsDep
from backend.models.enums import BenchmarkField
from backend.models.schemas import (
    CalculationOutcome,
    CalculationValidation,
    CompanyInputs,
    ConfidenceAssessment,
    ConfidenceRequest,
    EvaluateRequest,
    IndustryBenchmarkResponse,
    LeadScoreRequest,
    LeadScoreResponse,
    LeakageBreakdown,
    PreliminaryScoreRequest,
    PreliminaryScoreResponse,
    ValidationRequest,
)
from backend.services.industry_benchmarks import (
    build_default_inputs,
    get_benchmark,
    get_best_in_class_targets,
    get_industry_defaults,
    resolve_industry_key,
)
from backend.services.leakage import calculate_leakage
from backend.services.lead_scoring import (
    calculate_lead_score,
    calculate_preliminary_lead_score,
)
from backend.services.pipeline import CalculationPipeline
from backend.services.validation import (
    assess_confidence,
    validate_calculation_results,
)


# Logger for this module
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculator")


# =============================================================================
# Engine Endpoints
# =============================================================================


@router.post("/leakage", response_model=LeakageBreakdown)
async def compute_leakage(inputs: CompanyInputs, settings: SettingsDep) -> LeakageBreakdown:
    """
    Compute the leakage breakdown for raw calculator inputs.

    Returns:
        LeakageBreakdown including the derived totalLeakage
    """
    try:
        return calculate_leakage(inputs, settings=settings)
    except Exception as e:
        logger.exception("Error computing leakage breakdown")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute leakage: {str(e)}"
        )


@router.post("/lead-score", response_model=LeadScoreResponse)
async def compute_lead_score(payload: LeadScoreRequest, settings: SettingsDep) -> LeadScoreResponse:
    """
    Score a submission for sales prioritization.

    When the request carries no breakdown, it is computed from the inputs.
    """
    try:
        breakdown = payload.breakdown or calculate_leakage(payload.inputs, settings=settings)
        return LeadScoreResponse(leadScore=calculate_lead_score(payload.inputs, breakdown))
    except Exception as e:
        logger.exception("Error computing lead score")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute lead score: {str(e)}"
        )


@router.post("/validate", response_model=CalculationValidation)
async def validate_breakdown(payload: ValidationRequest, settings: SettingsDep) -> CalculationValidation:
    """
    Validate a breakdown against the configured realism bounds.

    The result is advisory: an invalid breakdown still returns 200.
    """
    try:
        return validate_calculation_results(
            payload.breakdown,
            payload.currentARR,
            inputs=payload.inputs,
            settings=settings,
        )
    except Exception as e:
        logger.exception("Error validating calculation results")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to validate results: {str(e)}"
        )


@router.post("/confidence", response_model=ConfidenceAssessment)
async def compute_confidence(payload: ConfidenceRequest) -> ConfidenceAssessment:
    """Assess confidence in a result set."""
    try:
        return assess_confidence(
            payload.currentARR,
            payload.monthlyLeads,
            payload.monthlyFreeSignups,
            payload.totalLeak,
        )
    except Exception as e:
        logger.exception("Error assessing confidence")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to assess confidence: {str(e)}"
        )


@router.post("/evaluate", response_model=CalculationOutcome)
async def evaluate(payload: EvaluateRequest, settings: SettingsDep) -> CalculationOutcome:
    """
    Run the full pipeline for a completed calculator session.

    The returned submission record is what the persistence layer stores and
    what marketing automation later reads (lead_score, total_leak and the
    recovery potentials).
    """
    try:
        return CalculationPipeline(settings).evaluate(payload.inputs, payload.userId)
    except Exception as e:
        logger.exception("Error evaluating submission")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to evaluate submission: {str(e)}"
        )


@router.post("/preliminary-score", response_model=PreliminaryScoreResponse)
async def compute_preliminary_score(payload: PreliminaryScoreRequest) -> PreliminaryScoreResponse:
    """Early qualification score from the first calculator steps."""
    score = calculate_preliminary_lead_score(
        current_arr=payload.currentARR,
        monthly_leads=payload.monthlyLeads,
        average_deal_value=payload.averageDealValue,
        industry=payload.industry,
    )
    return PreliminaryScoreResponse(preliminaryScore=score)


# =============================================================================
# Industry Benchmarks
# =============================================================================


@router.get("/industries/{industry}/defaults", response_model=IndustryBenchmarkResponse)
async def industry_defaults(industry: str) -> IndustryBenchmarkResponse:
    """
    Prefill values, best-in-class targets and per-field benchmark hints for
    an industry.

    Unknown industries return the "other" row rather than 404 so the form can
    always be prefilled.
    """
    key = resolve_industry_key(industry)
    return IndustryBenchmarkResponse(
        industry=key,
        defaults=get_industry_defaults(key),
        bestInClass=get_best_in_class_targets(key),
        benchmarks={field.value: get_benchmark(field, key) for field in BenchmarkField},
        prefill=build_default_inputs(key),
    )
