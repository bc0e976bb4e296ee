"""
Result Validation Service

Sanity-checks a leakage breakdown against realism bounds expressed as
fractions of ARR (or of total leak), and estimates how much confidence the
result deserves.

Validator rules (defaults from Settings):
- Lead response loss > 50% of ARR: invalid, clamped to 50% of ARR
- Self-serve gap > 100% of ARR: invalid, clamped to 100% of ARR
- 70% recovery > 200% of ARR: recovery invalid, warning only (no clamp)
- 85% recovery > 85% of total leak: warning only, validity unchanged

Every bound is evaluated as value > ratio * ARR. With ARR = 0 nothing is
divided; any positive loss simply fails its bound with an adjusted value of 0.

The validator never mutates its inputs and never raises for degenerate data.
Its results are advisory: the caller decides whether to reject, store with
warnings, or clamp and store.

Confidence rules:
- ARR > 1M: +2, > 100K: +1
- Monthly leads > 500: +2, > 100: +1
- Monthly free signups > 1000: +2, > 100: +1
- Leak-to-ARR ratio > 20: -2, > 10: -1
- ARR <= 0: ratio is undefined, the -2 penalty applies
- Score >= 5: high, >= 3: medium, otherwise low
"""

from typing import List, Optional, Tuple

from backend.core.config import Settings, get_settings
from backend.models.enums import ConfidenceLevel
from backend.models.schemas import (
    CalculationValidation,
    CompanyInputs,
    ConfidenceAssessment,
    LeakageBreakdown,
    ValidationResult,
)


# =============================================================================
# Result Validator
# =============================================================================


def _percent(ratio: float) -> str:
    return f"{ratio:.0%}"


def validate_lead_response(
    lead_response_loss: float,
    current_arr: float,
    settings: Settings,
    inputs: Optional[CompanyInputs] = None
) -> ValidationResult:
    """
    Check lead response loss against its share-of-ARR cap.

    Args:
        lead_response_loss: Annual lead response loss
        current_arr: Current ARR
        settings: Settings providing the cap ratio and consistency multiple
        inputs: Optional raw inputs for the lead potential consistency check

    Returns:
        ValidationResult with adjustedValue set when the cap applies
    """
    result = ValidationResult()
    cap_ratio = settings.lead_response_max_arr_ratio
    cap = current_arr * cap_ratio

    if lead_response_loss > cap:
        result.isValid = False
        result.warnings.append(
            f"Lead response loss capped at {_percent(cap_ratio)} of ARR for realism"
        )
        result.adjustedValue = min(lead_response_loss, cap)

    if inputs is not None and current_arr > 0 and inputs.monthlyLeads and inputs.averageDealValue:
        annual_lead_potential = inputs.monthlyLeads * inputs.averageDealValue * 12
        if annual_lead_potential > current_arr * settings.lead_potential_max_arr_multiple:
            result.warnings.append(
                "Lead potential significantly exceeds current ARR - verify inputs"
            )

    return result


def validate_self_serve(
    self_serve_gap: float,
    current_arr: float,
    settings: Settings,
    inputs: Optional[CompanyInputs] = None
) -> ValidationResult:
    """
    Check the self-serve gap against its share-of-ARR cap.

    Args:
        self_serve_gap: Annual self-serve conversion gap
        current_arr: Current ARR
        settings: Settings providing the cap ratio and MRR tolerance
        inputs: Optional raw inputs for the MRR/ARR consistency check

    Returns:
        ValidationResult with adjustedValue set when the cap applies
    """
    result = ValidationResult()
    cap_ratio = settings.self_serve_max_arr_ratio
    cap = current_arr * cap_ratio

    if self_serve_gap > cap:
        result.isValid = False
        result.warnings.append(
            f"Self-serve gap capped at {_percent(cap_ratio)} of ARR for realism"
        )
        result.adjustedValue = min(self_serve_gap, cap)

    if inputs is not None and current_arr > 0 and inputs.monthlyMRR:
        implied_arr = inputs.monthlyMRR * 12
        if abs(implied_arr - current_arr) > current_arr * settings.mrr_arr_tolerance:
            result.warnings.append("MRR and ARR values appear inconsistent - verify inputs")

    return result


def validate_recovery(
    breakdown: LeakageBreakdown,
    current_arr: float,
    settings: Settings
) -> ValidationResult:
    """
    Check both recovery scenarios.

    The 70% scenario is bounded by a multiple of ARR and flips validity. The
    85% scenario is bounded by a share of the total leak and only warns,
    since an optimistic recovery is plausible rather than wrong.

    Args:
        breakdown: Leakage breakdown under review
        current_arr: Current ARR
        settings: Settings providing the recovery bounds

    Returns:
        ValidationResult (never carries an adjustedValue)
    """
    result = ValidationResult()
    total_leak = breakdown.totalLeakage

    recovery_70_ratio = settings.recovery_70_max_arr_ratio
    if breakdown.recoveryPotential70 > current_arr * recovery_70_ratio:
        result.isValid = False
        result.warnings.append(
            f"70% recovery potential exceeds {_percent(recovery_70_ratio)} of ARR"
        )

    recovery_85_ratio = settings.recovery_85_max_leak_ratio
    if breakdown.recoveryPotential85 > total_leak * recovery_85_ratio:
        result.warnings.append(
            f"85% recovery potential exceeds {_percent(recovery_85_ratio)} of total leakage"
            " - optimistic scenario"
        )

    if current_arr > 0 and total_leak > current_arr * settings.total_leak_max_arr_ratio:
        result.warnings.append(
            f"Total revenue leak exceeds {_percent(settings.total_leak_max_arr_ratio)} of ARR"
        )

    return result


def validate_calculation_results(
    breakdown: LeakageBreakdown,
    current_arr: float,
    inputs: Optional[CompanyInputs] = None,
    settings: Optional[Settings] = None
) -> CalculationValidation:
    """
    Validate a leakage breakdown against the configured realism bounds.

    Args:
        breakdown: Leakage breakdown to validate
        current_arr: Current ARR used as the normalizing baseline
        inputs: Optional raw inputs; enables the input consistency warnings
        settings: Optional settings override (uses cached settings if not provided)

    Returns:
        CalculationValidation with per-category results and their aggregate
    """
    if settings is None:
        settings = get_settings()

    current_arr = current_arr or 0.0

    lead_response = validate_lead_response(
        breakdown.leadResponseLoss, current_arr, settings, inputs
    )
    self_serve = validate_self_serve(
        breakdown.selfServeGap, current_arr, settings, inputs
    )
    recovery = validate_recovery(breakdown, current_arr, settings)

    overall = ValidationResult(
        isValid=lead_response.isValid and self_serve.isValid and recovery.isValid,
        warnings=[
            *lead_response.warnings,
            *self_serve.warnings,
            *recovery.warnings,
        ],
    )

    return CalculationValidation(
        leadResponse=lead_response,
        selfServe=self_serve,
        recovery=recovery,
        overall=overall,
    )


# =============================================================================
# Confidence Estimator
# Ordered (min_exclusive, points, factor); first match wins, else (0, fallback).
# =============================================================================

ARR_CONFIDENCE_TIERS: Tuple[Tuple[float, int, str], ...] = (
    (1_000_000, 2, "Mid-market or larger ARR increases confidence"),
    (100_000, 1, "SMB ARR gives moderate confidence"),
)
ARR_CONFIDENCE_FALLBACK = "Small ARR limits confidence"

LEAD_CONFIDENCE_TIERS: Tuple[Tuple[float, int, str], ...] = (
    (500, 2, "High lead volume increases accuracy"),
    (100, 1, "Moderate lead volume"),
)
LEAD_CONFIDENCE_FALLBACK = "Low lead volume limits accuracy"

SIGNUP_CONFIDENCE_TIERS: Tuple[Tuple[float, int, str], ...] = (
    (1000, 2, "High signup volume increases accuracy"),
    (100, 1, "Moderate signup volume"),
)
SIGNUP_CONFIDENCE_FALLBACK = "Low signup volume limits accuracy"

LEAK_RATIO_PENALTIES: Tuple[Tuple[float, int, str], ...] = (
    (20, -2, "Total leak vs ARR ratio is implausibly high"),
    (10, -1, "Total leak vs ARR ratio is high"),
)

HIGH_CONFIDENCE_MIN_SCORE = 5
MEDIUM_CONFIDENCE_MIN_SCORE = 3


def _volume_points(
    value: float,
    tiers: Tuple[Tuple[float, int, str], ...],
    fallback: str
) -> Tuple[int, str]:
    for minimum, points, factor in tiers:
        if value > minimum:
            return points, factor
    return 0, fallback


def leak_ratio_penalty(current_arr: float, total_leak: float) -> Tuple[int, Optional[str]]:
    """
    Penalty for an implausible leak-to-ARR ratio.

    With ARR <= 0 the ratio is undefined and the largest penalty applies.

    Returns:
        Tuple of (penalty points, factor text or None when no penalty)
    """
    if current_arr <= 0:
        return LEAK_RATIO_PENALTIES[0][1], "ARR not provided - leak ratio cannot be checked"

    ratio = total_leak / current_arr
    for minimum, penalty, factor in LEAK_RATIO_PENALTIES:
        if ratio > minimum:
            return penalty, factor
    return 0, None


def confidence_level_for_score(score: int) -> ConfidenceLevel:
    """Map a confidence point score to its label."""
    if score >= HIGH_CONFIDENCE_MIN_SCORE:
        return ConfidenceLevel.HIGH
    elif score >= MEDIUM_CONFIDENCE_MIN_SCORE:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def assess_confidence(
    current_arr: float,
    monthly_leads: float,
    monthly_free_signups: float,
    total_leak: float
) -> ConfidenceAssessment:
    """
    Assess confidence in a result set from data volume and consistency.

    Args:
        current_arr: Current ARR
        monthly_leads: Inbound leads per month
        monthly_free_signups: Free signups per month
        total_leak: Total leakage of the breakdown

    Returns:
        ConfidenceAssessment with level, point score and explanatory factors
    """
    current_arr = current_arr or 0.0
    factors: List[str] = []
    score = 0

    for value, tiers, fallback in (
        (current_arr, ARR_CONFIDENCE_TIERS, ARR_CONFIDENCE_FALLBACK),
        (monthly_leads or 0, LEAD_CONFIDENCE_TIERS, LEAD_CONFIDENCE_FALLBACK),
        (monthly_free_signups or 0, SIGNUP_CONFIDENCE_TIERS, SIGNUP_CONFIDENCE_FALLBACK),
    ):
        points, factor = _volume_points(value, tiers, fallback)
        score += points
        factors.append(factor)

    penalty, penalty_factor = leak_ratio_penalty(current_arr, total_leak or 0)
    score += penalty
    if penalty_factor:
        factors.append(penalty_factor)

    return ConfidenceAssessment(
        level=confidence_level_for_score(score),
        score=score,
        factors=factors,
    )


def determine_confidence_level(
    current_arr: float,
    monthly_leads: float,
    monthly_free_signups: float,
    total_leak: float
) -> ConfidenceLevel:
    """Confidence label only; see assess_confidence for the details."""
    return assess_confidence(current_arr, monthly_leads, monthly_free_signups, total_leak).level


__all__ = [
    "validate_calculation_results",
    "validate_lead_response",
    "validate_self_serve",
    "validate_recovery",
    "assess_confidence",
    "determine_confidence_level",
    "confidence_level_for_score",
    "leak_ratio_penalty",
]
