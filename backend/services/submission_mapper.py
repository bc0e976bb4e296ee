"""
Submission Mapper Service

Flattens calculator inputs, a leakage breakdown and a lead score into the
SubmissionRecord handed to the persistence layer.

Currency figures are rounded half-up to whole units (values that are already
integers pass through unchanged). leak_percentage is guarded against a zero
ARR and is 0 in that case. No validation runs here, so the mapper is safe to
call on its own for quick previews.
"""

import logging
import math

from backend.models.schemas import CompanyInputs, LeakageBreakdown, SubmissionRecord


logger = logging.getLogger(__name__)


def round_currency(value: float) -> int:
    """
    Round a currency amount to the nearest whole unit, halves away from zero.

    Python's round() uses banker's rounding, which would store 2.5 as 2.
    Non-finite values (overflowed inputs or a near-zero ARR divisor) are
    stored as 0.
    """
    if not math.isfinite(value):
        return 0
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def calculate_leak_percentage(total_leak: float, current_arr: float) -> int:
    """Total leak as a whole-number percentage of ARR; 0 when ARR is not positive."""
    if current_arr > 0:
        return round_currency(total_leak / current_arr * 100)
    return 0


def map_to_submission(
    inputs: CompanyInputs,
    breakdown: LeakageBreakdown,
    lead_score: int,
    user_id: str
) -> SubmissionRecord:
    """
    Build the flat submission record for one calculator session.

    Args:
        inputs: Raw calculator inputs, copied verbatim
        breakdown: Leakage breakdown, rounded to whole units
        lead_score: Lead score from the lead scorer
        user_id: Owner identifier supplied by the caller

    Returns:
        Immutable SubmissionRecord
    """
    if not math.isfinite(breakdown.totalLeakage):
        logger.warning(f"Non-finite leakage for user {user_id}; currency fields stored as 0")

    record = SubmissionRecord(
        company_name=inputs.companyName,
        contact_email=inputs.email,
        industry=inputs.industry,
        current_arr=inputs.currentARR,
        monthly_leads=inputs.monthlyLeads,
        average_deal_value=inputs.averageDealValue,
        lead_response_time=inputs.leadResponseTimeHours,
        monthly_free_signups=inputs.monthlyFreeSignups,
        free_to_paid_conversion=inputs.freeToPaidConversionRate,
        monthly_mrr=inputs.monthlyMRR,
        failed_payment_rate=inputs.failedPaymentRate,
        manual_hours=inputs.manualHoursPerWeek,
        hourly_rate=inputs.hourlyRate,
        lead_response_loss=round_currency(breakdown.leadResponseLoss),
        failed_payment_loss=round_currency(breakdown.failedPaymentLoss),
        selfserve_gap_loss=round_currency(breakdown.selfServeGap),
        process_inefficiency_loss=round_currency(breakdown.processLoss),
        total_leak=round_currency(breakdown.totalLeakage),
        recovery_potential_70=round_currency(breakdown.recoveryPotential70),
        recovery_potential_85=round_currency(breakdown.recoveryPotential85),
        leak_percentage=calculate_leak_percentage(breakdown.totalLeakage, inputs.currentARR),
        lead_score=lead_score,
        user_id=user_id,
    )

    logger.debug(f"Mapped submission for user {user_id}: total_leak={record.total_leak}")
    return record


__all__ = [
    "map_to_submission",
    "round_currency",
    "calculate_leak_percentage",
]
