"""
Leakage Calculator Service

Turns raw calculator inputs into the four revenue leak categories and the two
recovery scenarios:

- Lead response loss: revenue lost because slow first response lowers conversion
- Failed payment loss: recurring revenue lost to failed charges
- Self-serve gap: revenue missed by converting free signups below benchmark
- Process inefficiency: cost of manual hours that could be automated

Recovery potentials apply the conservative (70%) and optimistic (85%) capture
rates to the total leak. The total itself is not stored; LeakageBreakdown
derives it from the four components.
"""

from typing import Optional, Tuple

from backend.core.config import Settings, get_settings
from backend.models.schemas import CompanyInputs, LeakageBreakdown


# =============================================================================
# Response Time Tiers
# Ordered (min_hours_exclusive, conversion_multiplier); first match wins.
# 1 hour or faster keeps the full conversion rate.
# =============================================================================

RESPONSE_TIME_TIERS: Tuple[Tuple[float, float], ...] = (
    (4.0, 0.25),
    (2.0, 0.5),
    (1.0, 0.75),
)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


def response_time_multiplier(response_time_hours: float) -> float:
    """
    Share of achievable conversions kept at a given first-response time.

    Args:
        response_time_hours: Average lead response time in hours

    Returns:
        1.0 at or under an hour, then 0.75, 0.5 and 0.25 past 1, 2 and 4 hours
    """
    for min_hours, multiplier in RESPONSE_TIME_TIERS:
        if response_time_hours > min_hours:
            return multiplier
    return 1.0


def calculate_lead_response_loss(
    monthly_leads: float,
    average_deal_value: float,
    response_time_hours: float
) -> float:
    """Annual revenue lost to slow lead response."""
    kept = response_time_multiplier(response_time_hours)
    return monthly_leads * average_deal_value * (1 - kept) * MONTHS_PER_YEAR


def calculate_failed_payment_loss(monthly_mrr: float, failed_payment_rate: float) -> float:
    """Annual revenue lost to failed payments; the rate is a percentage."""
    return monthly_mrr * (failed_payment_rate / 100) * MONTHS_PER_YEAR


def calculate_self_serve_gap(
    monthly_free_signups: float,
    conversion_rate_percent: float,
    monthly_mrr: float,
    benchmark_conversion_rate: float
) -> float:
    """
    Annual revenue missed by converting free signups below the benchmark.

    The average price per converted user is MRR divided by monthly paid
    conversions. When there are no conversions MRR is used as the price.

    Args:
        monthly_free_signups: Free signups per month
        conversion_rate_percent: Current free-to-paid conversion (percent)
        monthly_mrr: Monthly recurring revenue
        benchmark_conversion_rate: Target conversion rate (decimal)

    Returns:
        Annual self-serve gap, never negative
    """
    current_rate = conversion_rate_percent / 100
    monthly_conversions = monthly_free_signups * current_rate
    average_price = monthly_mrr / (monthly_conversions or 1)
    conversion_gap = max(0.0, benchmark_conversion_rate - current_rate)
    return monthly_free_signups * conversion_gap * average_price * MONTHS_PER_YEAR


def calculate_process_loss(
    manual_hours_per_week: float,
    hourly_rate: float,
    automation_potential: float
) -> float:
    """Annual cost of automatable manual work."""
    annual_hours = manual_hours_per_week * WEEKS_PER_YEAR
    return annual_hours * hourly_rate * automation_potential


def calculate_leakage(
    inputs: CompanyInputs,
    settings: Optional[Settings] = None
) -> LeakageBreakdown:
    """
    Compute the full leakage breakdown for one submission.

    Args:
        inputs: Raw calculator inputs (missing numbers already defaulted to 0)
        settings: Optional settings override (uses cached settings if not provided)

    Returns:
        LeakageBreakdown with the four losses and both recovery scenarios
    """
    if settings is None:
        settings = get_settings()

    lead_response_loss = calculate_lead_response_loss(
        inputs.monthlyLeads,
        inputs.averageDealValue,
        inputs.leadResponseTimeHours,
    )
    failed_payment_loss = calculate_failed_payment_loss(
        inputs.monthlyMRR,
        inputs.failedPaymentRate,
    )
    self_serve_gap = calculate_self_serve_gap(
        inputs.monthlyFreeSignups,
        inputs.freeToPaidConversionRate,
        inputs.monthlyMRR,
        settings.benchmark_conversion_rate,
    )
    process_loss = calculate_process_loss(
        inputs.manualHoursPerWeek,
        inputs.hourlyRate,
        settings.automation_potential,
    )

    # Negative raw inputs collapse to a zero loss
    lead_response_loss = max(0.0, lead_response_loss)
    failed_payment_loss = max(0.0, failed_payment_loss)
    self_serve_gap = max(0.0, self_serve_gap)
    process_loss = max(0.0, process_loss)

    total_leak = lead_response_loss + failed_payment_loss + self_serve_gap + process_loss

    return LeakageBreakdown(
        leadResponseLoss=lead_response_loss,
        failedPaymentLoss=failed_payment_loss,
        selfServeGap=self_serve_gap,
        processLoss=process_loss,
        recoveryPotential70=total_leak * settings.recovery_rate_conservative,
        recoveryPotential85=total_leak * settings.recovery_rate_optimistic,
    )


__all__ = [
    "calculate_leakage",
    "calculate_lead_response_loss",
    "calculate_failed_payment_loss",
    "calculate_self_serve_gap",
    "calculate_process_loss",
    "response_time_multiplier",
    "RESPONSE_TIME_TIERS",
]
