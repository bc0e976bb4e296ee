"""
Industry Benchmarks Service

Typical calculator inputs and best-in-class targets per industry. The front end
uses the defaults to prefill the calculator and the benchmarks to show "Industry
Avg" hints next to each input.

Lookups accept an IndustryKey or its string value. Unknown or blank industries
fall back to the "other" row.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from backend.models.enums import BenchmarkField, BenchmarkType, IndustryKey
from backend.models.schemas import (
    Benchmark,
    BestInClassTargets,
    CompanyInputs,
    IndustryDefaults,
)


# =============================================================================
# Industry Defaults
# =============================================================================

INDUSTRY_DEFAULTS: Mapping[str, IndustryDefaults] = MappingProxyType({
    IndustryKey.SAAS_SOFTWARE.value: IndustryDefaults(
        monthlyLeads=850, averageDealValue=12000, leadResponseTimeHours=4,
        monthlyFreeSignups=2400, freeToPaidConversionRate=12, monthlyMRR=85000,
        failedPaymentRate=4.2, manualHours=32, hourlyRate=85,
    ),
    IndustryKey.TECHNOLOGY_IT.value: IndustryDefaults(
        monthlyLeads=650, averageDealValue=18000, leadResponseTimeHours=6,
        monthlyFreeSignups=1800, freeToPaidConversionRate=8, monthlyMRR=120000,
        failedPaymentRate=3.8, manualHours=28, hourlyRate=95,
    ),
    IndustryKey.MARKETING_ADVERTISING.value: IndustryDefaults(
        monthlyLeads=1200, averageDealValue=6500, leadResponseTimeHours=2,
        monthlyFreeSignups=3500, freeToPaidConversionRate=15, monthlyMRR=45000,
        failedPaymentRate=5.1, manualHours=40, hourlyRate=75,
    ),
    IndustryKey.FINANCIAL_SERVICES.value: IndustryDefaults(
        monthlyLeads=420, averageDealValue=35000, leadResponseTimeHours=8,
        monthlyFreeSignups=800, freeToPaidConversionRate=6, monthlyMRR=180000,
        failedPaymentRate=2.8, manualHours=25, hourlyRate=125,
    ),
    IndustryKey.CONSULTING_PROFESSIONAL.value: IndustryDefaults(
        monthlyLeads=320, averageDealValue=45000, leadResponseTimeHours=12,
        monthlyFreeSignups=600, freeToPaidConversionRate=5, monthlyMRR=220000,
        failedPaymentRate=3.2, manualHours=35, hourlyRate=150,
    ),
    IndustryKey.ECOMMERCE_RETAIL.value: IndustryDefaults(
        monthlyLeads=2800, averageDealValue=2500, leadResponseTimeHours=1,
        monthlyFreeSignups=8500, freeToPaidConversionRate=18, monthlyMRR=28000,
        failedPaymentRate=6.8, manualHours=45, hourlyRate=55,
    ),
    IndustryKey.HEALTHCARE.value: IndustryDefaults(
        monthlyLeads=280, averageDealValue=28000, leadResponseTimeHours=24,
        monthlyFreeSignups=450, freeToPaidConversionRate=4, monthlyMRR=150000,
        failedPaymentRate=2.1, manualHours=30, hourlyRate=110,
    ),
    IndustryKey.MANUFACTURING.value: IndustryDefaults(
        monthlyLeads=180, averageDealValue=85000, leadResponseTimeHours=48,
        monthlyFreeSignups=200, freeToPaidConversionRate=3, monthlyMRR=380000,
        failedPaymentRate=1.8, manualHours=22, hourlyRate=95,
    ),
    IndustryKey.EDUCATION.value: IndustryDefaults(
        monthlyLeads=950, averageDealValue=8500, leadResponseTimeHours=6,
        monthlyFreeSignups=4200, freeToPaidConversionRate=14, monthlyMRR=65000,
        failedPaymentRate=4.5, manualHours=38, hourlyRate=65,
    ),
    IndustryKey.OTHER.value: IndustryDefaults(
        monthlyLeads=600, averageDealValue=15000, leadResponseTimeHours=6,
        monthlyFreeSignups=1500, freeToPaidConversionRate=10, monthlyMRR=75000,
        failedPaymentRate=4.0, manualHours=35, hourlyRate=85,
    ),
})


# =============================================================================
# Best-in-Class Targets (top 5% performers)
# =============================================================================

BEST_IN_CLASS_TARGETS: Mapping[str, BestInClassTargets] = MappingProxyType({
    IndustryKey.SAAS_SOFTWARE.value: BestInClassTargets(
        leadResponseTimeMinutes=15, freeToPaidConversionRateMax=30,
        failedPaymentRateMin=0.8, manualHoursMin=8,
    ),
    IndustryKey.TECHNOLOGY_IT.value: BestInClassTargets(
        leadResponseTimeMinutes=30, freeToPaidConversionRateMax=25,
        failedPaymentRateMin=0.5, manualHoursMin=6,
    ),
    IndustryKey.MARKETING_ADVERTISING.value: BestInClassTargets(
        leadResponseTimeMinutes=10, freeToPaidConversionRateMax=35,
        failedPaymentRateMin=1.2, manualHoursMin=12,
    ),
    IndustryKey.FINANCIAL_SERVICES.value: BestInClassTargets(
        leadResponseTimeMinutes=60, freeToPaidConversionRateMax=20,
        failedPaymentRateMin=0.3, manualHoursMin=5,
    ),
    IndustryKey.CONSULTING_PROFESSIONAL.value: BestInClassTargets(
        leadResponseTimeMinutes=120, freeToPaidConversionRateMax=18,
        failedPaymentRateMin=0.4, manualHoursMin=8,
    ),
    IndustryKey.ECOMMERCE_RETAIL.value: BestInClassTargets(
        leadResponseTimeMinutes=5, freeToPaidConversionRateMax=40,
        failedPaymentRateMin=1.5, manualHoursMin=15,
    ),
    IndustryKey.HEALTHCARE.value: BestInClassTargets(
        leadResponseTimeMinutes=240, freeToPaidConversionRateMax=15,
        failedPaymentRateMin=0.2, manualHoursMin=6,
    ),
    IndustryKey.MANUFACTURING.value: BestInClassTargets(
        leadResponseTimeMinutes=480, freeToPaidConversionRateMax=12,
        failedPaymentRateMin=0.1, manualHoursMin=4,
    ),
    IndustryKey.EDUCATION.value: BestInClassTargets(
        leadResponseTimeMinutes=20, freeToPaidConversionRateMax=28,
        failedPaymentRateMin=1.0, manualHoursMin=10,
    ),
    IndustryKey.OTHER.value: BestInClassTargets(
        leadResponseTimeMinutes=30, freeToPaidConversionRateMax=25,
        failedPaymentRateMin=0.8, manualHoursMin=8,
    ),
})


# Labels shown next to each input in the calculator
BENCHMARK_LABELS: Mapping[BenchmarkField, str] = MappingProxyType({
    BenchmarkField.LEAD_RESPONSE_TIME_HOURS: "Industry Avg",
    BenchmarkField.FREE_TO_PAID_CONVERSION_RATE: "15% Target",
    BenchmarkField.FAILED_PAYMENT_RATE: "3% Target",
    BenchmarkField.MONTHLY_LEADS: "Industry Avg",
    BenchmarkField.AVERAGE_DEAL_VALUE: "Industry Avg",
    BenchmarkField.MONTHLY_FREE_SIGNUPS: "Industry Avg",
    BenchmarkField.MONTHLY_MRR: "Industry Avg",
    BenchmarkField.MANUAL_HOURS: "Efficiency Target",
    BenchmarkField.HOURLY_RATE: "Market Rate",
})

LOWER_IS_BETTER = frozenset({
    BenchmarkField.LEAD_RESPONSE_TIME_HOURS,
    BenchmarkField.FAILED_PAYMENT_RATE,
    BenchmarkField.MANUAL_HOURS,
})


def resolve_industry_key(industry: Optional[Union[IndustryKey, str]]) -> str:
    """Normalize an industry to a known key, falling back to "other"."""
    if isinstance(industry, IndustryKey):
        return industry.value
    key = (industry or "").strip().lower()
    return key if key in INDUSTRY_DEFAULTS else IndustryKey.OTHER.value


def get_industry_defaults(industry: Optional[Union[IndustryKey, str]] = None) -> IndustryDefaults:
    """Typical calculator inputs for an industry."""
    return INDUSTRY_DEFAULTS[resolve_industry_key(industry)]


def get_best_in_class_targets(industry: Optional[Union[IndustryKey, str]] = None) -> BestInClassTargets:
    """Best-in-class targets for an industry."""
    return BEST_IN_CLASS_TARGETS[resolve_industry_key(industry)]


def get_benchmark(
    field: Union[BenchmarkField, str],
    industry: Optional[Union[IndustryKey, str]] = None
) -> Benchmark:
    """
    Benchmark value and display hint for one calculator input.

    Args:
        field: Input field name (BenchmarkField or its camelCase value)
        industry: Industry key; unknown values use "other"

    Returns:
        Benchmark with the industry default value, its label and a good/warning
        type (warning for fields where lower values are better)

    Raises:
        ValueError: If field is not a benchmarked input
    """
    field = BenchmarkField(field)
    defaults = get_industry_defaults(industry)
    benchmark_type = BenchmarkType.WARNING if field in LOWER_IS_BETTER else BenchmarkType.GOOD

    return Benchmark(
        value=getattr(defaults, field.value),
        label=BENCHMARK_LABELS[field],
        type=benchmark_type,
    )


def build_default_inputs(
    industry: Optional[Union[IndustryKey, str]] = None,
    current_arr: float = 0.0
) -> CompanyInputs:
    """
    Prefilled calculator inputs for an industry.

    Useful for previews before the visitor has entered their own numbers.
    """
    defaults = get_industry_defaults(industry)
    return CompanyInputs(
        industry=resolve_industry_key(industry),
        currentARR=current_arr,
        monthlyLeads=defaults.monthlyLeads,
        averageDealValue=defaults.averageDealValue,
        leadResponseTimeHours=defaults.leadResponseTimeHours,
        monthlyFreeSignups=defaults.monthlyFreeSignups,
        freeToPaidConversionRate=defaults.freeToPaidConversionRate,
        monthlyMRR=defaults.monthlyMRR,
        failedPaymentRate=defaults.failedPaymentRate,
        manualHoursPerWeek=defaults.manualHours,
        hourlyRate=defaults.hourlyRate,
    )


__all__ = [
    "INDUSTRY_DEFAULTS",
    "BEST_IN_CLASS_TARGETS",
    "BENCHMARK_LABELS",
    "resolve_industry_key",
    "get_industry_defaults",
    "get_best_in_class_targets",
    "get_benchmark",
    "build_default_inputs",
]
