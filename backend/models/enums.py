"""
Enumeration definitions for the Revenue Leak Calculator backend.

All enums inherit from both `str` and `Enum` so they serialize as plain strings
in Pydantic models and API responses.
"""

from enum import Enum


class ConfidenceLevel(str, Enum):
    """
    Qualitative confidence in a calculation result set.

    Derived from a point score over ARR, lead volume and signup volume,
    minus penalties for an implausible leak-to-ARR ratio:
    - high: score >= 5
    - medium: score >= 3
    - low: anything below
    """
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IndustryKey(str, Enum):
    """
    Industry keys used by the calculator's industry selector.

    The lead scorer matches free text by substring, so these keys are only
    authoritative for benchmark and default-value lookups.
    """
    SAAS_SOFTWARE = "saas-software"
    TECHNOLOGY_IT = "technology-it"
    MARKETING_ADVERTISING = "marketing-advertising"
    FINANCIAL_SERVICES = "financial-services"
    CONSULTING_PROFESSIONAL = "consulting-professional"
    ECOMMERCE_RETAIL = "ecommerce-retail"
    HEALTHCARE = "healthcare"
    MANUFACTURING = "manufacturing"
    EDUCATION = "education"
    OTHER = "other"


class BenchmarkField(str, Enum):
    """Calculator input fields that carry an industry benchmark."""
    MONTHLY_LEADS = "monthlyLeads"
    AVERAGE_DEAL_VALUE = "averageDealValue"
    LEAD_RESPONSE_TIME_HOURS = "leadResponseTimeHours"
    MONTHLY_FREE_SIGNUPS = "monthlyFreeSignups"
    FREE_TO_PAID_CONVERSION_RATE = "freeToPaidConversionRate"
    MONTHLY_MRR = "monthlyMRR"
    FAILED_PAYMENT_RATE = "failedPaymentRate"
    MANUAL_HOURS = "manualHours"
    HOURLY_RATE = "hourlyRate"


class BenchmarkType(str, Enum):
    """
    Display hint for a benchmark comparison.

    - good: higher values are better (e.g. conversion rate)
    - warning: lower values are better (e.g. response time, failure rate)
    """
    GOOD = "good"
    WARNING = "warning"
