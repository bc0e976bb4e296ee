"""
Pydantic request/response models for the Revenue Leak Calculator backend.

This module provides type-safe data validation and serialization for the engine's
inputs and outputs and for the HTTP API contracts built on top of them:

- CompanyInputs: raw calculator form data (missing numbers default to 0)
- LeakageBreakdown: four loss categories, two recovery scenarios, derived total
- ValidationResult / CalculationValidation: advisory sanity checks
- ConfidenceAssessment: qualitative confidence with explanatory factors
- SubmissionRecord: flat, immutable record handed to the persistence layer
- Industry benchmark models and batch rescoring error details

Engine models use camelCase field names to match the calculator front end;
SubmissionRecord uses snake_case column names to match the submissions table.

All models use Pydantic v2 syntax.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from backend.models.enums import (
    BenchmarkType,
    ConfidenceLevel,
)


# =============================================================================
# Core Engine Models
# =============================================================================


class CompanyInputs(BaseModel):
    """
    Raw company metrics collected by the calculator form.

    Every numeric field defaults to 0 and an explicit null is treated as
    absent, so downstream scoring never has to handle missing values. Text
    fields are kept verbatim, surrounding whitespace included. No other
    validation of raw input is done here.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "companyName": "Acme Analytics",
                "email": "ops@acme.io",
                "industry": "saas-software",
                "currentARR": 2000000,
                "monthlyLeads": 400,
                "averageDealValue": 8000,
                "leadResponseTimeHours": 6,
                "monthlyFreeSignups": 900,
                "freeToPaidConversionRate": 4,
                "monthlyMRR": 160000,
                "failedPaymentRate": 3,
                "manualHoursPerWeek": 30,
                "hourlyRate": 80
            }
        }
    )

    companyName: str = Field(default="", description="Company name")
    email: str = Field(default="", description="Contact email address")
    industry: str = Field(default="", description="Industry key or free-text industry")

    currentARR: float = Field(default=0.0, description="Current annual recurring revenue")

    # Lead generation
    monthlyLeads: float = Field(default=0.0, description="Inbound leads per month")
    averageDealValue: float = Field(default=0.0, description="Average closed deal value")
    leadResponseTimeHours: float = Field(default=0.0, description="Average first response time in hours")

    # Self-serve metrics
    monthlyFreeSignups: float = Field(default=0.0, description="Free trial signups per month")
    freeToPaidConversionRate: float = Field(default=0.0, description="Free-to-paid conversion rate (percent)")
    monthlyMRR: float = Field(default=0.0, description="Monthly recurring revenue")

    # Operations
    failedPaymentRate: float = Field(default=0.0, description="Failed payment rate (percent)")
    manualHoursPerWeek: float = Field(default=0.0, description="Manual operational hours per week")
    hourlyRate: float = Field(default=0.0, description="Loaded hourly labor rate")

    @model_validator(mode="before")
    @classmethod
    def _drop_null_fields(cls, data: Any) -> Any:
        # null means "not provided": let the field default apply
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class LeakageBreakdown(BaseModel):
    """
    Output of the leakage calculator.

    totalLeakage is always recomputed from the four components. The recovery
    potentials are independent estimates and are not required to be less than
    or equal to the total.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "leadResponseLoss": 240000,
                "failedPaymentLoss": 57600,
                "selfServeGap": 118800,
                "processLoss": 87360,
                "recoveryPotential70": 352632,
                "recoveryPotential85": 428196
            }
        }
    )

    leadResponseLoss: float = Field(default=0.0, ge=0, description="Annual loss from slow lead response")
    failedPaymentLoss: float = Field(default=0.0, ge=0, description="Annual loss from failed payments")
    selfServeGap: float = Field(default=0.0, ge=0, description="Annual self-serve conversion gap")
    processLoss: float = Field(default=0.0, ge=0, description="Annual process inefficiency loss")
    recoveryPotential70: float = Field(default=0.0, description="Recovery at 70% capture")
    recoveryPotential85: float = Field(default=0.0, description="Recovery at 85% capture")

    @computed_field
    @property
    def totalLeakage(self) -> float:
        return self.leadResponseLoss + self.failedPaymentLoss + self.selfServeGap + self.processLoss


class ValidationResult(BaseModel):
    """Advisory result of one validation category."""
    isValid: bool = Field(default=True, description="Whether the category passed its bounds")
    warnings: List[str] = Field(default_factory=list, description="Ordered human-readable warnings")
    adjustedValue: Optional[float] = Field(default=None, description="Clamped value when a cap applies")


class CalculationValidation(BaseModel):
    """
    Category-level validation results plus their aggregate.

    overall.isValid is the AND of the three categories and overall.warnings is
    their concatenation in the order leadResponse, selfServe, recovery.
    """
    leadResponse: ValidationResult
    selfServe: ValidationResult
    recovery: ValidationResult
    overall: ValidationResult


class ConfidenceAssessment(BaseModel):
    """Confidence label with the point score and the factors behind it."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "level": "medium",
                "score": 4,
                "factors": [
                    "Mid-market or larger ARR increases confidence",
                    "Moderate lead volume",
                    "Moderate signup volume",
                ]
            }
        }
    )

    level: ConfidenceLevel
    score: int
    factors: List[str] = Field(default_factory=list)


class SubmissionRecord(BaseModel):
    """
    Flat submission row produced once per completed calculator session.

    Immutable after mapping; owned by the persistence layer.
    """
    model_config = ConfigDict(frozen=True)

    company_name: str
    contact_email: str
    industry: str
    current_arr: float
    monthly_leads: float
    average_deal_value: float
    lead_response_time: float
    monthly_free_signups: float
    free_to_paid_conversion: float
    monthly_mrr: float
    failed_payment_rate: float
    manual_hours: float
    hourly_rate: float
    lead_response_loss: int
    failed_payment_loss: int
    selfserve_gap_loss: int
    process_inefficiency_loss: int
    total_leak: int
    recovery_potential_70: int
    recovery_potential_85: int
    leak_percentage: int
    lead_score: int = Field(..., ge=0, le=100)
    user_id: str


class CalculationOutcome(BaseModel):
    """Everything the pipeline produces for one submission."""
    breakdown: LeakageBreakdown
    leadScore: int = Field(..., ge=0, le=100)
    validation: CalculationValidation
    confidence: ConfidenceAssessment
    submission: SubmissionRecord


# =============================================================================
# API Request / Response Models
# =============================================================================


class LeadScoreRequest(BaseModel):
    """Body for POST /calculator/lead-score; breakdown is computed when omitted."""
    inputs: CompanyInputs
    breakdown: Optional[LeakageBreakdown] = None


class LeadScoreResponse(BaseModel):
    leadScore: int = Field(..., ge=0, le=100)


class ValidationRequest(BaseModel):
    """Body for POST /calculator/validate."""
    breakdown: LeakageBreakdown
    currentARR: float = Field(default=0.0)
    inputs: Optional[CompanyInputs] = Field(
        default=None,
        description="Optional raw inputs enabling the input consistency warnings"
    )


class ConfidenceRequest(BaseModel):
    """Body for POST /calculator/confidence."""
    currentARR: float = 0.0
    monthlyLeads: float = 0.0
    monthlyFreeSignups: float = 0.0
    totalLeak: float = 0.0


class EvaluateRequest(BaseModel):
    """Body for POST /calculator/evaluate."""
    inputs: CompanyInputs
    userId: str = Field(..., min_length=1, description="Owner identifier supplied by the caller")


class PreliminaryScoreRequest(BaseModel):
    """Body for POST /calculator/preliminary-score (early qualification)."""
    currentARR: float = 0.0
    monthlyLeads: float = 0.0
    averageDealValue: float = 0.0
    industry: str = ""


class PreliminaryScoreResponse(BaseModel):
    preliminaryScore: int = Field(..., ge=0, le=100)


# =============================================================================
# Industry Benchmark Models
# =============================================================================


class IndustryDefaults(BaseModel):
    """Typical calculator inputs for an industry, used to prefill the form."""
    model_config = ConfigDict(frozen=True)

    monthlyLeads: float
    averageDealValue: float
    leadResponseTimeHours: float
    monthlyFreeSignups: float
    freeToPaidConversionRate: float
    monthlyMRR: float
    failedPaymentRate: float
    manualHours: float
    hourlyRate: float


class BestInClassTargets(BaseModel):
    """Top-performer targets for an industry."""
    model_config = ConfigDict(frozen=True)

    leadResponseTimeMinutes: float
    freeToPaidConversionRateMax: float
    failedPaymentRateMin: float
    manualHoursMin: float


class Benchmark(BaseModel):
    value: float
    label: str
    type: BenchmarkType


class IndustryBenchmarkResponse(BaseModel):
    """Response for GET /calculator/industries/{industry}/defaults."""
    industry: str
    defaults: IndustryDefaults
    bestInClass: BestInClassTargets
    benchmarks: Dict[str, Benchmark] = Field(
        ..., description="Benchmark hint per input field, keyed by field name"
    )
    prefill: CompanyInputs = Field(..., description="Calculator inputs prefilled from the defaults")


# =============================================================================
# Batch Rescoring Models
# =============================================================================


class ValidationError(BaseModel):
    """
    Validation error detail.

    Used for reporting data problems while parsing a submissions CSV.
    """
    field: str = Field(..., description="Field with validation error")
    message: str = Field(..., description="Error message")
    row_number: Optional[int] = Field(
        default=None,
        ge=1,
        description="Row number where error occurred"
    )
