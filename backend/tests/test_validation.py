"""
Result Validation and Confidence Test Module

Covers the realism bounds on a leakage breakdown (clamped values, validity
flags, warning order, zero ARR) and the confidence estimator.
"""

import pytest

from backend.models import CompanyInputs, ConfidenceLevel, LeakageBreakdown
from backend.services.validation import (
    assess_confidence,
    confidence_level_for_score,
    determine_confidence_level,
    leak_ratio_penalty,
    validate_calculation_results,
)


LEAD_RESPONSE_WARNING = "Lead response loss capped at 50% of ARR for realism"
SELF_SERVE_WARNING = "Self-serve gap capped at 100% of ARR for realism"
RECOVERY_70_WARNING = "70% recovery potential exceeds 200% of ARR"
RECOVERY_85_WARNING = "85% recovery potential exceeds 85% of total leakage - optimistic scenario"


class TestLeadResponseBound:
    """Tests for the lead response share-of-ARR cap."""

    def test_over_cap_is_clamped(self, settings):
        breakdown = LeakageBreakdown(leadResponseLoss=600_000)

        result = validate_calculation_results(breakdown, 1_000_000, settings=settings)

        assert result.leadResponse.isValid is False
        assert result.leadResponse.adjustedValue == 500_000
        assert result.leadResponse.warnings == [LEAD_RESPONSE_WARNING]

    def test_at_cap_is_valid(self, settings):
        breakdown = LeakageBreakdown(leadResponseLoss=500_000)

        result = validate_calculation_results(breakdown, 1_000_000, settings=settings)

        assert result.leadResponse.isValid is True
        assert result.leadResponse.adjustedValue is None
        assert result.leadResponse.warnings == []


class TestSelfServeBound:
    """Tests for the self-serve share-of-ARR cap."""

    def test_over_cap_is_clamped(self, settings):
        breakdown = LeakageBreakdown(selfServeGap=1_200_000)

        result = validate_calculation_results(breakdown, 1_000_000, settings=settings)

        assert result.selfServe.isValid is False
        assert result.selfServe.adjustedValue == 1_000_000
        assert result.selfServe.warnings == [SELF_SERVE_WARNING]


class TestRecoveryBounds:
    """Tests for both recovery scenarios."""

    def test_recovery_70_over_bound_flips_validity(self, settings):
        breakdown = LeakageBreakdown(
            processLoss=4_000_000,
            recoveryPotential70=2_800_000,
            recoveryPotential85=3_400_000,
        )

        result = validate_calculation_results(breakdown, 1_000_000, settings=settings)

        assert result.recovery.isValid is False
        assert RECOVERY_70_WARNING in result.recovery.warnings
        assert result.recovery.adjustedValue is None

    def test_recovery_85_over_bound_only_warns(self, settings):
        breakdown = LeakageBreakdown(
            processLoss=100_000,
            recoveryPotential70=70_000,
            recoveryPotential85=95_000,
        )

        result = validate_calculation_results(breakdown, 1_000_000, settings=settings)

        assert result.recovery.isValid is True
        assert result.recovery.warnings == [RECOVERY_85_WARNING]

    def test_total_leak_over_arr_warns(self, settings):
        breakdown = LeakageBreakdown(
            processLoss=400_000,
            recoveryPotential70=280_000,
            recoveryPotential85=300_000,
        )

        result = validate_calculation_results(breakdown, 200_000, settings=settings)

        assert result.recovery.isValid is True
        assert result.recovery.warnings == ["Total revenue leak exceeds 150% of ARR"]


class TestOverallValidation:
    """Tests for the aggregate result."""

    def test_clean_breakdown(self, sample_inputs, sample_breakdown, settings):
        result = validate_calculation_results(
            sample_breakdown, sample_inputs.currentARR, inputs=sample_inputs, settings=settings
        )

        assert result.overall.isValid is True
        assert result.overall.warnings == []

    def test_warnings_concatenate_in_category_order(self, settings):
        breakdown = LeakageBreakdown(
            leadResponseLoss=600_000,
            selfServeGap=1_200_000,
            recoveryPotential70=2_500_000,
            recoveryPotential85=1_530_000,
        )

        result = validate_calculation_results(breakdown, 1_000_000, settings=settings)

        assert result.overall.isValid is False
        assert result.overall.warnings[:3] == [
            LEAD_RESPONSE_WARNING,
            SELF_SERVE_WARNING,
            RECOVERY_70_WARNING,
        ]
        assert result.overall.warnings == [
            *result.leadResponse.warnings,
            *result.selfServe.warnings,
            *result.recovery.warnings,
        ]

    def test_zero_arr_does_not_raise(self, settings):
        breakdown = LeakageBreakdown(leadResponseLoss=10_000, selfServeGap=5_000)

        result = validate_calculation_results(breakdown, 0, settings=settings)

        assert result.overall.isValid is False
        assert result.leadResponse.adjustedValue == 0
        assert result.selfServe.adjustedValue == 0

    def test_zero_arr_with_empty_breakdown_is_valid(self, settings):
        result = validate_calculation_results(LeakageBreakdown(), 0, settings=settings)

        assert result.overall.isValid is True
        assert result.overall.warnings == []

    def test_inputs_are_not_mutated(self, sample_breakdown, settings):
        before = sample_breakdown.model_dump()

        validate_calculation_results(sample_breakdown, 100_000, settings=settings)

        assert sample_breakdown.model_dump() == before

    def test_configured_bounds_apply(self, monkeypatch):
        monkeypatch.setenv("LEAD_RESPONSE_MAX_ARR_RATIO", "0.25")
        breakdown = LeakageBreakdown(leadResponseLoss=300_000)

        result = validate_calculation_results(breakdown, 1_000_000)

        assert result.leadResponse.adjustedValue == 250_000
        assert result.leadResponse.warnings == [
            "Lead response loss capped at 25% of ARR for realism"
        ]


class TestInputConsistency:
    """Tests for the warnings that need the raw inputs."""

    def test_lead_potential_far_above_arr(self, settings):
        inputs = CompanyInputs(currentARR=100_000, monthlyLeads=1000, averageDealValue=1000)

        result = validate_calculation_results(LeakageBreakdown(), 100_000, inputs=inputs, settings=settings)

        assert result.leadResponse.isValid is True
        assert result.leadResponse.warnings == [
            "Lead potential significantly exceeds current ARR - verify inputs"
        ]

    def test_mrr_inconsistent_with_arr(self, settings):
        inputs = CompanyInputs(currentARR=1_000_000, monthlyMRR=10_000)

        result = validate_calculation_results(LeakageBreakdown(), 1_000_000, inputs=inputs, settings=settings)

        assert result.selfServe.isValid is True
        assert result.selfServe.warnings == ["MRR and ARR values appear inconsistent - verify inputs"]

    def test_consistency_checks_skip_zero_arr(self, settings):
        inputs = CompanyInputs(monthlyLeads=1000, averageDealValue=1000, monthlyMRR=10_000)

        result = validate_calculation_results(LeakageBreakdown(), 0, inputs=inputs, settings=settings)

        assert result.overall.warnings == []


class TestConfidence:
    """Tests for the confidence estimator."""

    def test_high(self):
        assessment = assess_confidence(2_000_000, 600, 2000, 100_000)

        assert assessment.level == ConfidenceLevel.HIGH
        assert assessment.score == 6
        assert assessment.factors[0] == "Mid-market or larger ARR increases confidence"

    def test_medium(self):
        assert determine_confidence_level(200_000, 200, 200, 0) == ConfidenceLevel.MEDIUM

    def test_low(self):
        assert determine_confidence_level(50_000, 10, 10, 1000) == ConfidenceLevel.LOW

    def test_thresholds_are_strict(self):
        assessment = assess_confidence(100_000, 100, 100, 0)

        assert assessment.score == 0
        assert assessment.level == ConfidenceLevel.LOW

    def test_implausible_leak_ratio_penalty(self):
        assessment = assess_confidence(200_000, 600, 2000, 5_000_000)

        assert assessment.score == 1 + 2 + 2 - 2
        assert assessment.level == ConfidenceLevel.MEDIUM
        assert "Total leak vs ARR ratio is implausibly high" in assessment.factors

    def test_high_leak_ratio_penalty(self):
        assert leak_ratio_penalty(100_000, 1_500_000) == (-1, "Total leak vs ARR ratio is high")

    def test_zero_arr_is_low_confidence(self):
        """Zero ARR leaves the ratio undefined; the largest penalty applies."""
        assessment = assess_confidence(0, 5000, 5000, 100_000)

        assert assessment.score == 2
        assert assessment.level == ConfidenceLevel.LOW
        assert assessment.factors[-1] == "ARR not provided - leak ratio cannot be checked"

    @pytest.mark.parametrize(
        "score,level",
        [
            (6, ConfidenceLevel.HIGH),
            (5, ConfidenceLevel.HIGH),
            (4, ConfidenceLevel.MEDIUM),
            (3, ConfidenceLevel.MEDIUM),
            (2, ConfidenceLevel.LOW),
            (-2, ConfidenceLevel.LOW),
        ],
    )
    def test_score_labels(self, score, level):
        assert confidence_level_for_score(score) == level
