"""
Lead Scoring Test Module

Covers ARR and leak-impact tiers, first-match industry weights, the 100 point
cap and the preliminary qualification score.
"""

import pytest

from backend.models import CompanyInputs, LeakageBreakdown
from backend.services.lead_scoring import (
    arr_points,
    calculate_lead_score,
    calculate_preliminary_lead_score,
    industry_weight,
    leak_impact_points,
    score_lead,
)


class TestArrPoints:
    """Tests for ARR tiers (inclusive lower bounds)."""

    @pytest.mark.parametrize(
        "arr,expected",
        [
            (10_000_000, 50),
            (5_000_000, 50),
            (4_999_999, 40),
            (1_000_000, 40),
            (500_000, 30),
            (499_999, 20),
            (0, 20),
            (-100, 20),
        ],
    )
    def test_arr_tiers(self, arr, expected):
        assert arr_points(arr) == expected


class TestLeakImpactPoints:
    """Tests for total leakage tiers."""

    @pytest.mark.parametrize(
        "leak,expected",
        [
            (2_000_000, 40),
            (1_000_000, 40),
            (500_000, 30),
            (250_000, 20),
            (249_999, 10),
            (0, 10),
        ],
    )
    def test_leak_tiers(self, leak, expected):
        assert leak_impact_points(leak) == expected


class TestIndustryWeight:
    """Tests for case-insensitive substring matching with first match winning."""

    @pytest.mark.parametrize(
        "industry,expected",
        [
            ("saas-software", 12),
            ("SAAS-based tools", 12),
            ("Marketing Agency", 9),
            ("technology-it", 8),
            ("fintech", 8),
            ("financial-services", 8),
            ("consulting-professional", 7),
            ("healthcare", 6),
            ("ecommerce-retail", 6),
            ("manufacturing", 5),
            ("education", 5),
            ("other", 4),
            ("", 4),
            (None, 4),
        ],
    )
    def test_weights(self, industry, expected):
        assert industry_weight(industry) == expected

    def test_earlier_rule_wins(self):
        """Software is checked before healthcare."""
        assert industry_weight("healthcare software") == 12


class TestCalculateLeadScore:
    """Tests for the combined lead score."""

    @pytest.mark.parity
    def test_sample_scenario(self, sample_inputs, sample_breakdown):
        assert calculate_lead_score(sample_inputs, sample_breakdown) == 92

    def test_mid_market_saas_with_moderate_leak(self):
        """$2M sits in the $1M-5M tier; the $5M+ tier is not reached."""
        assert score_lead(2_000_000, 600_000, "SaaS") == 40 + 30 + 12

    def test_score_is_capped(self):
        assert score_lead(10_000_000, 2_000_000, "saas-software") == 100

    def test_minimum_score(self):
        assert score_lead(0, 0, "") == 34

    def test_monotonic_in_arr(self):
        scores = [score_lead(arr, 100_000, "education") for arr in (0, 500_000, 1_000_000, 5_000_000)]
        assert scores == sorted(scores)

    def test_monotonic_in_leak(self):
        scores = [score_lead(100_000, leak, "education") for leak in (0, 250_000, 500_000, 1_000_000)]
        assert scores == sorted(scores)

    def test_uses_breakdown_total(self):
        inputs = CompanyInputs(currentARR=600_000, industry="manufacturing")
        breakdown = LeakageBreakdown(leadResponseLoss=300_000, processLoss=250_000)

        assert calculate_lead_score(inputs, breakdown) == 30 + 30 + 5


class TestPreliminaryLeadScore:
    """Tests for the early qualification score."""

    def test_full_score(self):
        score = calculate_preliminary_lead_score(
            current_arr=20_000_000,
            monthly_leads=2000,
            average_deal_value=60_000,
            industry="technology",
        )
        assert score == 30 + 20 + 25 + 15

    def test_thresholds_are_strict(self):
        score = calculate_preliminary_lead_score(
            current_arr=10_000_000,
            monthly_leads=1000,
            average_deal_value=50_000,
        )
        assert score == 20 + 15 + 15

    def test_nothing_entered(self):
        assert calculate_preliminary_lead_score() == 0

    @pytest.mark.parametrize(
        "industry,bonus",
        [
            ("technology", 15),
            ("Finance", 15),
            (" healthcare ", 15),
            ("saas-software", 0),
            ("fintech", 0),
        ],
    )
    def test_industry_bonus_needs_exact_match(self, industry, bonus):
        assert calculate_preliminary_lead_score(industry=industry) == bonus
