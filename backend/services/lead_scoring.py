"""
Lead Scoring Service

Maps a submission to a 0-100 lead score used for sales prioritization. The
score is the sum of three independent factors, capped at 100:

- ARR tier (20-50 points)
- Leak impact tier (10-40 points)
- Industry intent weight (4-12 points)

Tier and industry tables are immutable tuples evaluated top to bottom; the
first matching row wins. Industry matching is a case-insensitive substring
test, so table order matters: "healthcare software" scores as software and
"fintech" scores as technology because those rules come first.

Also provides the preliminary score used for early qualification after the
first calculator steps, before any leakage has been computed.
"""

from typing import Optional, Tuple

from backend.models.schemas import CompanyInputs, LeakageBreakdown


# =============================================================================
# Tier Tables
# Ordered (minimum_inclusive, points). The last row has minimum 0 but the
# lookup falls back to its points for anything below, including negatives.
# =============================================================================

ARR_TIERS: Tuple[Tuple[float, int], ...] = (
    (5_000_000, 50),  # $5M+
    (1_000_000, 40),  # $1M-5M
    (500_000, 30),    # $500K-1M
    (0, 20),          # <$500K
)

LEAK_IMPACT_TIERS: Tuple[Tuple[float, int], ...] = (
    (1_000_000, 40),  # $1M+ leak
    (500_000, 30),    # $500K-1M leak
    (250_000, 20),    # $250K-500K leak
    (0, 10),          # <$250K leak
)

# Ordered (keywords, weight); first rule with any matching keyword wins
INDUSTRY_WEIGHTS: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("saas-software", "saas", "software"), 12),
    (("marketing-advertising", "marketing", "advertising"), 9),
    (("technology-it", "technology", "tech"), 8),
    (("financial-services", "finance", "financial"), 8),
    (("consulting-professional", "consulting", "professional"), 7),
    (("healthcare",), 6),
    (("ecommerce-retail", "ecommerce", "e-commerce", "retail"), 6),
    (("manufacturing",), 5),
    (("education",), 5),
)

OTHER_INDUSTRY_WEIGHT = 4

MAX_LEAD_SCORE = 100


def _tier_points(value: float, tiers: Tuple[Tuple[float, int], ...]) -> int:
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return tiers[-1][1]


def arr_points(current_arr: float) -> int:
    """Points for the ARR tier."""
    return _tier_points(current_arr or 0, ARR_TIERS)


def leak_impact_points(total_leak: float) -> int:
    """Points for the total leakage tier."""
    return _tier_points(total_leak or 0, LEAK_IMPACT_TIERS)


def industry_weight(industry: Optional[str]) -> int:
    """
    Intent weight for an industry string.

    Args:
        industry: Industry key or free text, matched case-insensitively by substring

    Returns:
        Weight of the first matching rule, or the "other" weight (4)
    """
    normalized = (industry or "").lower()
    if not normalized.strip():
        return OTHER_INDUSTRY_WEIGHT

    for keywords, weight in INDUSTRY_WEIGHTS:
        if any(keyword in normalized for keyword in keywords):
            return weight
    return OTHER_INDUSTRY_WEIGHT


def score_lead(current_arr: float, total_leak: float, industry: Optional[str]) -> int:
    """
    Score a lead from its ARR, total leak and industry.

    Returns:
        Integer lead score in [0, 100]
    """
    score = arr_points(current_arr) + leak_impact_points(total_leak) + industry_weight(industry)
    return min(score, MAX_LEAD_SCORE)


def calculate_lead_score(inputs: CompanyInputs, breakdown: LeakageBreakdown) -> int:
    """
    Score a completed calculator submission.

    Args:
        inputs: Raw calculator inputs
        breakdown: Leakage breakdown for the same inputs

    Returns:
        Integer lead score in [0, 100]
    """
    return score_lead(inputs.currentARR, breakdown.totalLeakage, inputs.industry)


# =============================================================================
# Preliminary Score (early qualification)
# =============================================================================

PRELIMINARY_ARR_TIERS: Tuple[Tuple[float, int], ...] = (
    (10_000_000, 30),
    (1_000_000, 20),
    (100_000, 10),
)

PRELIMINARY_LEAD_TIERS: Tuple[Tuple[float, int], ...] = (
    (1000, 20),
    (100, 15),
    (50, 10),
)

PRELIMINARY_DEAL_TIERS: Tuple[Tuple[float, int], ...] = (
    (50_000, 25),
    (10_000, 15),
    (1000, 10),
)

PRELIMINARY_BONUS_INDUSTRIES = frozenset({"technology", "finance", "healthcare"})
PRELIMINARY_INDUSTRY_BONUS = 15


def _exclusive_tier_points(value: float, tiers: Tuple[Tuple[float, int], ...]) -> int:
    for minimum, points in tiers:
        if value > minimum:
            return points
    return 0


def calculate_preliminary_lead_score(
    current_arr: float = 0,
    monthly_leads: float = 0,
    average_deal_value: float = 0,
    industry: Optional[str] = None
) -> int:
    """
    Score a partially completed calculator session.

    Uses only the company and lead-generation steps. Thresholds are strict
    (greater than), and the industry bonus needs an exact key match after
    trimming whitespace and ignoring case ("Finance" counts, "fintech" does not).

    Returns:
        Integer preliminary score in [0, 100]
    """
    score = 0
    score += _exclusive_tier_points(current_arr or 0, PRELIMINARY_ARR_TIERS)
    score += _exclusive_tier_points(monthly_leads or 0, PRELIMINARY_LEAD_TIERS)
    score += _exclusive_tier_points(average_deal_value or 0, PRELIMINARY_DEAL_TIERS)

    if (industry or "").strip().lower() in PRELIMINARY_BONUS_INDUSTRIES:
        score += PRELIMINARY_INDUSTRY_BONUS

    return min(score, MAX_LEAD_SCORE)


__all__ = [
    "calculate_lead_score",
    "score_lead",
    "arr_points",
    "leak_impact_points",
    "industry_weight",
    "calculate_preliminary_lead_score",
    "ARR_TIERS",
    "LEAK_IMPACT_TIERS",
    "INDUSTRY_WEIGHTS",
    "OTHER_INDUSTRY_WEIGHT",
]
