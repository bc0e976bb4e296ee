"""
Calculation Pipeline

Runs the engine end to end for one submission:

    inputs -> leakage -> {lead score, validation} -> submission record
                      -> confidence (informational)

The lead scorer and the validator do not depend on each other. The mapper runs
last and consumes both the breakdown and the score. Every step is a pure
function, so a single pipeline instance can be shared across requests.
"""

import logging
from typing import Optional

from backend.core.config import Settings, get_settings
from backend.models.schemas import CalculationOutcome, CompanyInputs
from backend.services.leakage import calculate_leakage
from backend.services.lead_scoring import calculate_lead_score
from backend.services.submission_mapper import map_to_submission
from backend.services.validation import assess_confidence, validate_calculation_results


logger = logging.getLogger(__name__)


class CalculationPipeline:
    """
    Stateless orchestrator for one calculator submission.

    Args:
        settings: Optional settings override (uses cached settings if not provided)
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def evaluate(self, inputs: CompanyInputs, user_id: str) -> CalculationOutcome:
        """
        Compute every engine output for a submission.

        Validation results are advisory and never stop the pipeline; warnings
        are logged and returned to the caller.

        Args:
            inputs: Raw calculator inputs
            user_id: Owner identifier for the submission record

        Returns:
            CalculationOutcome with breakdown, score, validation, confidence
            and the submission record
        """
        breakdown = calculate_leakage(inputs, settings=self.settings)

        lead_score = calculate_lead_score(inputs, breakdown)
        validation = validate_calculation_results(
            breakdown,
            inputs.currentARR,
            inputs=inputs,
            settings=self.settings,
        )

        submission = map_to_submission(inputs, breakdown, lead_score, user_id)

        confidence = assess_confidence(
            inputs.currentARR,
            inputs.monthlyLeads,
            inputs.monthlyFreeSignups,
            breakdown.totalLeakage,
        )

        if validation.overall.warnings:
            logger.warning(
                f"Submission for user {user_id} has {len(validation.overall.warnings)} "
                f"validation warning(s): {'; '.join(validation.overall.warnings)}"
            )

        logger.info(
            f"Evaluated submission for user {user_id}: total_leak={submission.total_leak}, "
            f"lead_score={lead_score}, valid={validation.overall.isValid}, "
            f"confidence={confidence.level.value}"
        )

        return CalculationOutcome(
            breakdown=breakdown,
            leadScore=lead_score,
            validation=validation,
            confidence=confidence,
            submission=submission,
        )


def evaluate_submission(
    inputs: CompanyInputs,
    user_id: str,
    settings: Optional[Settings] = None
) -> CalculationOutcome:
    """Convenience wrapper around CalculationPipeline.evaluate."""
    return CalculationPipeline(settings).evaluate(inputs, user_id)


__all__ = [
    "CalculationPipeline",
    "evaluate_submission",
]
