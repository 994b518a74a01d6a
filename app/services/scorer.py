"""
Resume quality score.

The score combines completeness (up to 40 points) with three bullet-quality
metrics (up to 20 points each). Every metric goes through the same three-tier
rule with its own thresholds:

- percentage >= HIGH            -> 20 points
- MEDIUM <= percentage < HIGH   -> 15 points
- percentage < MEDIUM           -> (percentage / LOW) * 15 points

The linear tier is measured against LOW, so a percentage between LOW and
MEDIUM earns more than 15 points.
"""

import logging
from dataclasses import dataclass

from app.models.analytics import (
    ActionVerbAnalysis,
    CompletenessAnalysis,
    ImpactWordAnalysis,
    QuantifiableAnalysis,
)
from app.services.text_utils import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierThresholds:
    """Percentage thresholds for one scored metric."""
    low: float
    medium: float
    high: float


SCORE_THRESHOLDS = {
    "action_verbs": TierThresholds(low=60, medium=85, high=100),
    "quantifiable": TierThresholds(low=30, medium=60, high=100),
    "impact_words": TierThresholds(low=40, medium=70, high=100),
}

COMPLETENESS_WEIGHT = 0.4
METRIC_FULL_POINTS = 20
METRIC_ACCEPTABLE_POINTS = 15

MIN_SCORE = 0
MAX_SCORE = 100


def tier_points(percentage: float, thresholds: TierThresholds) -> float:
    """Points (unrounded) one metric earns under the three-tier rule."""
    if percentage >= thresholds.high:
        return METRIC_FULL_POINTS
    if percentage >= thresholds.medium:
        return METRIC_ACCEPTABLE_POINTS
    return (percentage / thresholds.low) * METRIC_ACCEPTABLE_POINTS


def calculate_score(
    completeness: CompletenessAnalysis,
    action_verbs: ActionVerbAnalysis,
    quantifiable: QuantifiableAnalysis,
    impact_words: ImpactWordAnalysis,
) -> int:
    """Combine analyzer outputs into a single 0-100 integer score."""
    score = 0.0
    score += completeness.overall.percentage * COMPLETENESS_WEIGHT
    score += tier_points(action_verbs.percentage, SCORE_THRESHOLDS["action_verbs"])
    score += tier_points(quantifiable.percentage, SCORE_THRESHOLDS["quantifiable"])
    score += tier_points(impact_words.percentage, SCORE_THRESHOLDS["impact_words"])

    rounded = round_half_up(score)
    if rounded > MAX_SCORE:
        logger.debug(f"Raw score {score:.2f} above {MAX_SCORE}, clamping")
    return max(MIN_SCORE, min(MAX_SCORE, rounded))
