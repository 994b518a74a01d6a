import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.models.analytics import (  # noqa: E402
    ActionVerbAnalysis,
    CompletenessAnalysis,
    ImpactWordAnalysis,
    OverallCompleteness,
    QuantifiableAnalysis,
)
from app.services.analytics import analyze  # noqa: E402
from app.services.scorer import SCORE_THRESHOLDS, calculate_score, tier_points  # noqa: E402
from tests.sample_resumes import resume_with_bullets  # noqa: E402


def _score(completeness: int, action: int, quantifiable: int, impact: int) -> int:
    return calculate_score(
        CompletenessAnalysis(overall=OverallCompleteness(completed=0, total=8, percentage=completeness)),
        ActionVerbAnalysis(percentage=action),
        QuantifiableAnalysis(percentage=quantifiable),
        ImpactWordAnalysis(percentage=impact),
    )


class TierPointsTests(unittest.TestCase):
    def test_action_verb_tiers(self):
        thresholds = SCORE_THRESHOLDS["action_verbs"]
        self.assertEqual(tier_points(100, thresholds), 20)
        self.assertEqual(tier_points(99, thresholds), 15)
        self.assertEqual(tier_points(90, thresholds), 15)
        self.assertEqual(tier_points(85, thresholds), 15)
        self.assertAlmostEqual(tier_points(30, thresholds), 7.5)
        self.assertEqual(tier_points(0, thresholds), 0)

    def test_linear_tier_is_measured_against_low(self):
        self.assertAlmostEqual(tier_points(84, SCORE_THRESHOLDS["action_verbs"]), 21.0)
        self.assertAlmostEqual(tier_points(45, SCORE_THRESHOLDS["quantifiable"]), 22.5)
        self.assertAlmostEqual(tier_points(20, SCORE_THRESHOLDS["impact_words"]), 7.5)

    def test_medium_boundaries(self):
        self.assertEqual(tier_points(60, SCORE_THRESHOLDS["quantifiable"]), 15)
        self.assertEqual(tier_points(70, SCORE_THRESHOLDS["impact_words"]), 15)


class CalculateScoreTests(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(_score(0, 0, 0, 0), 0)

    def test_full_marks(self):
        self.assertEqual(_score(100, 100, 100, 100), 100)

    def test_weighted_sum_is_rounded_half_up(self):
        # 50 * 0.4 + 15 + 15 + (20 / 40) * 15 = 57.5
        self.assertEqual(_score(50, 90, 60, 20), 58)

    def test_never_exceeds_one_hundred(self):
        # 40 + 21 + 29.5 + 25.875 before clamping
        self.assertEqual(_score(100, 84, 59, 69), 100)

    def test_ninety_percent_action_verbs_earn_fifteen_points(self):
        bullets = ["Led the rollout"] * 18 + ["Handled stuff"] * 2
        result = analyze(resume_with_bullets(bullets))
        self.assertEqual(result.action_verbs.total_bullets, 20)
        self.assertEqual(result.action_verbs.percentage, 90)
        self.assertEqual(tier_points(90, SCORE_THRESHOLDS["action_verbs"]), 15)
        # completeness 1/8 -> 13%, 13 * 0.4 + 15 + 0 + 0 = 20.2
        self.assertEqual(result.completeness.overall.percentage, 13)
        self.assertEqual(result.quantifiable.percentage, 0)
        self.assertEqual(result.impact_words.percentage, 0)
        self.assertEqual(result.score, 20)


if __name__ == "__main__":
    unittest.main()
