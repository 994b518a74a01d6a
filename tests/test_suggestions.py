import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.models.analytics import (  # noqa: E402
    ActionVerbAnalysis,
    AnalyticsResult,
    CompletenessAnalysis,
    ImpactWordAnalysis,
    OverallCompleteness,
    QuantifiableAnalysis,
)
from app.services.analytics import analyze  # noqa: E402
from app.services.suggestions import generate_suggestions, get_score_rating  # noqa: E402


def _result(action=100, quantifiable=100, impact=100, words=400, bullets=10, completeness=100):
    """An otherwise healthy result, tweaked one metric at a time."""
    return AnalyticsResult(
        word_count=words,
        action_verbs=ActionVerbAnalysis(total_bullets=bullets, percentage=action),
        quantifiable=QuantifiableAnalysis(total_bullets=bullets, percentage=quantifiable),
        impact_words=ImpactWordAnalysis(total_bullets=bullets, percentage=impact),
        completeness=CompletenessAnalysis(
            overall=OverallCompleteness(completed=8, total=8, percentage=completeness)
        ),
        score=90,
    )


def _categories(result):
    return [s.category for s in generate_suggestions(result)]


class SuggestionRuleTests(unittest.TestCase):
    def test_healthy_result_has_no_suggestions(self):
        self.assertEqual(generate_suggestions(_result()), [])

    def test_none_has_no_suggestions(self):
        self.assertEqual(generate_suggestions(None), [])

    def test_action_verb_threshold(self):
        self.assertEqual(_categories(_result(action=70)), [])
        suggestions = generate_suggestions(_result(action=69))
        self.assertEqual(len(suggestions), 1)
        self.assertEqual(suggestions[0].type, "warning")
        self.assertEqual(suggestions[0].priority, "high")
        self.assertEqual(suggestions[0].category, "Action Verbs")
        self.assertIn("69%", suggestions[0].message)

    def test_quantifiable_threshold(self):
        self.assertEqual(_categories(_result(quantifiable=40)), [])
        suggestions = generate_suggestions(_result(quantifiable=39))
        self.assertEqual(
            [(s.type, s.category, s.priority) for s in suggestions],
            [("warning", "Quantifiable Results", "high")],
        )

    def test_impact_word_threshold(self):
        self.assertEqual(_categories(_result(impact=50)), [])
        suggestions = generate_suggestions(_result(impact=49))
        self.assertEqual(
            [(s.type, s.category, s.priority) for s in suggestions],
            [("info", "Impact Words", "medium")],
        )

    def test_word_count_bounds(self):
        self.assertEqual(_categories(_result(words=200)), [])
        self.assertEqual(_categories(_result(words=600)), [])

        brief = generate_suggestions(_result(words=199))
        self.assertEqual([(s.type, s.priority) for s in brief], [("warning", "medium")])
        self.assertIn("too brief", brief[0].message)

        long = generate_suggestions(_result(words=601))
        self.assertEqual([(s.type, s.priority) for s in long], [("info", "low")])
        self.assertIn("too long", long[0].message)

    def test_bullet_count(self):
        self.assertEqual(_categories(_result(bullets=5)), [])

        few = generate_suggestions(_result(bullets=4))
        self.assertEqual([(s.type, s.category, s.priority) for s in few], [("warning", "Content", "high")])

        none = generate_suggestions(_result(bullets=0))
        self.assertEqual([(s.type, s.category, s.priority) for s in none], [("error", "Content", "critical")])

    def test_incomplete_sections_are_listed_in_section_order(self):
        result = analyze({
            "personalInfo": {"fullName": "Jane Doe", "email": "jane@example.com"},
            "summary": "Engineer",
        })
        completeness = [s for s in generate_suggestions(result) if s.category == "Completeness"]
        self.assertEqual(len(completeness), 1)
        self.assertEqual(completeness[0].type, "info")
        self.assertEqual(completeness[0].priority, "medium")
        self.assertEqual(completeness[0].message, "Your resume is 38% complete.")
        self.assertEqual(
            completeness[0].suggestion,
            "Complete these sections: Personal Information, Work Experience, Education, Skills, Projects",
        )

    def test_zero_result_suggestions(self):
        self.assertEqual(
            _categories(analyze(None)),
            ["Action Verbs", "Quantifiable Results", "Impact Words", "Content Length", "Content"],
        )

    def test_rules_fire_in_order(self):
        categories = _categories(analyze({}))
        self.assertEqual(
            categories,
            [
                "Action Verbs",
                "Quantifiable Results",
                "Impact Words",
                "Completeness",
                "Content Length",
                "Content",
            ],
        )


class ScoreRatingTests(unittest.TestCase):
    def test_bands(self):
        expected = {
            100: "Excellent",
            90: "Excellent",
            89: "Good",
            75: "Good",
            74: "Fair",
            60: "Fair",
            59: "Needs Work",
            40: "Needs Work",
            39: "Poor",
            0: "Poor",
        }
        for score, rating in expected.items():
            with self.subTest(score=score):
                self.assertEqual(get_score_rating(score).rating, rating)

    def test_colors(self):
        self.assertEqual(get_score_rating(95).color, "green")
        self.assertEqual(get_score_rating(10).color, "red")


if __name__ == "__main__":
    unittest.main()
