"""
Improvement advice derived from an AnalyticsResult.

These thresholds are tuned for advice and are independent of the scoring
thresholds in ``app.services.scorer``.
"""

from typing import List, Optional

from app.models.analytics import AnalyticsResult, ScoreRating, Suggestion


SUGGESTION_THRESHOLDS = {
    "action_verb_percentage": 70,
    "quantifiable_percentage": 40,
    "impact_word_percentage": 50,
    "completeness_percentage": 100,
    "min_word_count": 200,
    "max_word_count": 600,
    "min_bullets": 5,
}

# (minimum score, rating, color, message), highest band first
SCORE_RATINGS = (
    (90, "Excellent", "green", "Your resume is in great shape! Keep up the excellent work."),
    (75, "Good", "blue", "Your resume is looking good. A few improvements could make it even better."),
    (60, "Fair", "yellow", "Your resume needs some improvements. Focus on the suggestions below."),
    (40, "Needs Work", "orange", "Your resume needs significant improvements. Review the suggestions carefully."),
)
LOWEST_RATING = ("Poor", "red", "Your resume requires major improvements. Start by completing all sections.")


def generate_suggestions(analytics: Optional[AnalyticsResult]) -> List[Suggestion]:
    """
    Evaluate the advice rules against a completed analysis.

    Args:
        analytics: Result of ``analyze()``; ``None`` yields no suggestions

    Returns:
        Suggestions in rule order
    """
    suggestions: List[Suggestion] = []
    if analytics is None:
        return suggestions

    limits = SUGGESTION_THRESHOLDS

    action_pct = analytics.action_verbs.percentage
    if action_pct < limits["action_verb_percentage"]:
        suggestions.append(Suggestion(
            type="warning",
            category="Action Verbs",
            message=f"Only {action_pct}% of your bullet points start with action verbs.",
            suggestion="Start each bullet point with a strong action verb to demonstrate your impact.",
            priority="high",
        ))

    quant_pct = analytics.quantifiable.percentage
    if quant_pct < limits["quantifiable_percentage"]:
        suggestions.append(Suggestion(
            type="warning",
            category="Quantifiable Results",
            message=f"Only {quant_pct}% of your achievements include numbers or metrics.",
            suggestion="Add specific numbers, percentages, or metrics to demonstrate measurable impact.",
            priority="high",
        ))

    impact_pct = analytics.impact_words.percentage
    if impact_pct < limits["impact_word_percentage"]:
        suggestions.append(Suggestion(
            type="info",
            category="Impact Words",
            message=f"{impact_pct}% of your bullets include result-oriented words.",
            suggestion='Use more impact words like "increased", "reduced", "improved" to show results.',
            priority="medium",
        ))

    overall_pct = analytics.completeness.overall.percentage
    if overall_pct < limits["completeness_percentage"]:
        incomplete = [
            section.name
            for section in analytics.completeness.sections.values()
            if section.percentage < 100
        ]
        # The zero result carries no sections, so there is nothing to name
        if incomplete:
            suggestions.append(Suggestion(
                type="info",
                category="Completeness",
                message=f"Your resume is {overall_pct}% complete.",
                suggestion=f"Complete these sections: {', '.join(incomplete)}",
                priority="medium",
            ))

    words = analytics.word_count
    if words < limits["min_word_count"]:
        suggestions.append(Suggestion(
            type="warning",
            category="Content Length",
            message=f"Your resume has {words} words, which may be too brief.",
            suggestion="Add more detail to your experience and achievements to reach 300-500 words.",
            priority="medium",
        ))
    elif words > limits["max_word_count"]:
        suggestions.append(Suggestion(
            type="info",
            category="Content Length",
            message=f"Your resume has {words} words, which may be too long.",
            suggestion="Consider condensing your content to keep it concise and impactful.",
            priority="low",
        ))

    total_bullets = analytics.action_verbs.total_bullets
    if total_bullets == 0:
        suggestions.append(Suggestion(
            type="error",
            category="Content",
            message="Your resume has no bullet points in experience or projects.",
            suggestion="Add detailed descriptions of your work and achievements.",
            priority="critical",
        ))
    elif total_bullets < limits["min_bullets"]:
        suggestions.append(Suggestion(
            type="warning",
            category="Content",
            message="Your resume has very few bullet points.",
            suggestion="Add more detail about your accomplishments and responsibilities.",
            priority="high",
        ))

    return suggestions


def get_score_rating(score: int) -> ScoreRating:
    """Map a score to its display band. Cosmetic only; not part of scoring."""
    for minimum, rating, color, message in SCORE_RATINGS:
        if score >= minimum:
            return ScoreRating(rating=rating, color=color, message=message)
    rating, color, message = LOWEST_RATING
    return ScoreRating(rating=rating, color=color, message=message)
