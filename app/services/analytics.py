"""
Resume analytics engine.

``analyze()`` is the single entry point: it runs every analyzer over one
resume snapshot and combines their outputs into an AnalyticsResult. It keeps
no state between calls and never raises for a well-shaped document.
"""

import json
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from app.models.analytics import (
    ActionVerbAnalysis,
    AnalyticsReport,
    AnalyticsResult,
    CompletenessAnalysis,
    ImpactWordAnalysis,
    OverallCompleteness,
    QuantifiableAnalysis,
)
from app.models.resume import ResumeDocument
from app.services.analyzers import (
    SECTION_NAMES,
    analyze_action_verbs,
    analyze_completeness,
    analyze_impact_words,
    analyze_quantifiable,
    count_words,
)
from app.services.scorer import calculate_score
from app.services.suggestions import generate_suggestions, get_score_rating

logger = logging.getLogger(__name__)

ResumeInput = Union[ResumeDocument, Mapping[str, Any], None]


def empty_analytics_result() -> AnalyticsResult:
    """The result reported when there is no resume at all."""
    return AnalyticsResult(
        word_count=0,
        action_verbs=ActionVerbAnalysis(),
        quantifiable=QuantifiableAnalysis(),
        impact_words=ImpactWordAnalysis(),
        completeness=CompletenessAnalysis(
            sections={},
            overall=OverallCompleteness(completed=0, total=len(SECTION_NAMES), percentage=0),
        ),
        score=0,
    )


def _as_document(resume: Union[ResumeDocument, Mapping[str, Any]]) -> ResumeDocument:
    if isinstance(resume, ResumeDocument):
        return resume
    return ResumeDocument.model_validate(resume)


def analyze(resume: ResumeInput) -> AnalyticsResult:
    """
    Compute analytics for a resume.

    Args:
        resume: A ResumeDocument, a camelCase mapping of one, or None

    Returns:
        A freshly built AnalyticsResult
    """
    if resume is None:
        return empty_analytics_result()

    document = _as_document(resume)

    word_count = count_words(document)
    action_verbs = analyze_action_verbs(document)
    quantifiable = analyze_quantifiable(document)
    impact_words = analyze_impact_words(document)
    completeness = analyze_completeness(document)

    score = calculate_score(completeness, action_verbs, quantifiable, impact_words)

    logger.debug(
        f"Analyzed resume id={document.id or '-'}: score={score}, "
        f"bullets={action_verbs.total_bullets}, words={word_count}"
    )

    return AnalyticsResult(
        word_count=word_count,
        action_verbs=action_verbs,
        quantifiable=quantifiable,
        impact_words=impact_words,
        completeness=completeness,
        score=score,
    )


def build_analytics_report(resume: ResumeInput, resume_id: Optional[str] = None) -> AnalyticsReport:
    """Analytics plus suggestions and a display rating, ready for the UI."""
    if resume is None:
        return AnalyticsReport(success=False, resume_id=resume_id, error="Resume not found")

    document = _as_document(resume)
    analytics = analyze(document)

    return AnalyticsReport(
        success=True,
        resume_id=resume_id or document.id or None,
        resume_title=document.title,
        target_role=document.target_role,
        analytics=analytics,
        suggestions=generate_suggestions(analytics),
        rating=get_score_rating(analytics.score),
    )


def export_analytics_data(data: Union[BaseModel, Mapping[str, Any]]) -> str:
    """Pretty-printed JSON for download."""
    if isinstance(data, BaseModel):
        payload = data.model_dump(by_alias=True, exclude_none=True)
    else:
        payload = dict(data)
    return json.dumps(payload, indent=2)
