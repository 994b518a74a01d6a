"""Data models for the Resume Analytics Backend."""
from app.models.resume import (
    PersonalInfo,
    Experience,
    Education,
    Skill,
    Project,
    ResumeDocument,
)
from app.models.analytics import (
    ActionVerbAnalysis,
    QuantifiableAnalysis,
    ImpactWordAnalysis,
    SectionCompleteness,
    CompletenessAnalysis,
    AnalyticsResult,
    Suggestion,
    ScoreRating,
    AnalyticsReport,
)

__all__ = [
    "PersonalInfo",
    "Experience",
    "Education",
    "Skill",
    "Project",
    "ResumeDocument",
    "ActionVerbAnalysis",
    "QuantifiableAnalysis",
    "ImpactWordAnalysis",
    "SectionCompleteness",
    "CompletenessAnalysis",
    "AnalyticsResult",
    "Suggestion",
    "ScoreRating",
    "AnalyticsReport",
]
