"""Analytics result models returned by the analytics engine and the API."""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class VerbCount(BaseModel):
    verb: str
    count: int


class WordCount(BaseModel):
    word: str
    count: int


class ActionVerbAnalysis(BaseModel):
    """Action verb usage across all bullets."""
    total_bullets: int = Field(0, alias="totalBullets")
    bullets_with_action_verbs: int = Field(0, alias="bulletsWithActionVerbs")
    percentage: int = Field(0, ge=0, le=100)
    verb_counts: Dict[str, int] = Field(default_factory=dict, alias="verbCounts")
    top_verbs: List[VerbCount] = Field(default_factory=list, alias="topVerbs")

    class Config:
        populate_by_name = True


class QuantifiableAnalysis(BaseModel):
    """Bullets carrying numbers or metrics."""
    total_bullets: int = Field(0, alias="totalBullets")
    quantifiable_bullets: int = Field(0, alias="quantifiableBullets")
    percentage: int = Field(0, ge=0, le=100)

    class Config:
        populate_by_name = True


class ImpactWordAnalysis(BaseModel):
    """Outcome-oriented vocabulary across all bullets."""
    total_bullets: int = Field(0, alias="totalBullets")
    bullets_with_impact_words: int = Field(0, alias="bulletsWithImpactWords")
    percentage: int = Field(0, ge=0, le=100)
    impact_word_counts: Dict[str, int] = Field(default_factory=dict, alias="impactWordCounts")
    top_words: List[WordCount] = Field(default_factory=list, alias="topWords")

    class Config:
        populate_by_name = True


class SectionCompleteness(BaseModel):
    """Completeness of one resume section."""
    name: str
    percentage: int = Field(..., ge=0, le=100)
    completed: int
    total: int
    count: Optional[int] = None
    bonus: Optional[int] = None


class OverallCompleteness(BaseModel):
    completed: int = 0
    total: int = 0
    percentage: int = Field(0, ge=0, le=100)


class CompletenessAnalysis(BaseModel):
    sections: Dict[str, SectionCompleteness] = Field(default_factory=dict)
    overall: OverallCompleteness = Field(default_factory=OverallCompleteness)


class AnalyticsResult(BaseModel):
    """Complete analytics for one resume."""
    word_count: int = Field(0, alias="wordCount", ge=0)
    action_verbs: ActionVerbAnalysis = Field(default_factory=ActionVerbAnalysis, alias="actionVerbs")
    quantifiable: QuantifiableAnalysis = Field(default_factory=QuantifiableAnalysis)
    impact_words: ImpactWordAnalysis = Field(default_factory=ImpactWordAnalysis, alias="impactWords")
    completeness: CompletenessAnalysis = Field(default_factory=CompletenessAnalysis)
    score: int = Field(0, ge=0, le=100)

    class Config:
        populate_by_name = True

    def to_dict(self) -> Dict[str, Any]:
        """camelCase JSON-ready dict; section fields a section does not carry are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


SuggestionType = Literal["error", "warning", "info"]
SuggestionPriority = Literal["critical", "high", "medium", "low"]


class Suggestion(BaseModel):
    """One piece of improvement advice."""
    type: SuggestionType
    category: str
    message: str
    suggestion: str
    priority: SuggestionPriority


class ScoreRating(BaseModel):
    """Display band for a score."""
    rating: str
    color: str
    message: str


class AnalyticsReport(BaseModel):
    """Analytics envelope served to the presentation layer."""
    success: bool
    resume_id: Optional[str] = Field(None, alias="resumeId")
    resume_title: Optional[str] = Field(None, alias="resumeTitle")
    target_role: Optional[str] = Field(None, alias="targetRole")
    analytics: Optional[AnalyticsResult] = None
    suggestions: List[Suggestion] = Field(default_factory=list)
    rating: Optional[ScoreRating] = None
    error: Optional[str] = None

    class Config:
        populate_by_name = True

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
    cache_enabled: bool = Field(alias="cacheEnabled")

    class Config:
        populate_by_name = True
