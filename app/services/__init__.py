"""Services for the Resume Analytics Backend."""
from app.services.analytics import analyze, build_analytics_report
from app.services.suggestions import generate_suggestions, get_score_rating

__all__ = ["analyze", "build_analytics_report", "generate_suggestions", "get_score_rating"]
