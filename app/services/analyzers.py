"""
Resume analyzers.

Each analyzer is a pure function of a ResumeDocument:
- Action verb usage across bullets
- Quantifiable metric detection
- Impact word usage across bullets
- Section completeness
- Total word count

Bullets are experience descriptions plus project highlights (see
``collect_bullets``).
"""

import re
from typing import Iterable

from app.models.analytics import (
    ActionVerbAnalysis,
    CompletenessAnalysis,
    ImpactWordAnalysis,
    OverallCompleteness,
    QuantifiableAnalysis,
    SectionCompleteness,
    VerbCount,
    WordCount,
)
from app.models.resume import ResumeDocument
from app.services.lexicon import ACTION_VERBS, IMPACT_WORDS
from app.services.text_utils import (
    WHITESPACE_CHARS,
    collect_bullets,
    find_lexicon_matches,
    percentage_of,
    rank_counts,
    word_count,
)


# Any match marks a bullet as quantifiable
# Digits are ASCII only; Arabic-Indic and other Unicode digits do not count
QUANTIFIABLE_PATTERNS = (
    re.compile(r"\d+%", re.ASCII),                            # Percentages: 25%
    re.compile(r"\$\d+", re.ASCII),                           # Dollar amounts: $1000
    re.compile(r"\d+\+", re.ASCII),                           # Numbers with plus: 50+
    re.compile(r"\d{1,3}(,\d{3})*", re.ASCII),                # Comma-grouped numbers: 1,000
    re.compile(r"\d+(\.\d+)?[KMB]", re.ASCII),                # Scale suffix: 5K, 1.5M
    re.compile(r"\d+x", re.IGNORECASE | re.ASCII),            # Multipliers: 2x, 10X
    re.compile(r"\d+-\d+", re.ASCII),                         # Ranges: 10-15
    re.compile(
        rf"\d+[{WHITESPACE_CHARS}]*(hours?|days?|weeks?|months?|years?)",
        re.IGNORECASE | re.ASCII,
    ),                                                        # Durations: 3 months
)

# Display names, in reporting order
SECTION_NAMES = {
    "personalInfo": "Personal Information",
    "summary": "Professional Summary",
    "experience": "Work Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
}

PERSONAL_INFO_REQUIRED = ("full_name", "email", "phone")
PERSONAL_INFO_OPTIONAL = ("location", "linkedin", "github", "portfolio")

TOP_RANK_LIMIT = 10


def _count_lexicon_usage(bullets: list[str], lexicon: Iterable[str]) -> tuple[int, dict[str, int]]:
    """Bullets with at least one match, and per-entry bullet counts."""
    lexicon = tuple(lexicon)
    counts: dict[str, int] = {}
    matching = 0
    for bullet in bullets:
        found = find_lexicon_matches(bullet, lexicon)
        if found:
            matching += 1
        for entry in found:
            counts[entry] = counts.get(entry, 0) + 1
    return matching, counts


def analyze_action_verbs(resume: ResumeDocument) -> ActionVerbAnalysis:
    """Classify bullets by whether they contain a recognized action verb."""
    bullets = collect_bullets(resume)
    matching, verb_counts = _count_lexicon_usage(bullets, ACTION_VERBS)

    return ActionVerbAnalysis(
        total_bullets=len(bullets),
        bullets_with_action_verbs=matching,
        percentage=percentage_of(matching, len(bullets)),
        verb_counts=verb_counts,
        top_verbs=[
            VerbCount(verb=verb, count=count)
            for verb, count in rank_counts(verb_counts, TOP_RANK_LIMIT)
        ],
    )


def has_quantifiable_metric(text: str) -> bool:
    if not text or not isinstance(text, str):
        return False
    return any(pattern.search(text) for pattern in QUANTIFIABLE_PATTERNS)


def analyze_quantifiable(resume: ResumeDocument) -> QuantifiableAnalysis:
    """Classify bullets by presence of numbers, percentages, money, durations."""
    bullets = collect_bullets(resume)
    quantifiable = sum(1 for bullet in bullets if has_quantifiable_metric(bullet))

    return QuantifiableAnalysis(
        total_bullets=len(bullets),
        quantifiable_bullets=quantifiable,
        percentage=percentage_of(quantifiable, len(bullets)),
    )


def analyze_impact_words(resume: ResumeDocument) -> ImpactWordAnalysis:
    """Classify bullets by presence of outcome-oriented vocabulary."""
    bullets = collect_bullets(resume)
    matching, word_counts = _count_lexicon_usage(bullets, IMPACT_WORDS)

    return ImpactWordAnalysis(
        total_bullets=len(bullets),
        bullets_with_impact_words=matching,
        percentage=percentage_of(matching, len(bullets)),
        impact_word_counts=word_counts,
        top_words=[
            WordCount(word=word, count=count)
            for word, count in rank_counts(word_counts, TOP_RANK_LIMIT)
        ],
    )


def _is_filled(value: str) -> bool:
    return bool(value and value.strip())


def _presence_section(key: str, present: bool, count: int | None = None) -> SectionCompleteness:
    completed = 1 if present else 0
    return SectionCompleteness(
        name=SECTION_NAMES[key],
        completed=completed,
        total=1,
        percentage=completed * 100,
        count=count,
    )


def analyze_completeness(resume: ResumeDocument) -> CompletenessAnalysis:
    """
    Score structural presence across the six resume sections.

    personalInfo counts each required field (3 units); every other section is
    a single unit, so the overall denominator is 8. Optional contact fields
    only feed the personalInfo ``bonus`` counter.
    """
    info = resume.personal_info
    required_filled = sum(1 for name in PERSONAL_INFO_REQUIRED if _is_filled(getattr(info, name)))
    optional_filled = sum(1 for name in PERSONAL_INFO_OPTIONAL if _is_filled(getattr(info, name)))
    total_skills = sum(len(category.items) for category in resume.skills)

    sections = {
        "personalInfo": SectionCompleteness(
            name=SECTION_NAMES["personalInfo"],
            completed=required_filled,
            total=len(PERSONAL_INFO_REQUIRED),
            percentage=percentage_of(required_filled, len(PERSONAL_INFO_REQUIRED)),
            bonus=optional_filled,
        ),
        "summary": _presence_section("summary", _is_filled(resume.summary)),
        "experience": _presence_section(
            "experience", len(resume.experience) > 0, count=len(resume.experience)
        ),
        "education": _presence_section(
            "education", len(resume.education) > 0, count=len(resume.education)
        ),
        "skills": _presence_section("skills", total_skills > 0, count=total_skills),
        "projects": _presence_section(
            "projects", len(resume.projects) > 0, count=len(resume.projects)
        ),
    }

    completed = sum(section.completed for section in sections.values())
    total = sum(section.total for section in sections.values())

    return CompletenessAnalysis(
        sections=sections,
        overall=OverallCompleteness(
            completed=completed,
            total=total,
            percentage=percentage_of(completed, total),
        ),
    )


def count_words(resume: ResumeDocument) -> int:
    """Total words across summary, bullets, achievements and project text."""
    total = word_count(resume.summary)

    for exp in resume.experience:
        total += sum(word_count(bullet) for bullet in exp.description)

    for edu in resume.education:
        total += sum(word_count(achievement) for achievement in edu.achievements)

    for project in resume.projects:
        total += word_count(project.description)
        total += sum(word_count(highlight) for highlight in project.highlights)

    return total
