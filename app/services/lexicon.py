"""Trigger-word tables for bullet classification.

Entries are matched as prefixes of lower-cased bullet tokens, so order matters
only for how ties are ranked in the verb/word frequency breakdowns.
"""

# Action verbs a bullet point should open with
ACTION_VERBS = (
    "achieved", "implemented", "developed", "designed", "led", "managed", "created",
    "built", "launched", "improved", "increased", "reduced", "optimized", "streamlined",
    "coordinated", "facilitated", "established", "delivered", "executed", "spearheaded",
    "directed", "conducted", "generated", "analyzed", "resolved", "collaborated",
    "mentored", "trained", "automated", "migrated", "integrated", "architected",
    "initiated", "pioneered", "transformed", "enhanced", "maintained", "supervised",
    "administered", "planned", "organized", "negotiated", "presented", "demonstrated",
    "evaluated", "reviewed", "audited", "researched", "investigated", "documented",
    "compiled", "tested", "debugged", "deployed", "configured", "upgraded",
    "standardized", "consolidated", "eliminated", "reorganized", "restructured",
    "accelerated", "expanded", "modernized", "revitalized", "simplified",
)

# Impact words that show results and achievements
IMPACT_WORDS = (
    "increased", "decreased", "reduced", "improved", "enhanced", "optimized",
    "accelerated", "boosted", "maximized", "minimized", "saved", "generated",
    "achieved", "exceeded", "delivered", "transformed", "pioneered", "innovated",
    "streamlined", "eliminated", "scaled", "doubled", "tripled", "quadrupled",
    "strengthened", "amplified", "expedited", "surpassed", "outperformed",
)
