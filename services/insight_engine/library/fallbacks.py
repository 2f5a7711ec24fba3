# services/insight_engine/library/fallbacks.py
# One generic insight per category, used when none of its rules fire.

from ..definitions import InsightCategory
from ..rules import InsightTemplate

FALLBACK_CONFIDENCE = 0.5

FALLBACKS = {
    InsightCategory.SELF_IMPROVEMENT: InsightTemplate(
        title="Self-Awareness Journey",
        description="Understanding yourself is where growth starts. As you explore more frameworks you will notice the "
                    "patterns that shape your relationships and decisions, so keep reflecting on what resonates.",
        explanation="Self-awareness built through personality assessment gives a foundation for personal development "
                    "and healthier relationships.",
        actionable="Complete another framework, then note one pattern you recognize in yourself this week.",
        confidence=FALLBACK_CONFIDENCE,
    ),
    InsightCategory.STRENGTHS: InsightTemplate(
        title="Authentic Self-Expression",
        description="Your particular mix of traits is where your strengths come from. Leaning into what makes you "
                    "distinctive lets you contribute something only you can bring.",
        explanation="Every personality profile holds strengths that become powerful once they are recognized and "
                    "developed on purpose.",
        actionable="Ask two people who know you well what they rely on you for.",
        confidence=FALLBACK_CONFIDENCE,
    ),
    InsightCategory.GREEN_FLAGS: InsightTemplate(
        title="Emotional Compatibility",
        description="Look for partners who communicate openly and are genuinely curious about you. Relationships thrive "
                    "when both people feel heard, valued and free to be themselves.",
        explanation="Emotional safety and mutual understanding underpin fulfilling relationships whatever the specific "
                    "personality traits involved.",
        confidence=FALLBACK_CONFIDENCE,
    ),
    InsightCategory.RED_FLAGS: InsightTemplate(
        title="Disrespect of Boundaries",
        description="Be careful with partners who keep crossing boundaries you have stated, wave away your needs or make "
                    "you feel guilty for having limits.",
        explanation="Boundary violations signal a basic lack of respect that erodes trust and safety with any "
                    "personality type.",
        confidence=FALLBACK_CONFIDENCE,
    ),
}
