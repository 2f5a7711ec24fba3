# services/insight_engine/patterns.py
# Lightweight cross-framework pattern pass. It runs independently of the
# category engines and only feeds the overall confidence score.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .conditions import (
    AllOf,
    AnyOf,
    AttachmentIn,
    AttachmentIs,
    Condition,
    FrameworkPresent,
    HasTopLoveLanguage,
    MBTILetter,
    above,
    below,
    render_context,
)
from .definitions import FRAMEWORK_WEIGHTS, AttachmentStyle, BigFiveTrait, Framework
from .models import Profile

logger = logging.getLogger(__name__)


class PatternType(str, Enum):
    CONTRADICTION = "contradiction"
    STRENGTH = "strength"
    GROWTH_OPPORTUNITY = "growth-opportunity"
    COMPATIBILITY = "compatibility"


@dataclass(frozen=True)
class Pattern:
    type: PatternType
    confidence: float
    frameworks: Tuple[Framework, ...]
    description: str
    weight: float


@dataclass(frozen=True)
class PatternRule:
    type: PatternType
    confidence: float
    condition: Condition
    description: str

    def detect(self, profile: Profile) -> Pattern:
        frameworks = self.condition.frameworks
        return Pattern(
            type=self.type,
            confidence=self.confidence,
            frameworks=frameworks,
            description=self.description.format_map(render_context(profile)),
            weight=round(sum(FRAMEWORK_WEIGHTS[framework] for framework in frameworks), 2),
        )


_INSECURE_STYLES = frozenset({
    AttachmentStyle.ANXIOUS,
    AttachmentStyle.AVOIDANT,
    AttachmentStyle.FEARFUL_AVOIDANT,
})

PATTERN_RULES: List[PatternRule] = [
    # Contradictions
    PatternRule(
        PatternType.CONTRADICTION, 0.7,
        AnyOf((
            AllOf((MBTILetter(0, "E"), below(BigFiveTrait.EXTRAVERSION, 40))),
            AllOf((MBTILetter(0, "I"), above(BigFiveTrait.EXTRAVERSION, 60))),
        )),
        "Extraversion mismatch between MBTI and Big Five",
    ),
    PatternRule(
        PatternType.CONTRADICTION, 0.8,
        AllOf((AttachmentIs(AttachmentStyle.ANXIOUS), above(BigFiveTrait.NEUROTICISM, 70))),
        "High anxiety across multiple frameworks",
    ),
    # Strengths
    PatternRule(PatternType.STRENGTH, 0.8, above(BigFiveTrait.OPENNESS, 75), "High openness to experience"),
    PatternRule(PatternType.STRENGTH, 0.8, above(BigFiveTrait.CONSCIENTIOUSNESS, 75), "High conscientiousness"),
    PatternRule(PatternType.STRENGTH, 0.8, above(BigFiveTrait.EXTRAVERSION, 75), "High extraversion"),
    PatternRule(PatternType.STRENGTH, 0.8, above(BigFiveTrait.AGREEABLENESS, 75), "High agreeableness"),
    PatternRule(PatternType.STRENGTH, 0.9, AttachmentIs(AttachmentStyle.SECURE), "Secure attachment style"),
    # Growth opportunities
    PatternRule(PatternType.GROWTH_OPPORTUNITY, 0.75, below(BigFiveTrait.CONSCIENTIOUSNESS, 40),
                "Low conscientiousness: organization opportunity"),
    PatternRule(PatternType.GROWTH_OPPORTUNITY, 0.7, below(BigFiveTrait.AGREEABLENESS, 40),
                "Low agreeableness: empathy development"),
    PatternRule(PatternType.GROWTH_OPPORTUNITY, 0.8, above(BigFiveTrait.NEUROTICISM, 70),
                "High neuroticism: emotional regulation"),
    PatternRule(PatternType.GROWTH_OPPORTUNITY, 0.85, AttachmentIn(_INSECURE_STYLES),
                "{attachment_style} attachment: relationship work"),
    # Compatibility
    PatternRule(PatternType.COMPATIBILITY, 0.9, AttachmentIn(frozenset(AttachmentStyle)),
                "Attachment-based compatibility for {attachment_style}"),
    PatternRule(PatternType.COMPATIBILITY, 0.7, FrameworkPresent(Framework.BIG_FIVE),
                "Big Five complementary trait needs"),
    PatternRule(PatternType.COMPATIBILITY, 0.75, HasTopLoveLanguage(),
                "Primary love language: {top_love_language}"),
]


def detect_patterns(profile: Profile) -> List[Pattern]:
    """Runs every pattern rule; a rule that cannot be evaluated is skipped."""
    patterns: List[Pattern] = []
    for rule in PATTERN_RULES:
        try:
            if rule.condition.matches(profile):
                patterns.append(rule.detect(profile))
        except Exception as e:
            logger.warning(f"Skipping {rule.type.value} pattern '{rule.description}': {e}", exc_info=True)
    return patterns


def mean_pattern_confidence(patterns: List[Pattern], neutral: float = 0.5) -> float:
    if not patterns:
        return neutral
    return sum(pattern.confidence for pattern in patterns) / len(patterns)
