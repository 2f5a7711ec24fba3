# services/insight_engine/completeness.py
# How much of a profile is filled in, overall and per framework.

import math
from typing import Dict, List

from .definitions import RECOGNIZED_FRAMEWORKS, BigFiveTrait, Framework
from .models import CompletenessReport, Profile

# Missing frameworks that most change the quality of the insights.
PRIORITY_FRAMEWORKS = frozenset({Framework.ATTACHMENT_STYLE.value, Framework.BIG_FIVE.value})


def calculate_completeness(profile: Profile) -> int:
    """Populated recognized frameworks as a whole percentage of all seven."""
    populated = len(profile.populated_frameworks())
    return int(math.floor(populated / len(RECOGNIZED_FRAMEWORKS) * 100 + 0.5))


def framework_completeness(profile: Profile) -> Dict[str, int]:
    scores = {framework.value: (100 if profile.is_populated(framework) else 0)
              for framework in RECOGNIZED_FRAMEWORKS}

    if profile.big_five is not None:
        valid_traits = sum(1 for trait in BigFiveTrait if profile.trait(trait) is not None)
        scores[Framework.BIG_FIVE.value] = valid_traits * 100 // len(BigFiveTrait)

    if profile.zodiac is not None:
        zodiac = profile.zodiac
        score = 60 if getattr(zodiac, "sun", None) else 0
        score += 20 if getattr(zodiac, "moon", None) else 0
        score += 20 if getattr(zodiac, "rising", None) else 0
        scores[Framework.ZODIAC.value] = score

    if profile.love_languages is not None and profile.top_love_language() is None:
        scores[Framework.LOVE_LANGUAGES.value] = 0

    return scores


def _recommendations(missing: List[str]) -> List[str]:
    recommendations = []
    missing_priority = [name for name in missing if name in PRIORITY_FRAMEWORKS]
    if missing_priority:
        recommendations.append(f"Complete {' and '.join(missing_priority)} for more accurate insights")
    if Framework.LOVE_LANGUAGES.value in missing:
        recommendations.append("Add Love Languages for better relationship compatibility insights")
    if not missing:
        recommendations.append("All frameworks completed - insights are comprehensive")
    return recommendations


def completeness_report(profile: Profile) -> CompletenessReport:
    frameworks = framework_completeness(profile)
    missing = [name for name, score in frameworks.items() if score == 0]
    return CompletenessReport(
        overall=calculate_completeness(profile),
        frameworks=frameworks,
        missing_frameworks=missing,
        recommendations=_recommendations(missing),
    )
