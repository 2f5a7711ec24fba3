# services/insight_engine/analysis.py
# Orchestrates the four category engines and the aggregate metrics.

import logging
from typing import Dict, List, Optional

from .completeness import calculate_completeness, completeness_report
from .definitions import (
    FRAMEWORK_WEIGHTS,
    MAX_INSIGHTS_PER_CATEGORY,
    Framework,
    InsightCategory,
)
from .engine import CategoryEngine
from .ids import IdGenerator, UUIDInsightIdGenerator
from .library import FALLBACKS, RULES_BY_CATEGORY
from .models import AnalysisResult, CompletenessReport, Profile
from .patterns import Pattern, detect_patterns, mean_pattern_confidence

logger = logging.getLogger(__name__)

# Frameworks that count towards the data side of the confidence blend.
CONFIDENCE_FRAMEWORKS = (
    Framework.ATTACHMENT_STYLE,
    Framework.BIG_FIVE,
    Framework.MBTI,
    Framework.LOVE_LANGUAGES,
)
DATA_CONFIDENCE_SHARE = 0.6
PATTERN_CONFIDENCE_SHARE = 0.4
NEUTRAL_PATTERN_CONFIDENCE = 0.5


def build_category_engines(quota: int = MAX_INSIGHTS_PER_CATEGORY,
                           id_generator: Optional[IdGenerator] = None,
                           fallback_for_empty_profile: bool = True) -> Dict[InsightCategory, CategoryEngine]:
    id_generator = id_generator or UUIDInsightIdGenerator()
    return {
        category: CategoryEngine(
            category=category,
            rules=RULES_BY_CATEGORY[category],
            fallback=FALLBACKS[category],
            quota=quota,
            id_generator=id_generator,
            fallback_for_empty_profile=fallback_for_empty_profile,
        )
        for category in InsightCategory
    }


def calculate_confidence(profile: Profile, patterns: List[Pattern]) -> float:
    """
    Blends how much of the high-value data is present (60%) with the mean
    confidence of the detected patterns (40%), rounded to two decimals.
    """
    total_weight = sum(FRAMEWORK_WEIGHTS[framework] for framework in CONFIDENCE_FRAMEWORKS)
    present_weight = sum(FRAMEWORK_WEIGHTS[framework] for framework in CONFIDENCE_FRAMEWORKS
                         if profile.is_populated(framework))
    data_confidence = present_weight / total_weight if total_weight else 0.0
    pattern_confidence = mean_pattern_confidence(patterns, NEUTRAL_PATTERN_CONFIDENCE)
    blended = data_confidence * DATA_CONFIDENCE_SHARE + pattern_confidence * PATTERN_CONFIDENCE_SHARE
    return round(min(max(blended, 0.0), 1.0), 2)


class AnalysisEngine:
    """
    Entry point for profile analysis.

    Each call builds a fresh AnalysisResult; nothing is cached between calls and
    the engines hold no per-request state, so one instance can serve
    concurrent callers.
    """

    def __init__(self,
                 quota: int = MAX_INSIGHTS_PER_CATEGORY,
                 id_generator: Optional[IdGenerator] = None,
                 fallback_for_empty_profile: bool = True,
                 engines: Optional[Dict[InsightCategory, CategoryEngine]] = None):
        self.engines = engines or build_category_engines(
            quota=quota,
            id_generator=id_generator,
            fallback_for_empty_profile=fallback_for_empty_profile,
        )
        missing = [category.value for category in InsightCategory if category not in self.engines]
        if missing:
            raise ValueError(f"No category engine configured for: {', '.join(missing)}")

    def detect_patterns(self, profile: Profile) -> List[Pattern]:
        return detect_patterns(profile)

    def generate_insights(self, profile: Profile) -> AnalysisResult:
        completeness = calculate_completeness(profile)
        patterns = self.detect_patterns(profile)
        confidence = calculate_confidence(profile, patterns)

        insights = {
            category: self.engines[category].generate(profile)[:MAX_INSIGHTS_PER_CATEGORY]
            for category in InsightCategory
        }

        logger.info(
            f"Generated insights for user {profile.user_id or 'anonymous'}: "
            f"completeness={completeness}, confidence={confidence}, patterns={len(patterns)}, "
            + ", ".join(f"{category.value}={len(items)}" for category, items in insights.items())
        )

        return AnalysisResult(
            self_improvement=insights[InsightCategory.SELF_IMPROVEMENT],
            strengths=insights[InsightCategory.STRENGTHS],
            green_flags=insights[InsightCategory.GREEN_FLAGS],
            red_flags=insights[InsightCategory.RED_FLAGS],
            confidence=confidence,
            completeness=completeness,
        )

    def validate_completeness(self, profile: Profile) -> CompletenessReport:
        return completeness_report(profile)
