# services/insight_engine/library/__init__.py
# Rule tables per category plus their fallbacks.

from ..definitions import InsightCategory
from . import green_flags, red_flags, self_improvement, strengths
from .fallbacks import FALLBACKS

RULES_BY_CATEGORY = {
    InsightCategory.SELF_IMPROVEMENT: self_improvement.RULES,
    InsightCategory.STRENGTHS: strengths.RULES,
    InsightCategory.GREEN_FLAGS: green_flags.RULES,
    InsightCategory.RED_FLAGS: red_flags.RULES,
}

__all__ = ["FALLBACKS", "RULES_BY_CATEGORY"]
