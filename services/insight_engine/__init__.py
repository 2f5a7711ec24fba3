# services/insight_engine/__init__.py
# Rule-based insight generation over a normalized personality profile.

from .analysis import AnalysisEngine
from .models import (
    AnalysisResult,
    Insight,
    InsightEngineError,
    InvalidProfileError,
    Profile,
)

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "Insight",
    "InsightEngineError",
    "InvalidProfileError",
    "Profile",
]
