# services/insight_engine/rules.py
# Declarative rule records: a condition paired with the insight template it emits.

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .conditions import Condition
from .definitions import Framework, RuleGroup


class _StrictContext(dict):
    def __missing__(self, key):
        raise KeyError(f"Template placeholder '{key}' has no value in this profile")


@dataclass(frozen=True)
class RenderedText:
    title: str
    description: str
    explanation: str
    actionable: Optional[str]


@dataclass(frozen=True)
class InsightTemplate:
    """Static insight text. Description, explanation and actionable may hold
    `{placeholders}` filled from the profile; the title is never interpolated."""
    title: str
    description: str
    explanation: str
    confidence: float
    actionable: Optional[str] = None

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Template '{self.title}' confidence {self.confidence} is outside 0..1")

    def render(self, context: Mapping[str, object]) -> RenderedText:
        values = _StrictContext(context)
        return RenderedText(
            title=self.title,
            description=self.description.format_map(values),
            explanation=self.explanation.format_map(values),
            actionable=self.actionable.format_map(values) if self.actionable else None,
        )


@dataclass(frozen=True)
class InsightRule:
    rule_id: str
    group: RuleGroup
    weight: float
    condition: Condition
    template: InsightTemplate

    @property
    def priority(self) -> int:
        return int(self.group.value)

    @property
    def sources(self) -> Tuple[Framework, ...]:
        return self.condition.frameworks


@dataclass(frozen=True)
class InsightCandidate:
    """A fired rule's rendered insight, prior to ranking and id assignment."""
    rule_id: str
    priority: int
    weight: float
    confidence: float
    text: RenderedText
    sources: Tuple[Framework, ...]

    @property
    def title(self) -> str:
        return self.text.title
