# services/insight_engine/engine.py
# Category engine: evaluates one category's rule table against a profile and
# reduces the fired rules to a bounded, ranked list of insights.

import logging
from typing import Dict, List, Optional, Sequence

from .conditions import render_context
from .definitions import MAX_INSIGHTS_PER_CATEGORY, InsightCategory
from .ids import IdGenerator, UUIDInsightIdGenerator
from .models import Insight, Profile, RuleEvaluationError
from .ranking import rank_and_select
from .rules import InsightCandidate, InsightRule, InsightTemplate

logger = logging.getLogger(__name__)


class CategoryEngine:
    """
    Generates the insights for a single category.

    Rules are evaluated in table order (which follows rule-group order), every
    fired rule becomes a candidate, and `rank_and_select` picks at most three.
    When nothing fires the category's fallback insight is returned instead.
    A rule whose condition or template fails is logged and skipped.
    """

    def __init__(self,
                 category: InsightCategory,
                 rules: Sequence[InsightRule],
                 fallback: InsightTemplate,
                 quota: int = MAX_INSIGHTS_PER_CATEGORY,
                 id_generator: Optional[IdGenerator] = None,
                 fallback_for_empty_profile: bool = True):
        if quota < 1:
            raise ValueError(f"Quota must be at least 1, got {quota}")
        self.category = category
        self.rules = tuple(sorted(rules, key=lambda rule: rule.priority))
        self.fallback = fallback
        self.quota = min(quota, MAX_INSIGHTS_PER_CATEGORY)
        self.id_generator = id_generator or UUIDInsightIdGenerator()
        self.fallback_for_empty_profile = fallback_for_empty_profile

    def collect_candidates(self, profile: Profile) -> List[InsightCandidate]:
        context = render_context(profile)
        candidates: List[InsightCandidate] = []
        for rule in self.rules:
            try:
                candidate = self._evaluate(rule, profile, context)
            except RuleEvaluationError as e:
                logger.warning(f"Skipping rule in {self.category.value}: {e}", exc_info=True)
                continue
            if candidate is not None:
                logger.debug(f"Rule {rule.rule_id} fired (priority={rule.priority}, weight={rule.weight})")
                candidates.append(candidate)
        return candidates

    def generate(self, profile: Profile) -> List[Insight]:
        candidates = self.collect_candidates(profile)
        selected = rank_and_select(candidates, self.quota)

        if not selected:
            if profile.has_any_data() or self.fallback_for_empty_profile:
                logger.debug(f"No {self.category.value} rules fired; using fallback '{self.fallback.title}'")
                return [self._fallback_insight()]
            return []

        return [self._to_insight(candidate) for candidate in selected]

    def _evaluate(self, rule: InsightRule, profile: Profile,
                  context: Dict[str, object]) -> Optional[InsightCandidate]:
        try:
            if not rule.condition.matches(profile):
                return None
            text = rule.template.render(context)
        except Exception as e:
            raise RuleEvaluationError(rule.rule_id, e) from e
        return InsightCandidate(
            rule_id=rule.rule_id,
            priority=rule.priority,
            weight=rule.weight,
            confidence=rule.template.confidence,
            text=text,
            sources=rule.sources,
        )

    def _to_insight(self, candidate: InsightCandidate) -> Insight:
        return Insight(
            id=self.id_generator(self.category),
            title=candidate.text.title,
            description=candidate.text.description,
            explanation=candidate.text.explanation,
            actionable=candidate.text.actionable,
            confidence=candidate.confidence,
            source_frameworks=[framework.value for framework in candidate.sources],
        )

    def _fallback_insight(self) -> Insight:
        text = self.fallback.render({})
        return Insight(
            id=self.id_generator(self.category),
            title=text.title,
            description=text.description,
            explanation=text.explanation,
            actionable=text.actionable,
            confidence=self.fallback.confidence,
            source_frameworks=[],
        )
