# services/insight_engine/ranking.py
# Shared candidate selection for every category engine.

import logging
from typing import Iterable, List

from .definitions import MAX_INSIGHTS_PER_CATEGORY
from .rules import InsightCandidate

logger = logging.getLogger(__name__)


def rank_and_select(candidates: Iterable[InsightCandidate],
                    quota: int = MAX_INSIGHTS_PER_CATEGORY) -> List[InsightCandidate]:
    """
    Orders candidates by (priority asc, weight desc, confidence desc) and keeps
    the first `quota` with distinct titles.

    The sort is stable, so candidates that tie on all three keys keep the order
    in which their rules were evaluated. The quota is capped at
    MAX_INSIGHTS_PER_CATEGORY whatever the caller asks for.
    """
    limit = max(0, min(quota, MAX_INSIGHTS_PER_CATEGORY))
    ordered = sorted(
        candidates,
        key=lambda candidate: (candidate.priority, -candidate.weight, -candidate.confidence),
    )

    selected: List[InsightCandidate] = []
    seen_titles = set()
    for candidate in ordered:
        if len(selected) >= limit:
            break
        if candidate.title in seen_titles:
            logger.debug(f"Dropping duplicate insight '{candidate.title}' from rule {candidate.rule_id}")
            continue
        seen_titles.add(candidate.title)
        selected.append(candidate)

    return selected[:limit]
