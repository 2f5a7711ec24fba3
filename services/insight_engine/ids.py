# services/insight_engine/ids.py
# Insight id generators. Engines take one by injection so tests can pin ids.

import itertools
import threading
import uuid
from typing import Callable

from .definitions import InsightCategory

IdGenerator = Callable[[InsightCategory], str]


class UUIDInsightIdGenerator:
    """Default generator: `<category>-<uuid4 hex>`, unique across calls and processes."""

    def __call__(self, category: InsightCategory) -> str:
        return f"{category.value}-{uuid.uuid4().hex}"


class SequentialInsightIdGenerator:
    """`<category>-<n>` from a shared counter; deterministic for a fresh instance."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self, category: InsightCategory) -> str:
        with self._lock:
            number = next(self._counter)
        return f"{category.value}-{number}"
