"""
Analyzer configuration.

An AnalyzerConfig bundles every vocabulary and weight the analyzer reads.
It is frozen and its tables are read-only; use with_overrides() to derive a
new configuration (e.g. for another vocabulary) instead of mutating one.

Example usage:
    config = AnalyzerConfig().with_overrides(
        time_indicators=("today", "tonight"),
    )
    analyzer = TaskAnalyzer(config)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from task_insight.confidence import ConfidenceWeights
from task_insight.models import CategoryPattern
from task_insight.models import PriorityLevel
from task_insight.models import PriorityPattern
from task_insight.models import TaskCategory
from task_insight.patterns import CATEGORY_PATTERNS
from task_insight.patterns import CONTEXT_ADJUSTMENTS
from task_insight.patterns import NEGATIONS
from task_insight.patterns import PRIORITY_PATTERNS
from task_insight.patterns import SENTIMENT_LEXICON
from task_insight.patterns import TIME_INDICATORS


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Vocabularies and weights for a TaskAnalyzer.

    Mappings passed in are copied into read-only views, so later changes
    to the caller's dicts do not leak into the analyzer.
    """

    priority_patterns: Mapping[PriorityLevel, PriorityPattern] = field(
        default_factory=lambda: PRIORITY_PATTERNS
    )
    category_patterns: Mapping[TaskCategory, CategoryPattern] = field(
        default_factory=lambda: CATEGORY_PATTERNS
    )
    time_indicators: tuple[str, ...] = TIME_INDICATORS
    negations: tuple[str, ...] = NEGATIONS
    context_adjustments: Mapping[
        TaskCategory, tuple[tuple[str, float], ...]
    ] = field(default_factory=lambda: CONTEXT_ADJUSTMENTS)
    sentiment_lexicon: Mapping[str, float] = field(
        default_factory=lambda: SENTIMENT_LEXICON
    )
    confidence_weights: ConfidenceWeights = field(
        default_factory=ConfidenceWeights
    )
    default_priority: PriorityLevel = PriorityLevel.MEDIUM
    default_category: TaskCategory = TaskCategory.OTHER

    def __post_init__(self) -> None:
        missing_levels = [
            level.value
            for level in PriorityLevel
            if level not in self.priority_patterns
        ]
        if missing_levels:
            raise ValueError(
                f"priority_patterns missing levels: {missing_levels}"
            )
        missing_categories = [
            category.value
            for category in TaskCategory
            if category not in self.category_patterns
        ]
        if missing_categories:
            raise ValueError(
                f"category_patterns missing categories: {missing_categories}"
            )

        for name in (
            "priority_patterns",
            "category_patterns",
            "context_adjustments",
            "sentiment_lexicon",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        object.__setattr__(
            self, "time_indicators", tuple(self.time_indicators)
        )
        object.__setattr__(self, "negations", tuple(self.negations))

    def with_overrides(self, **changes: Any) -> "AnalyzerConfig":
        """Return a new config with the given fields replaced."""
        return replace(self, **changes)
