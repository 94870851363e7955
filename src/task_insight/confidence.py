"""Confidence scoring for an analysis result."""

from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass

from task_insight.models import CategoryPattern
from task_insight.models import PriorityLevel
from task_insight.models import PriorityPattern
from task_insight.models import TaskCategory
from task_insight.nlp import keyword_score


@dataclass(frozen=True)
class ConfidenceWeights:
    """
    Weights for the additive confidence formula.

    With no signal at all the confidence is exactly `base`.
    """

    base: float = 0.5
    priority_keywords: float = 0.3
    category_keywords: float = 0.3
    sentiment: float = 0.2
    per_entity: float = 0.1
    entity_cap: float = 0.3


def _longest_keyword_list(patterns: Sequence[Sequence[str]]) -> int:
    return max((len(keywords) for keywords in patterns), default=0)


def _normalized(score: float, longest: int) -> float:
    return score / longest if longest else 0.0


def calculate_confidence(
    text: str,
    priority: PriorityLevel,
    category: TaskCategory,
    sentiment: float,
    entity_count: int,
    priority_patterns: Mapping[PriorityLevel, PriorityPattern],
    category_patterns: Mapping[TaskCategory, CategoryPattern],
    weights: ConfidenceWeights | None = None,
) -> float:
    """
    Combine keyword strength, sentiment and entities into one value.

    Keyword scores for the winning priority and category are normalized by
    the longest keyword list on their axis, so a single hit contributes
    little and many hits approach the full weight.

    Args:
        text: Normalized text.
        priority: Winning priority level.
        category: Winning category.
        sentiment: Summed lexicon polarity.
        entity_count: Number of extracted entities, duplicates included.
        priority_patterns: Priority vocabulary table.
        category_patterns: Category vocabulary table.
        weights: Formula weights. Defaults to ConfidenceWeights().

    Returns:
        Confidence in [0, 1].
    """
    w = weights or ConfidenceWeights()

    priority_pattern = priority_patterns.get(priority, PriorityPattern())
    category_pattern = category_patterns.get(category, CategoryPattern())

    priority_score = _normalized(
        keyword_score(text, priority_pattern.keywords),
        _longest_keyword_list(
            [p.keywords for p in priority_patterns.values()]
        ),
    )
    category_score = _normalized(
        keyword_score(text, category_pattern.keywords),
        _longest_keyword_list(
            [p.keywords for p in category_patterns.values()]
        ),
    )
    entity_score = min(entity_count * w.per_entity, w.entity_cap)

    confidence = (
        w.base
        + priority_score * w.priority_keywords
        + category_score * w.category_keywords
        + abs(sentiment) * w.sentiment
        + entity_score
    )
    return max(0.0, min(confidence, 1.0))
