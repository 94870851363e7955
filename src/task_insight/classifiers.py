"""
Priority and category classifiers.

Both classifiers score every variant independently and pick the strict
maximum. The running best starts at the default variant with a score of
zero, so a variant must score above zero to displace it, and ties go to the
variant declared first.

Key components:
- PriorityClassifier: keyword, time urgency, sentiment, intensity, negation
- CategoryClassifier: keyword, entity, action, context adjustments
"""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field

from task_insight.models import CategoryPattern
from task_insight.models import CategoryScore
from task_insight.models import PriorityLevel
from task_insight.models import PriorityPattern
from task_insight.models import PriorityScore
from task_insight.models import TaskCategory
from task_insight.nlp import contains_any
from task_insight.nlp import keyword_score
from task_insight.patterns import CATEGORY_PATTERNS
from task_insight.patterns import CONTEXT_ADJUSTMENTS
from task_insight.patterns import NEGATIONS
from task_insight.patterns import PRIORITY_PATTERNS

TIME_INDICATOR_WEIGHT = 2.0
INTENSITY_WEIGHT = 1.5
ENTITY_WEIGHT = 2.0
ACTION_WEIGHT = 1.5


@dataclass(frozen=True)
class PriorityClassifier:
    """
    Score priority levels from text signals.

    Negation is a single flag for the whole text: "not" anywhere, even in
    an unrelated clause, penalises URGENT and HIGH and favours LOW.
    """

    patterns: Mapping[PriorityLevel, PriorityPattern] = field(
        default_factory=lambda: PRIORITY_PATTERNS
    )
    negations: tuple[str, ...] = NEGATIONS
    default: PriorityLevel = PriorityLevel.MEDIUM

    def score(
        self,
        text: str,
        sentiment: float,
        time_indicators: list[str],
    ) -> list[PriorityScore]:
        """
        Score every configured level.

        Args:
            text: Normalized text.
            sentiment: Summed lexicon polarity.
            time_indicators: Time phrases extracted from the text.

        Returns:
            One PriorityScore per level, in declaration order.
        """
        negated = contains_any(text, self.negations)
        scores = []
        for level in PriorityLevel:
            pattern = self.patterns.get(level)
            if pattern is None:
                continue
            scores.append(
                PriorityScore(
                    level=level,
                    keyword=keyword_score(text, pattern.keywords),
                    time_urgency=self._time_urgency_score(
                        time_indicators, pattern.time_indicators
                    ),
                    sentiment=self._sentiment_score(level, sentiment),
                    intensity=self._intensity_score(
                        text, pattern.intensity_modifiers
                    ),
                    negation=self._negation_score(level, negated),
                )
            )
        return scores

    def select(self, scores: list[PriorityScore]) -> PriorityLevel:
        """Pick the level with the strictly greatest positive total."""
        best, best_total = self.default, 0.0
        for s in scores:
            if s.total > best_total:
                best, best_total = s.level, s.total
        return best

    def classify(
        self,
        text: str,
        sentiment: float,
        time_indicators: list[str],
    ) -> PriorityLevel:
        return self.select(self.score(text, sentiment, time_indicators))

    def _time_urgency_score(
        self,
        found: list[str],
        expected: tuple[str, ...],
    ) -> float:
        return sum(TIME_INDICATOR_WEIGHT for t in found if t in expected)

    def _sentiment_score(
        self,
        level: PriorityLevel,
        sentiment: float,
    ) -> float:
        if level == PriorityLevel.URGENT and sentiment > 0.3:
            return 3.0
        if level == PriorityLevel.HIGH and sentiment > 0.1:
            return 2.0
        if level == PriorityLevel.LOW and sentiment < -0.1:
            return 2.0
        return 0.0

    def _intensity_score(self, text: str, modifiers: tuple[str, ...]) -> float:
        return sum(INTENSITY_WEIGHT for m in modifiers if m in text)

    def _negation_score(self, level: PriorityLevel, negated: bool) -> float:
        if not negated:
            return 0.0
        if level in (PriorityLevel.URGENT, PriorityLevel.HIGH):
            return -3.0
        if level == PriorityLevel.LOW:
            return 2.0
        return 0.0


@dataclass(frozen=True)
class CategoryClassifier:
    """Score task categories from text, entity and action signals."""

    patterns: Mapping[TaskCategory, CategoryPattern] = field(
        default_factory=lambda: CATEGORY_PATTERNS
    )
    context_adjustments: Mapping[
        TaskCategory, tuple[tuple[str, float], ...]
    ] = field(default_factory=lambda: CONTEXT_ADJUSTMENTS)
    default: TaskCategory = TaskCategory.OTHER

    def score(self, text: str, entities: list[str]) -> list[CategoryScore]:
        """
        Score every configured category.

        Args:
            text: Normalized text.
            entities: Entities extracted from the original-case text.

        Returns:
            One CategoryScore per category, in declaration order.
        """
        lowered_entities = [e.lower() for e in entities]
        scores = []
        for category in TaskCategory:
            pattern = self.patterns.get(category)
            if pattern is None:
                continue
            scores.append(
                CategoryScore(
                    category=category,
                    keyword=keyword_score(text, pattern.keywords),
                    entity=self._entity_score(
                        lowered_entities, pattern.entities
                    ),
                    action=sum(
                        ACTION_WEIGHT for a in pattern.actions if a in text
                    ),
                    context=self._context_score(text, category),
                )
            )
        return scores

    def select(self, scores: list[CategoryScore]) -> TaskCategory:
        """Pick the category with the strictly greatest positive total."""
        best, best_total = self.default, 0.0
        for s in scores:
            if s.total > best_total:
                best, best_total = s.category, s.total
        return best

    def classify(self, text: str, entities: list[str]) -> TaskCategory:
        return self.select(self.score(text, entities))

    def _entity_score(
        self,
        entities: list[str],
        expected: tuple[str, ...],
    ) -> float:
        return sum(
            ENTITY_WEIGHT
            for entity in entities
            if any(e.lower() in entity for e in expected)
        )

    def _context_score(self, text: str, category: TaskCategory) -> float:
        adjustment = 0.0
        for phrase, delta in self.context_adjustments.get(category, ()):
            if phrase in text:
                adjustment += delta
        return adjustment
