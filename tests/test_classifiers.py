"""Tests for the priority and category classifiers."""

import pytest

from task_insight.classifiers import CategoryClassifier
from task_insight.classifiers import PriorityClassifier
from task_insight.models import CategoryPattern
from task_insight.models import PriorityLevel
from task_insight.models import TaskCategory


def _by_level(scores):
    return {s.level: s for s in scores}


def _by_category(scores):
    return {s.category: s for s in scores}


class TestPriorityClassifier:
    """Tests for PriorityClassifier."""

    def test_scores_every_level_in_order(self) -> None:
        """Test one zero score per level, in declaration order."""
        classifier = PriorityClassifier()
        scores = classifier.score("xyz ", 0.0, [])
        assert [s.level for s in scores] == list(PriorityLevel)
        assert all(s.total == 0.0 for s in scores)

    def test_no_signal_falls_back_to_medium(self) -> None:
        """Test text with no signal gets the default level."""
        classifier = PriorityClassifier()
        assert classifier.classify("xyz ", 0.0, []) == PriorityLevel.MEDIUM

    def test_select_empty_returns_default(self) -> None:
        """Test selecting from no scores returns the default."""
        classifier = PriorityClassifier(default=PriorityLevel.LOW)
        assert classifier.select([]) == PriorityLevel.LOW

    def test_keyword_signal(self) -> None:
        """Test keywords only score for their own level."""
        scores = _by_level(PriorityClassifier().score("urgent fix", 0.0, []))
        assert scores[PriorityLevel.URGENT].keyword == pytest.approx(1.8)
        assert scores[PriorityLevel.HIGH].keyword == 0.0

    def test_time_urgency_signal(self) -> None:
        """Test a matching time indicator raises the urgent total."""
        classifier = PriorityClassifier()
        with_time = _by_level(
            classifier.score("submit report today ", 0.0, ["today"])
        )
        without_time = _by_level(classifier.score("submit report ", 0.0, []))

        assert with_time[PriorityLevel.URGENT].time_urgency == 2.0
        assert (
            with_time[PriorityLevel.URGENT].total
            > without_time[PriorityLevel.URGENT].total
        )
        assert (
            classifier.classify("submit report today ", 0.0, ["today"])
            == PriorityLevel.URGENT
        )

    def test_time_indicator_only_counts_for_matching_level(self) -> None:
        """Test time indicators only count for levels that list them."""
        scores = _by_level(
            PriorityClassifier().score("ship this week ", 0.0, ["this week"])
        )
        assert scores[PriorityLevel.HIGH].time_urgency == 2.0
        assert scores[PriorityLevel.URGENT].time_urgency == 0.0

    def test_positive_sentiment_signal(self) -> None:
        """Test strong positive sentiment favours urgent and high."""
        scores = _by_level(PriorityClassifier().score("plain", 0.5, []))
        assert scores[PriorityLevel.URGENT].sentiment == 3.0
        assert scores[PriorityLevel.HIGH].sentiment == 2.0
        assert scores[PriorityLevel.LOW].sentiment == 0.0

    def test_mild_positive_sentiment_only_helps_high(self) -> None:
        """Test mild positive sentiment only clears the high threshold."""
        scores = _by_level(PriorityClassifier().score("plain", 0.2, []))
        assert scores[PriorityLevel.URGENT].sentiment == 0.0
        assert scores[PriorityLevel.HIGH].sentiment == 2.0

    def test_negative_sentiment_signal(self) -> None:
        """Test negative sentiment favours low."""
        scores = _by_level(PriorityClassifier().score("plain", -0.5, []))
        assert scores[PriorityLevel.LOW].sentiment == 2.0
        assert scores[PriorityLevel.URGENT].sentiment == 0.0

    def test_intensity_signal(self) -> None:
        """Test each intensity modifier present adds its weight."""
        scores = _by_level(
            PriorityClassifier().score("very extremely late", 0.0, [])
        )
        assert scores[PriorityLevel.URGENT].intensity == 3.0
        assert scores[PriorityLevel.HIGH].intensity == 1.5
        assert scores[PriorityLevel.MEDIUM].intensity == 0.0

    def test_negation_favours_low(self) -> None:
        """Test negation penalises urgent and high and rewards low."""
        classifier = PriorityClassifier()
        text = "this is not urgent can wait"
        scores = _by_level(classifier.score(text, 0.0, []))

        assert scores[PriorityLevel.URGENT].negation == -3.0
        assert scores[PriorityLevel.HIGH].negation == -3.0
        assert scores[PriorityLevel.MEDIUM].negation == 0.0
        assert scores[PriorityLevel.LOW].negation == 2.0
        assert scores[PriorityLevel.LOW].total == pytest.approx(5.3)
        assert classifier.select(list(scores.values())) == PriorityLevel.LOW

    def test_negation_is_global(self) -> None:
        """Test a negation in an unrelated clause still suppresses urgency."""
        text = "urgent: server down, no coffee left"
        scores = _by_level(PriorityClassifier().score(text, 0.0, []))
        assert scores[PriorityLevel.URGENT].negation == -3.0

    def test_tie_goes_to_first_declared_level(self) -> None:
        """Test equal totals resolve to the level declared first."""
        classifier = PriorityClassifier()
        scores = _by_level(classifier.score("rush key", 0.0, []))
        assert (
            scores[PriorityLevel.URGENT].total
            == scores[PriorityLevel.HIGH].total
        )
        assert classifier.classify("rush key", 0.0, []) == PriorityLevel.URGENT


class TestCategoryClassifier:
    """Tests for CategoryClassifier."""

    def test_scores_every_category_in_order(self) -> None:
        """Test one score per category, in declaration order."""
        scores = CategoryClassifier().score("xyz ", [])
        assert [s.category for s in scores] == list(TaskCategory)

    def test_no_signal_falls_back_to_other(self) -> None:
        """Test text with no signal gets the default category."""
        assert CategoryClassifier().classify("xyz ", []) == TaskCategory.OTHER

    def test_keyword_and_action_signals(self) -> None:
        """Test keyword and action points add up for a category."""
        classifier = CategoryClassifier()
        text = "buy groceries for dinner get ingredients"
        scores = _by_category(classifier.score(text, []))

        shopping = scores[TaskCategory.SHOPPING]
        assert shopping.keyword == pytest.approx(1.8)
        assert shopping.action == 3.0
        assert shopping.total == pytest.approx(4.8)
        assert classifier.classify(text, []) == TaskCategory.SHOPPING

    def test_entity_signal(self) -> None:
        """Test an entity containing a category term scores for it."""
        scores = _by_category(
            CategoryClassifier().score("call acme company ", ["Acme Company"])
        )
        assert scores[TaskCategory.WORK].entity == 2.0
        assert scores[TaskCategory.HOME].entity == 0.0

    def test_each_entity_counts_once(self) -> None:
        """Test each matching entity adds the entity weight once."""
        scores = _by_category(
            CategoryClassifier().score(
                "x", ["Team Bank", "Acme Company", "John Smith"]
            )
        )
        assert scores[TaskCategory.WORK].entity == 4.0
        assert scores[TaskCategory.FINANCE].entity == 2.0

    def test_context_adjustments(self) -> None:
        """Test context phrases shift competing categories."""
        classifier = CategoryClassifier()
        scores = _by_category(classifier.score("work from home", []))

        assert scores[TaskCategory.WORK].context == -1.0
        assert scores[TaskCategory.HEALTH].context == -0.5
        assert scores[TaskCategory.HOME].context == 0.0
        assert classifier.classify("work from home", []) == TaskCategory.HOME

    def test_office_penalises_personal(self) -> None:
        """Test office context lowers the personal score."""
        scores = _by_category(
            CategoryClassifier().score("office birthday party", [])
        )
        assert scores[TaskCategory.PERSONAL].context == -1.0

    def test_custom_patterns(self) -> None:
        """Test a classifier built on custom patterns uses them."""
        patterns = {c: CategoryPattern() for c in TaskCategory}
        patterns[TaskCategory.TRAVEL] = CategoryPattern(keywords=("fiesta",))
        classifier = CategoryClassifier(
            patterns=patterns, context_adjustments={}
        )
        assert classifier.classify("fiesta", []) == TaskCategory.TRAVEL
