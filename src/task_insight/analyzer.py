"""
Task analyzer facade.

Infers a priority level and a topical category from a task's title and
description using fixed-vocabulary heuristics. The analysis is a pure
function of its input and the analyzer's frozen configuration: no I/O, no
learning and no shared mutable state, so one analyzer can serve any number
of threads.

Key components:
- TaskAnalyzer: runs extractors, classifiers, confidence and reasoning
- analyze / explain: module-level shortcuts over a default analyzer
- classify_task: fills in whatever priority/category a caller left out

Example usage:
    result = analyze("Submit report today", "Quarterly numbers for client")
    print(result.priority)    # PriorityLevel.URGENT
    print(result.category)    # TaskCategory.WORK
    print(result.reasoning)
"""

from dataclasses import dataclass
from dataclasses import field

import logfire

from task_insight import _logging  # noqa: F401
from task_insight.classifiers import CategoryClassifier
from task_insight.classifiers import PriorityClassifier
from task_insight.confidence import calculate_confidence
from task_insight.config import AnalyzerConfig
from task_insight.models import AnalysisReport
from task_insight.models import AnalysisResult
from task_insight.models import NlpInsights
from task_insight.models import PriorityLevel
from task_insight.models import TaskCategory
from task_insight.models import TaskClassification
from task_insight.nlp import extract_entities
from task_insight.nlp import extract_time_indicators
from task_insight.nlp import score_sentiment
from task_insight.nlp import tokenize
from task_insight.reasoning import generate_reasoning


@dataclass(frozen=True)
class TaskAnalyzer:
    """
    Rule-based priority and category analyzer.

    Build a separate analyzer per vocabulary; the configuration is never
    mutated after construction.
    """

    config: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    priority_classifier: PriorityClassifier = field(init=False)
    category_classifier: CategoryClassifier = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "priority_classifier",
            PriorityClassifier(
                patterns=self.config.priority_patterns,
                negations=self.config.negations,
                default=self.config.default_priority,
            ),
        )
        object.__setattr__(
            self,
            "category_classifier",
            CategoryClassifier(
                patterns=self.config.category_patterns,
                context_adjustments=self.config.context_adjustments,
                default=self.config.default_category,
            ),
        )

    def analyze(
        self,
        title: str,
        description: str | None = None,
    ) -> AnalysisResult:
        """
        Classify a task.

        Args:
            title: Task title.
            description: Optional task description.

        Returns:
            AnalysisResult with priority, category, confidence and reasoning.
        """
        return self.explain(title, description).result

    def explain(
        self,
        title: str,
        description: str | None = None,
    ) -> AnalysisReport:
        """
        Classify a task and keep every per-variant score.

        Args:
            title: Task title.
            description: Optional task description.

        Returns:
            AnalysisReport with the result and both score breakdowns.
        """
        cfg = self.config
        combined = f"{title} {description or ''}"
        text = combined.lower()

        with logfire.span("analyze_task", text_length=len(text)):
            tokens = tokenize(text)
            sentiment = score_sentiment(tokens, cfg.sentiment_lexicon)
            # Capitalisation patterns need the original case.
            entities = extract_entities(combined)
            time_indicators = extract_time_indicators(
                text, cfg.time_indicators
            )

            priority_scores = self.priority_classifier.score(
                text, sentiment, time_indicators
            )
            priority = self.priority_classifier.select(priority_scores)

            category_scores = self.category_classifier.score(text, entities)
            category = self.category_classifier.select(category_scores)

            confidence = calculate_confidence(
                text,
                priority,
                category,
                sentiment,
                len(entities),
                cfg.priority_patterns,
                cfg.category_patterns,
                cfg.confidence_weights,
            )
            reasoning = generate_reasoning(
                text,
                priority,
                category,
                cfg.priority_patterns[priority],
                cfg.category_patterns[category],
                sentiment,
                entities,
                time_indicators,
            )

            logfire.debug(
                "Task analysis complete",
                priority=priority.value,
                category=category.value,
                confidence=confidence,
                sentiment=sentiment,
                entities=len(entities),
            )

        result = AnalysisResult(
            priority=priority,
            category=category,
            confidence=confidence,
            reasoning=reasoning,
            nlp_insights=NlpInsights(
                sentiment=sentiment,
                entities=entities,
                tokens=tokens,
                time_indicators=time_indicators,
            ),
        )
        return AnalysisReport(
            result=result,
            priority_scores=priority_scores,
            category_scores=category_scores,
        )


# Default analyzer (created lazily)
_default_analyzer: TaskAnalyzer | None = None


def get_default_analyzer() -> TaskAnalyzer:
    """Get or create the analyzer built from the built-in vocabularies."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = TaskAnalyzer()
    return _default_analyzer


def analyze(title: str, description: str | None = None) -> AnalysisResult:
    """Classify a task with the default analyzer."""
    return get_default_analyzer().analyze(title, description)


def explain(title: str, description: str | None = None) -> AnalysisReport:
    """Classify a task with the default analyzer, keeping all scores."""
    return get_default_analyzer().explain(title, description)


def classify_task(
    title: str,
    description: str | None = None,
    priority: PriorityLevel | None = None,
    category: TaskCategory | None = None,
    analyzer: TaskAnalyzer | None = None,
) -> TaskClassification:
    """
    Decide the priority and category to store for a new task.

    Explicit values always win. The analyzer only runs when at least one
    of priority or category is missing, and only fills the missing axis.

    Args:
        title: Task title.
        description: Optional task description.
        priority: Caller-supplied priority, if any.
        category: Caller-supplied category, if any.
        analyzer: Analyzer to use. Defaults to the shared default analyzer.

    Returns:
        TaskClassification ready to persist alongside the task.
    """
    if priority is not None and category is not None:
        return TaskClassification(
            priority=priority,
            category=category,
            source="manual",
        )

    result = (analyzer or get_default_analyzer()).analyze(title, description)
    supplied = priority is not None or category is not None
    return TaskClassification(
        priority=priority or result.priority,
        category=category or result.category,
        ai_confidence=result.confidence,
        ai_reasoning=list(result.reasoning),
        source="mixed" if supplied else "ai",
    )


# ---------------------------------------------------------------------
# Demo
# ---------------------------------------------------------------------


if __name__ == "__main__":
    from rich.console import Console
    from rich.table import Table

    samples = [
        (
            "Urgent meeting with John Smith about Project Alpha deadline",
            "Critical project discussion that cannot wait - due tomorrow",
        ),
        (
            "Buy groceries for dinner",
            "Get ingredients for tonight's meal - not urgent",
        ),
        (
            "Learn React hooks",
            "Study the new React hooks API for better state management",
        ),
        (
            "Doctor appointment with Dr. Johnson",
            "Annual health checkup - very important for my health",
        ),
        (
            "Pay electricity bill",
            "Important utility bill due this week - cannot be delayed",
        ),
        (
            "Clean the house",
            "General housekeeping and organization - can wait",
        ),
        (
            "Book flight for vacation",
            "Plan summer trip to Europe - exciting adventure",
        ),
        (
            "Submit quarterly report to management",
            "Critical business report for executive review - top priority",
        ),
        ("Not urgent task", "This can definitely wait until later"),
        (
            "Very important family meeting",
            "Personal matter that needs immediate attention",
        ),
    ]

    console = Console()
    console.print()
    console.rule("[bold]DEMO: Task Analysis")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Task", width=36)
    table.add_column("Priority", justify="center")
    table.add_column("Category", justify="center")
    table.add_column("Conf.", justify="right")
    table.add_column("Reasoning", width=50)

    for title, description in samples:
        result = analyze(title, description)
        conf_style = (
            "green"
            if result.confidence >= 0.8
            else "yellow"
            if result.confidence >= 0.6
            else "red"
        )
        table.add_row(
            title,
            result.priority.value,
            result.category.value,
            f"[{conf_style}]{result.confidence:.0%}[/]",
            "\n".join(result.reasoning),
        )

    console.print(table)
