"""Human-readable explanation trail for an analysis result."""

from task_insight.models import CategoryPattern
from task_insight.models import PriorityLevel
from task_insight.models import PriorityPattern
from task_insight.models import TaskCategory
from task_insight.nlp import matched_keywords

SENTIMENT_REPORT_THRESHOLD = 0.3


def generate_reasoning(
    text: str,
    priority: PriorityLevel,
    category: TaskCategory,
    priority_pattern: PriorityPattern,
    category_pattern: CategoryPattern,
    sentiment: float,
    entities: list[str],
    time_indicators: list[str],
) -> list[str]:
    """
    Explain which signals produced the classification.

    Lines appear in a fixed order: priority keywords, time indicators,
    sentiment, category keywords, entities. When none of them fired a
    single line naming the defaults is returned instead.

    Args:
        text: Normalized text.
        priority: Winning priority level.
        category: Winning category.
        priority_pattern: Vocabulary of the winning priority level.
        category_pattern: Vocabulary of the winning category.
        sentiment: Summed lexicon polarity.
        entities: Extracted entities.
        time_indicators: Extracted time indicators.

    Returns:
        Non-empty list of explanation lines.
    """
    reasoning: list[str] = []

    priority_hits = matched_keywords(text, priority_pattern.keywords)
    if priority_hits:
        reasoning.append(
            f"Priority set to {priority.value} based on keywords: "
            f"{', '.join(priority_hits)}"
        )

    if time_indicators:
        reasoning.append(
            f"Time urgency detected: {', '.join(time_indicators)}"
        )

    if abs(sentiment) > SENTIMENT_REPORT_THRESHOLD:
        tone = "positive" if sentiment > 0 else "negative"
        reasoning.append(
            f"Sentiment analysis: {tone} (score: {sentiment:.2f})"
        )

    category_hits = matched_keywords(text, category_pattern.keywords)
    if category_hits:
        reasoning.append(
            f"Category set to {category.value} based on keywords: "
            f"{', '.join(category_hits)}"
        )

    if entities:
        reasoning.append(f"Entities detected: {', '.join(entities)}")

    if not reasoning:
        reasoning.append(
            f"Using default priority ({priority.value}) "
            f"and category ({category.value})"
        )

    return reasoning
