"""
Built-in English vocabularies.

Every table is keyed explicitly by enum variant and wrapped in a read-only
mapping. Build a new AnalyzerConfig to use different vocabularies.
"""

from collections.abc import Mapping
from importlib.resources import files
from types import MappingProxyType

from task_insight.models import CategoryPattern
from task_insight.models import PriorityLevel
from task_insight.models import PriorityPattern
from task_insight.models import TaskCategory

PRIORITY_PATTERNS: Mapping[PriorityLevel, PriorityPattern] = MappingProxyType({
    PriorityLevel.URGENT: PriorityPattern(
        keywords=(
            "urgent", "asap", "emergency", "critical", "deadline",
            "due today", "immediate", "now", "rush",
        ),
        time_indicators=(
            "today", "now", "immediately", "asap", "right away",
        ),
        intensity_modifiers=("very", "extremely", "absolutely", "completely"),
    ),
    PriorityLevel.HIGH: PriorityPattern(
        keywords=(
            "important", "priority", "high", "top", "main", "key",
            "essential", "crucial", "vital", "significant",
        ),
        time_indicators=("this week", "soon", "quickly", "promptly"),
        intensity_modifiers=("very", "really", "quite"),
    ),
    PriorityLevel.MEDIUM: PriorityPattern(
        keywords=(
            "normal", "regular", "standard", "usual", "typical", "moderate",
        ),
        time_indicators=("this month", "when possible", "sometime"),
        intensity_modifiers=("kind of", "sort of", "maybe"),
    ),
    PriorityLevel.LOW: PriorityPattern(
        keywords=(
            "low", "minor", "optional", "when possible", "sometime",
            "later", "low priority", "not urgent", "can wait",
        ),
        time_indicators=("later", "sometime", "when convenient", "no rush"),
        intensity_modifiers=("not very", "hardly", "barely"),
    ),
})

CATEGORY_PATTERNS: Mapping[TaskCategory, CategoryPattern] = MappingProxyType({
    TaskCategory.WORK: CategoryPattern(
        keywords=(
            "work", "job", "office", "meeting", "report", "presentation",
            "project", "deadline", "client", "customer",
        ),
        entities=(
            "company", "business", "professional", "team", "colleague",
            "boss", "manager",
        ),
        actions=("submit", "review", "approve", "present", "discuss", "plan"),
    ),
    TaskCategory.PERSONAL: CategoryPattern(
        keywords=(
            "personal", "family", "friend", "birthday", "anniversary",
            "celebration", "party", "gift",
        ),
        entities=(
            "family", "friend", "relationship", "dating", "marriage", "kids",
        ),
        actions=("celebrate", "visit", "call", "meet", "gift"),
    ),
    TaskCategory.HEALTH: CategoryPattern(
        keywords=(
            "health", "medical", "doctor", "appointment", "checkup",
            "medicine", "exercise", "workout",
        ),
        entities=("doctor", "hospital", "clinic", "gym", "pharmacy"),
        actions=("exercise", "workout", "diet", "sleep", "rest"),
    ),
    TaskCategory.FINANCE: CategoryPattern(
        keywords=(
            "finance", "money", "bill", "payment", "budget", "expense",
            "income", "bank", "account",
        ),
        entities=("bank", "account", "bill", "payment", "investment"),
        actions=("pay", "save", "invest", "budget", "spend"),
    ),
    TaskCategory.LEARNING: CategoryPattern(
        keywords=(
            "learn", "study", "course", "training", "education", "skill",
            "tutorial", "book", "reading",
        ),
        entities=("course", "book", "tutorial", "training", "skill"),
        actions=("learn", "study", "practice", "improve", "develop", "master"),
    ),
    TaskCategory.SHOPPING: CategoryPattern(
        keywords=(
            "buy", "purchase", "shop", "shopping", "order", "grocery",
            "clothes", "electronics",
        ),
        entities=("store", "shop", "market", "mall", "online"),
        actions=("buy", "purchase", "order", "get", "find"),
    ),
    TaskCategory.TRAVEL: CategoryPattern(
        keywords=(
            "travel", "trip", "vacation", "flight", "hotel", "booking",
            "reservation", "journey",
        ),
        entities=("flight", "hotel", "destination", "vacation", "trip"),
        actions=("book", "reserve", "plan", "visit", "explore"),
    ),
    TaskCategory.HOME: CategoryPattern(
        keywords=(
            "home", "house", "cleaning", "maintenance", "repair",
            "decorate", "organize",
        ),
        entities=("house", "home", "room", "garden", "kitchen"),
        actions=("clean", "organize", "decorate", "repair", "maintain"),
    ),
    TaskCategory.OTHER: CategoryPattern(),
})

TIME_INDICATORS: tuple[str, ...] = (
    "today", "tomorrow", "yesterday", "now", "soon", "later", "asap",
    "this week", "next week", "this month", "next month",
    "urgently", "immediately", "promptly", "quickly",
)

NEGATIONS: tuple[str, ...] = (
    "not", "no", "never", "isn't", "aren't", "don't", "doesn't",
)

# (phrase, adjustment) applied to a category when the phrase is present.
CONTEXT_ADJUSTMENTS: Mapping[TaskCategory, tuple[tuple[str, float], ...]] = (
    MappingProxyType({
        TaskCategory.WORK: (("home", -1.0),),
        TaskCategory.PERSONAL: (("office", -1.0),),
        TaskCategory.HEALTH: (("work", -0.5),),
    })
)

AFINN_WORD_FILE = "AFINN-en-165.txt"


def load_afinn_lexicon(filename: str = AFINN_WORD_FILE) -> Mapping[str, float]:
    """
    Read an AFINN word list shipped with the afinn distribution.

    Each line is "<word or phrase>\\t<integer polarity>". Multi-word phrases
    are kept as-is; they never equal a single token and so never score.

    Args:
        filename: Word list under the afinn package's data directory.

    Returns:
        Read-only mapping of lower-case word to polarity.
    """
    data = files("afinn") / "data" / filename
    lexicon: dict[str, float] = {}
    for line in data.read_text(encoding="utf-8").splitlines():
        word, _, score = line.rpartition("\t")
        if word:
            lexicon[word.strip()] = float(score)
    return MappingProxyType(lexicon)


# AFINN-165 polarities, matched on the literal lower-cased token.
SENTIMENT_LEXICON: Mapping[str, float] = load_afinn_lexicon()
