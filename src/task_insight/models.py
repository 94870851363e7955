"""
Data model for task analysis.

Enumerations, the immutable pattern records that make up the vocabulary
tables, and the pydantic models returned to callers.

Key components:
- PriorityLevel / TaskCategory: the two classification axes
- PriorityPattern / CategoryPattern: per-variant vocabularies
- NlpInsights: extractor output for one analysis call
- AnalysisResult: the sole output of TaskAnalyzer.analyze
- PriorityScore / CategoryScore: per-variant signal breakdowns
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class PriorityLevel(str, Enum):
    """Priority level classifications, in tie-break order."""

    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskCategory(str, Enum):
    """Topical categories, in tie-break order."""

    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    FINANCE = "finance"
    LEARNING = "learning"
    SHOPPING = "shopping"
    TRAVEL = "travel"
    HOME = "home"
    OTHER = "other"  # zero-evidence fallback


# ---------------------------------------------------------------------
# Pattern records
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PriorityPattern:
    """
    Vocabulary for a single priority level.

    Tuples rather than sets: iteration order drives summation order and
    the wording of the reasoning trail.
    """

    keywords: tuple[str, ...] = ()
    time_indicators: tuple[str, ...] = ()
    intensity_modifiers: tuple[str, ...] = ()


@dataclass(frozen=True)
class CategoryPattern:
    """Vocabulary for a single task category."""

    keywords: tuple[str, ...] = ()
    entities: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()


# ---------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------


class NlpInsights(BaseModel):
    """Extractor output produced once per analysis call."""

    model_config = ConfigDict(frozen=True)

    sentiment: float = Field(description="Summed lexicon polarity")
    entities: list[str] = Field(
        default_factory=list,
        description="Name, organisation and project mentions",
    )
    tokens: list[str] = Field(
        default_factory=list,
        description="Lower-cased word tokens",
    )
    time_indicators: list[str] = Field(
        default_factory=list,
        description="Temporal urgency phrases found in the text",
    )


class AnalysisResult(BaseModel):
    """Priority and category inferred for a task."""

    model_config = ConfigDict(frozen=True)

    priority: PriorityLevel
    category: TaskCategory
    confidence: float = Field(
        ge=0.0,
        le=1.0,
        description="Heuristic support for the classification (0-1)",
    )
    reasoning: list[str] = Field(
        min_length=1,
        description="Human-readable explanation, one line per signal",
    )
    nlp_insights: NlpInsights


class PriorityScore(BaseModel):
    """Signal breakdown for one priority level."""

    model_config = ConfigDict(frozen=True)

    level: PriorityLevel
    keyword: float = 0.0
    time_urgency: float = 0.0
    sentiment: float = 0.0
    intensity: float = 0.0
    negation: float = 0.0

    @property
    def total(self) -> float:
        # Fixed summation order.
        return (
            self.keyword
            + self.time_urgency
            + self.sentiment
            + self.intensity
            + self.negation
        )


class CategoryScore(BaseModel):
    """Signal breakdown for one task category."""

    model_config = ConfigDict(frozen=True)

    category: TaskCategory
    keyword: float = 0.0
    entity: float = 0.0
    action: float = 0.0
    context: float = 0.0

    @property
    def total(self) -> float:
        return self.keyword + self.entity + self.action + self.context


class AnalysisReport(BaseModel):
    """Analysis result together with every per-variant score."""

    model_config = ConfigDict(frozen=True)

    result: AnalysisResult
    priority_scores: list[PriorityScore]
    category_scores: list[CategoryScore]


class TaskClassification(BaseModel):
    """
    Priority and category to store on a task record.

    Caller-supplied values take precedence over inferred ones; ai_confidence
    and ai_reasoning are only set when the analyzer actually ran.
    """

    model_config = ConfigDict(frozen=True)

    priority: PriorityLevel
    category: TaskCategory
    ai_confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    ai_reasoning: list[str] = Field(default_factory=list)
    source: Literal["manual", "ai", "mixed"] = Field(
        description="Where the stored priority and category came from",
    )
