"""
Deterministic, rule-based task priority and category analysis.

Infers a priority level and a topical category from a task's free text,
with a confidence score and a human-readable explanation trail.
"""

from task_insight.analyzer import TaskAnalyzer
from task_insight.analyzer import analyze
from task_insight.analyzer import classify_task
from task_insight.analyzer import explain
from task_insight.analyzer import get_default_analyzer
from task_insight.confidence import ConfidenceWeights
from task_insight.config import AnalyzerConfig
from task_insight.models import AnalysisReport
from task_insight.models import AnalysisResult
from task_insight.models import CategoryPattern
from task_insight.models import CategoryScore
from task_insight.models import NlpInsights
from task_insight.models import PriorityLevel
from task_insight.models import PriorityPattern
from task_insight.models import PriorityScore
from task_insight.models import TaskCategory
from task_insight.models import TaskClassification

__all__ = [
    # Facade
    "TaskAnalyzer",
    "analyze",
    "explain",
    "classify_task",
    "get_default_analyzer",
    # Configuration
    "AnalyzerConfig",
    "ConfidenceWeights",
    "PriorityPattern",
    "CategoryPattern",
    # Results
    "AnalysisResult",
    "AnalysisReport",
    "NlpInsights",
    "PriorityScore",
    "CategoryScore",
    "TaskClassification",
    # Enums
    "PriorityLevel",
    "TaskCategory",
]
__version__ = "0.1.0"
