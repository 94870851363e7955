"""
Fixed-vocabulary text heuristics.

Nothing here is a statistical model: tokenization is a regex split,
sentiment is a lexicon sum and entities come from capitalisation patterns.

Key components:
- tokenize: lower-cased word tokens
- score_sentiment: summed lexicon polarity
- extract_entities: name / organisation / project mentions
- extract_time_indicators: temporal phrases from a fixed vocabulary
- keyword_score: the keyword signal shared by both classifiers
"""

import re
from collections.abc import Iterable
from collections.abc import Mapping

_TOKEN_SPLIT = re.compile(r"[^a-z0-9_]+")

# Order matters: results are concatenated names, organisations, projects.
_ENTITY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b[A-Z][a-z]+ [A-Z][a-z]+\b"),
    re.compile(r"\b[A-Z][a-z]+ (?:Inc|Corp|LLC|Ltd|Company)\b"),
    re.compile(r"\b(?:Project|Task|Initiative) [A-Z][a-z]+\b"),
)

KEYWORD_HIT = 1.0
WORD_BOUNDARY_BONUS = 0.5
EDGE_POSITION_BONUS = 0.3


def tokenize(text: str) -> list[str]:
    """
    Split text into lower-cased word tokens.

    Example:
        >>> tokenize("Isn't it DONE?")
        ['isn', 't', 'it', 'done']
    """
    return [t for t in _TOKEN_SPLIT.split(text.lower()) if t]


def score_sentiment(
    tokens: Iterable[str],
    lexicon: Mapping[str, float],
) -> float:
    """Sum lexicon polarities over tokens; unknown tokens score zero."""
    score = 0.0
    for token in tokens:
        score += lexicon.get(token, 0.0)
    return score


def extract_entities(text: str) -> list[str]:
    """
    Find capitalised name, organisation and project mentions.

    Must be given original-case text. Any two consecutive capitalised
    words count as a name, so "Project Alpha" is reported twice: once as
    a name and once as a project.

    Args:
        text: Title and description, case preserved.

    Returns:
        Matches in pattern order, duplicates kept.
    """
    entities: list[str] = []
    for pattern in _ENTITY_PATTERNS:
        entities.extend(m.group(0) for m in pattern.finditer(text))
    return entities


def extract_time_indicators(
    text: str,
    vocabulary: Iterable[str],
) -> list[str]:
    """Return vocabulary phrases contained in text, in vocabulary order."""
    return [phrase for phrase in vocabulary if phrase in text]


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """Check whether any phrase occurs as a substring of text."""
    return any(phrase in text for phrase in phrases)


def matched_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Keywords that occur as substrings of text."""
    return [kw for kw in keywords if kw in text]


def keyword_score(text: str, keywords: Iterable[str]) -> float:
    """
    Score substring keyword hits.

    Each keyword present anywhere scores 1.0, plus 0.5 when it also stands
    alone as a word, plus 0.3 when the text starts or ends with it.

    Args:
        text: Normalized (lower-cased) text.
        keywords: Keywords in scoring order.

    Returns:
        Accumulated score across all keywords.
    """
    score = 0.0
    for keyword in keywords:
        if keyword not in text:
            continue
        score += KEYWORD_HIT
        if re.search(rf"\b{re.escape(keyword)}\b", text, re.IGNORECASE):
            score += WORD_BOUNDARY_BONUS
        if text.startswith(keyword) or text.endswith(keyword):
            score += EDGE_POSITION_BONUS
    return score
