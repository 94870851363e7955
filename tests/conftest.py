"""Shared pytest fixtures for all tests."""

import pytest

from task_insight.analyzer import TaskAnalyzer


@pytest.fixture
def analyzer():
    """Analyzer built from the built-in vocabularies."""
    return TaskAnalyzer()


@pytest.fixture
def sample_tasks():
    """(title, description) pairs covering every category."""
    return [
        (
            "Urgent meeting with John Smith about Project Alpha deadline",
            "Critical project discussion that cannot wait - due tomorrow",
        ),
        ("Buy groceries for dinner", "Get ingredients - not urgent"),
        ("Learn React hooks", "Study the new API for better state"),
        ("Doctor appointment", "Annual health checkup - very important"),
        ("Pay electricity bill", "Important bill due this week"),
        ("Clean the house", "General housekeeping - can wait"),
        ("Book flight for vacation", "Plan summer trip - exciting adventure"),
        ("Birthday party for a friend", None),
        ("xyz", ""),
        ("", None),
    ]
