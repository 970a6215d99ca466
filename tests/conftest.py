"""Shared fixtures for the fusion tests."""

import pytest


@pytest.fixture
def paper_rankings():
    """Rankings R1-R4 of items A-G from the RBC paper's worked example."""
    return [
        ["A", "D", "B", "C", "G", "F"],
        ["B", "D", "E", "C"],
        ["A", "B", "D", "C", "G", "F", "E"],
        ["G", "D", "E", "A", "F", "C"],
    ]
