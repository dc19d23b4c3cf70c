"""Shared fixtures"""

from datetime import datetime, timezone

import pytest

from storyscope.ids import SequentialIds

FIXED_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant"""
    return lambda: FIXED_NOW


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def sample_story():
    """Short three-act manuscript with two recurring characters"""
    return (
        "Anna Reed lived a quiet life in a small town. "
        "Anna Reed wanted to find her missing brother. "
        "Suddenly an unexpected letter arrived and everything changed. "
        "The letter began a long search across the country. "
        "Anna Reed met Tom Hale, a detective who helped her. "
        "Tom Hale helped her search the city. "
        "They struggled against a powerful enemy. "
        "The conflict grew more difficult every day. "
        "In the final battle Anna Reed confronted the kidnapper. "
        "The decisive confrontation was the peak of her fight. "
        "Finally the mystery was resolved and peace settled over the town. "
        "Anna Reed learned to trust others and became confident."
    )
