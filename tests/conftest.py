"""Shared fixtures."""

import pytest

from topictree import RecordingSubscriber, Settings, TopicTree


@pytest.fixture
def tree():
    """A fresh tree with default settings (independent of the environment)."""
    return TopicTree(Settings())


@pytest.fixture
def recorder():
    """A subscriber that records every delivery."""
    return RecordingSubscriber("test-recorder")
