"""
Pytest fixtures for node utility tests.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from node_utils.core.config import reset_config
from node_utils.node import NestingState, Node, PlainNode


class Recorder:
    """Output sink exposing append(text, node)."""

    def __init__(self):
        self.output = []

    def append(self, text, node):
        self.output.append((text, node))
        return text

    @property
    def text(self):
        return "".join(t for t, _ in self.output)


class LegacyRecorder:
    """Output sink exposing only the older emit(text, node)."""

    def __init__(self):
        self.output = []

    def emit(self, text, node):
        self.output.append((text, node))


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test starts from default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def state():
    return NestingState()


@pytest.fixture
def compiler():
    return Recorder()


@pytest.fixture
def legacy_compiler():
    return LegacyRecorder()


@pytest.fixture(params=[Node, PlainNode], ids=["smart", "plain"])
def node_cls(request):
    """Run a test against both capability-bearing and bare nodes."""
    return request.param
