"""Pytest configuration and fixtures."""

import os
from typing import Any, Sequence

import pytest
from unittest.mock import MagicMock, patch

from complex_features.core.library import ComplexFeatureLibrary
from complex_features.features.base import ComplexFeature
from complex_features.features.factory import FEATURE_REGISTRY


class RecordingFeature(ComplexFeature):
    """Feature that remembers how it was built."""

    def apply(self, goal):
        return (goal.functor, self.arguments)


class ExplodingFeature(ComplexFeature):
    def __init__(self, program: Any, arguments: Sequence[str]):
        raise RuntimeError("boom")

    def apply(self, goal):
        pass


@pytest.fixture
def program():
    """Stand-in for the shared logic program."""
    return MagicMock(name="LogicProgram")


@pytest.fixture
def library():
    """A fresh library, reset after the test."""
    lib = ComplexFeatureLibrary()
    yield lib
    lib.reset()


@pytest.fixture(autouse=True)
def test_feature_types():
    """Register test-only feature types and restore the registry afterwards."""
    saved = dict(FEATURE_REGISTRY)
    FEATURE_REGISTRY["com.example.GreaterThanFeature"] = FEATURE_REGISTRY["GreaterThanFeature"]
    FEATURE_REGISTRY["RecordingFeature"] = RecordingFeature
    FEATURE_REGISTRY["ExplodingFeature"] = ExplodingFeature
    yield
    FEATURE_REGISTRY.clear()
    FEATURE_REGISTRY.update(saved)


@pytest.fixture
def properties_file(tmp_path):
    """Write properties text to a temporary file and return its path."""
    def _write(text: str, name: str = "features.properties"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def clean_environment():
    """Remove library environment variables for the duration of a test."""
    keys = ["COMPLEX_FEATURES_PROPERTIES", "COMPLEX_FEATURES_ENCODING", "COMPLEX_FEATURES_LOG_LEVEL"]
    env = {k: v for k, v in os.environ.items() if k not in keys}
    with patch.dict(os.environ, env, clear=True):
        yield
