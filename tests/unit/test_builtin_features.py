"""Tests for the built-in complex features."""

from types import SimpleNamespace

import pytest

from complex_features.features.builtin import ConstantWeightFeature, GreaterThanFeature


def goal(*args):
    return SimpleNamespace(functor="escape__test", args=list(args))


def test_greater_than_feature():
    feature = GreaterThanFeature("program", ["0"])
    assert feature.threshold == 0.0
    assert feature.program == "program"
    assert feature(goal(1, "2.5")) is True
    assert feature(goal(1, -1)) is False
    assert feature(goal(0)) is False


def test_greater_than_feature_non_numeric_goal_args():
    feature = GreaterThanFeature(None, ["10"])
    assert feature.apply(goal("eleven")) is False
    assert feature.apply(goal()) is False


@pytest.mark.parametrize("arguments", [[], ["1", "2"]])
def test_greater_than_feature_needs_one_threshold(arguments):
    with pytest.raises(ValueError, match="exactly one threshold"):
        GreaterThanFeature(None, arguments)


def test_constant_weight_feature():
    assert ConstantWeightFeature(None, []).apply(goal()) == 1.0
    assert ConstantWeightFeature(None, ["0.25"])(goal("x")) == 0.25


def test_feature_repr():
    assert repr(ConstantWeightFeature(None, ["2"])) == "ConstantWeightFeature(arguments=['2'])"
