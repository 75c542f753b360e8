"""
The complex_features.features module provides the complex feature base class,
the factory that turns configured implementation ids into feature instances,
and a small set of built-in features.
"""
from .base import ComplexFeature, Goal
from .factory import FEATURE_REGISTRY, get_feature_class, instantiate, register_feature, unregister_feature
from .builtin import ConstantWeightFeature, GreaterThanFeature

__all__ = [
    "ComplexFeature",
    "Goal",
    "FEATURE_REGISTRY",
    "get_feature_class",
    "instantiate",
    "register_feature",
    "unregister_feature",
    "ConstantWeightFeature",
    "GreaterThanFeature",
]
