"""
The complex_features.core module contains the library itself: configuration
loading, functor aliasing, settings and the error hierarchy.
"""
from .errors import (
    ComplexFeatureError,
    ConfigError,
    MissingSourceError,
    MalformedEntryError,
    InstantiationError,
    UnknownFeatureTypeError,
    FeatureConstructionError,
    FunctorArgumentError,
    LibraryNotInitializedError,
)
from .aliases import ESCAPE_PREFIX, alias_keys, bare_form, is_escaped
from .config import LibraryConfig
from .config_loader import FeatureConfigEntry, parse, load_properties
from .library import ComplexFeatureLibrary

__all__ = [
    "ComplexFeatureError",
    "ConfigError",
    "MissingSourceError",
    "MalformedEntryError",
    "InstantiationError",
    "UnknownFeatureTypeError",
    "FeatureConstructionError",
    "FunctorArgumentError",
    "LibraryNotInitializedError",
    "ESCAPE_PREFIX",
    "alias_keys",
    "bare_form",
    "is_escaped",
    "LibraryConfig",
    "FeatureConfigEntry",
    "parse",
    "load_properties",
    "ComplexFeatureLibrary",
]
