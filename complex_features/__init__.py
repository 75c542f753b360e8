"""
The complex_features package maps logic-program functors to pluggable
complex features declared in a properties or YAML configuration.
"""
__version__ = "0.1.0"

from .core.library import ComplexFeatureLibrary
from .core.aliases import ESCAPE_PREFIX
from .core.config import LibraryConfig
from .core.config_loader import FeatureConfigEntry
from .features.base import ComplexFeature
from .features.factory import register_feature
