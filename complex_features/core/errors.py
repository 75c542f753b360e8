"""Exception hierarchy for the complex feature library."""


class ComplexFeatureError(Exception):
    """Base class for all complex feature library errors."""
    pass


class ConfigError(ComplexFeatureError, ValueError):
    """Raised when the feature configuration source cannot be used."""
    pass


class MissingSourceError(ConfigError):
    """The configuration source could not be opened or read."""
    pass


class MalformedEntryError(ConfigError):
    """A configuration entry is not a valid functor declaration."""
    pass


class InstantiationError(ComplexFeatureError, ValueError):
    """Raised when a configured feature cannot be built."""
    pass


class UnknownFeatureTypeError(InstantiationError):
    """The implementation id does not name any known feature type."""
    pass


class FeatureConstructionError(InstantiationError):
    """The feature type was found but its constructor failed."""
    pass


class FunctorArgumentError(ComplexFeatureError, ValueError):
    """A functor (or goal) argument was None or empty."""
    pass


class LibraryNotInitializedError(ComplexFeatureError, RuntimeError):
    """A lookup was attempted before the library was initialized."""
    pass
