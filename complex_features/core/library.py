"""Functor -> complex feature library consulted by the rule evaluator."""

import logging
from typing import Any, Dict, List, Optional

from ..features.factory import instantiate
from .aliases import ESCAPE_PREFIX, alias_keys, bare_form, is_escaped
from .config import LibraryConfig
from .config_loader import ConfigSource, FeatureConfigEntry, parse
from .errors import FunctorArgumentError, LibraryNotInitializedError, MissingSourceError

logger = logging.getLogger(__name__)


class ComplexFeatureLibrary:
    """
    Maps functors to complex features built from a declarative configuration.

    Every configured feature is reachable both by its bare functor (``foo``) and
    its escaped functor (``escape__foo``), whichever of the two the configuration
    used. The library is populated wholesale by :meth:`init` and is read-only
    until the next ``init`` or :meth:`reset`; callers serialize those two.
    """

    ESCAPE_PREFIX = ESCAPE_PREFIX

    def __init__(self):
        """Create an empty, uninitialized library."""
        self._initialized = False
        self._functor_to_feature: Optional[Dict[str, Any]] = None
        self._program: Any = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def program(self) -> Any:
        """The logic program the current features were built against (None if uninitialized)."""
        return self._program

    @staticmethod
    def is_complex_feature(functor: str) -> bool:
        """Check whether a functor is written in its escaped form.

        This is a pure prefix test and does not depend on what is registered.

        Raises:
            FunctorArgumentError: If functor is None or empty
        """
        if functor is None:
            raise FunctorArgumentError("functor cannot be None")
        if not functor:
            raise FunctorArgumentError("functor cannot be zero length")
        return is_escaped(functor)

    @classmethod
    def is_complex_goal(cls, goal: Any) -> bool:
        """Check whether a goal's functor is written in its escaped form.

        Raises:
            FunctorArgumentError: If goal is None, or its functor is None or empty
        """
        if goal is None:
            raise FunctorArgumentError("goal cannot be None")
        return cls.is_complex_feature(goal.functor)

    def get_feature(self, functor: str) -> Optional[Any]:
        """Get the feature registered for a functor.

        Args:
            functor: Bare or escaped functor

        Returns:
            The feature if registered under either form, None otherwise

        Raises:
            LibraryNotInitializedError: If the library has not been initialized
            FunctorArgumentError: If functor is None or empty
        """
        if functor is None:
            raise FunctorArgumentError("functor cannot be None")
        if not functor:
            raise FunctorArgumentError("functor cannot be zero length")
        if not self._initialized:
            raise LibraryNotInitializedError("ComplexFeatureLibrary is not initialized")
        return self._functor_to_feature.get(functor)

    def _pre_init(self, program: Any) -> None:
        if self._initialized:
            logger.warning("Complex feature library was already initialized once -- overwriting...")
        self.reset()
        if program is None:
            raise ValueError("logic program cannot be None")

    def _add_entry(self, functor_to_feature: Dict[str, Any], program: Any, entry: FeatureConfigEntry) -> None:
        feature = instantiate(program, entry.implementation_id, entry.arguments, functor=entry.functor)
        functor, alias = alias_keys(entry.functor)
        functor_to_feature[functor] = feature
        functor_to_feature[alias] = feature
        logger.info(f"adding ComplexFeature: {bare_form(entry.functor)}")

    def init(self, program: Any, source: ConfigSource, encoding: str = "utf-8") -> None:
        """Destroy current state (if any) and load the functor -> feature mapping.

        Args:
            program: Logic program handed to every feature's constructor
            source: Path to a properties/YAML file, an open text stream, or lines
            encoding: Text encoding used when source is a path

        Raises:
            ValueError: If program is None
            ConfigError: If the source is missing or has a malformed entry
            InstantiationError: If a feature type is unknown or fails to construct

        The library is left uninitialized when any of these is raised.
        """
        self._pre_init(program)
        entries = parse(source, encoding=encoding)

        functor_to_feature: Dict[str, Any] = {}
        for entry in entries:
            self._add_entry(functor_to_feature, program, entry)

        self._functor_to_feature = functor_to_feature
        self._program = program
        self._initialized = True
        logger.info(f"Complex feature library initialized with {len(entries)} features ({len(self)} functors)")

    def init_from_config(self, program: Any, config: Optional[LibraryConfig] = None) -> None:
        """Initialize from the properties path named in a LibraryConfig (environment by default).

        Raises:
            MissingSourceError: If the config names no properties path
        """
        config = config or LibraryConfig()
        if config.properties_path is None:
            self.reset()
            raise MissingSourceError(
                "No complex feature properties configured (set COMPLEX_FEATURES_PROPERTIES)"
            )
        self.init(program, config.properties_path, encoding=config.encoding)

    def reset(self) -> None:
        """Return to the uninitialized state. Meant for isolating tests."""
        self._initialized = False
        self._functor_to_feature = None
        self._program = None

    def functors(self) -> List[str]:
        """All registered keys, bare and escaped.

        Raises:
            LibraryNotInitializedError: If the library has not been initialized
        """
        if not self._initialized:
            raise LibraryNotInitializedError("ComplexFeatureLibrary is not initialized")
        return list(self._functor_to_feature.keys())

    def __contains__(self, functor: str) -> bool:
        """Check if a functor is registered (False when uninitialized)."""
        return self._initialized and functor in self._functor_to_feature

    def __len__(self) -> int:
        """Number of registered keys, counting bare and escaped forms separately."""
        return len(self._functor_to_feature) if self._functor_to_feature else 0

    def __str__(self) -> str:
        return f"ComplexFeatureLibrary(initialized={self._initialized}, functors={len(self)})"
