import importlib
import logging
from typing import Any, Callable, Dict, Optional, Sequence

from ..core.errors import FeatureConstructionError, UnknownFeatureTypeError

logger = logging.getLogger(__name__)

# implementation id -> callable taking (program, arguments)
FEATURE_REGISTRY: Dict[str, Callable[..., Any]] = {}


def register_feature(name: Optional[str] = None):
    """
    Class decorator registering a feature type under ``name`` (its class name by default).

    A later registration under the same name replaces the earlier one.
    """
    def _decorator(feature_class):
        key = name or feature_class.__name__
        if key in FEATURE_REGISTRY and FEATURE_REGISTRY[key] is not feature_class:
            logger.warning(f"Replacing registered feature type '{key}': {FEATURE_REGISTRY[key]} -> {feature_class}")
        FEATURE_REGISTRY[key] = feature_class
        return feature_class
    return _decorator


def unregister_feature(name: str) -> None:
    FEATURE_REGISTRY.pop(name, None)


def _import_dotted(implementation_id: str) -> Optional[Callable[..., Any]]:
    module_name, _, attr = implementation_id.rpartition(".")
    if not module_name or not attr:
        return None
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        # The named module (or a parent package) does not exist
        if isinstance(e, ModuleNotFoundError) and e.name and (module_name == e.name or module_name.startswith(e.name + ".")):
            logger.debug(f"No module '{module_name}' for feature type '{implementation_id}'")
            return None
        logger.error(f"Error importing module '{module_name}' for feature type '{implementation_id}': {e}", exc_info=True)
        raise UnknownFeatureTypeError(
            f"Couldn't import feature type {implementation_id!r}: {type(e).__name__}: {e}"
        ) from e
    return getattr(module, attr, None)


def get_feature_class(implementation_id: str) -> Callable[..., Any]:
    """
    Resolves an implementation id to a feature type.

    Registered names are tried first; otherwise a dotted ``package.module.ClassName``
    path is imported.

    Raises:
        UnknownFeatureTypeError: If the id resolves to nothing callable.
    """
    feature_class = FEATURE_REGISTRY.get(implementation_id)
    if feature_class is None and implementation_id:
        feature_class = _import_dotted(implementation_id)
    if feature_class is None or not callable(feature_class):
        logger.error(
            f"Unknown feature type: {implementation_id!r}. Registered feature types: {list(FEATURE_REGISTRY.keys())}"
        )
        raise UnknownFeatureTypeError(f"Unknown feature type: {implementation_id!r}")
    return feature_class


def instantiate(program: Any, implementation_id: str, arguments: Sequence[str], functor: Optional[str] = None) -> Any:
    """
    Builds a feature instance bound to the shared logic program.

    Args:
        program: The logic program handed to every feature.
        implementation_id: Registered name or dotted path of the feature type.
        arguments: String arguments passed to the constructor as a list.
        functor: The functor being configured, used in error messages.

    Returns:
        The constructed feature.

    Raises:
        UnknownFeatureTypeError: If the implementation id cannot be resolved.
        FeatureConstructionError: If the constructor raises or returns nothing.
    """
    feature_class = get_feature_class(implementation_id)
    args = list(arguments)
    description = (
        f"Couldn't initialize feature {implementation_id} for functor {functor} with args {', '.join(args)}"
    )
    try:
        feature = feature_class(program, args)
    except Exception as e:
        logger.error(f"{description}: {e}", exc_info=True)
        raise FeatureConstructionError(f"{description}: {e}") from e
    if feature is None:
        raise FeatureConstructionError(f"{description}: factory returned None")
    return feature
