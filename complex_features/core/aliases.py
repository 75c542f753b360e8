"""Bare/escaped functor naming helpers."""

from typing import Tuple

ESCAPE_PREFIX = "escape__"


def is_escaped(functor: str) -> bool:
    return functor.startswith(ESCAPE_PREFIX)


def alias_keys(functor: str) -> Tuple[str, str]:
    """Return ``(functor, alias)`` for a configured functor.

    An escaped functor is aliased to its bare form by stripping the prefix up to
    its first occurrence; a bare functor is aliased to its escaped form.

    Args:
        functor: The functor exactly as it appeared in the configuration.

    Returns:
        The configured functor followed by the key it should also be reachable under.
    """
    if is_escaped(functor):
        return functor, functor.split(ESCAPE_PREFIX, 1)[1]
    return functor, ESCAPE_PREFIX + functor


def bare_form(functor: str) -> str:
    """The functor with a leading escape prefix removed, if it has one."""
    if is_escaped(functor):
        return functor.split(ESCAPE_PREFIX, 1)[1]
    return functor
