"""Base check utilities.

``elidable`` gates every check on the global switch. ``require`` is the
single point where an ArgumentError is raised for a broken condition.
"""

import functools
from typing import Callable, Optional, TypeVar, Union

from runtime_ensure import config
from runtime_ensure.errors import ArgumentError

F = TypeVar("F", bound=Callable[..., None])

Predicate = Union[bool, Callable[[], bool]]


def elidable(func: F) -> F:
    """Make a check a no-op while checks are disabled.

    The switch is consulted before the body of ``func`` runs, so nothing
    the check would inspect (iterators, predicates, enum members) is
    touched when checks are off.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not config.is_enabled():
            return None
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def evaluate(condition: Predicate) -> bool:
    """Resolve a condition that may be deferred behind a callable."""
    if callable(condition):
        return bool(condition())
    return bool(condition)


def require(condition: bool, message: str, argument_name: Optional[str] = None) -> None:
    """Raise ArgumentError unless ``condition`` holds.

    Parameters
    ----------
    condition : bool
        Must be true. If False, ArgumentError is raised.
    message : str
        Failure description.
    argument_name : str, optional
        Name of the argument being checked.

    Raises
    ------
    ArgumentError
        If condition is False.

    Examples
    --------
    >>> require(len(name) > 0, "Cannot be empty.", "name")
    """
    if not condition:
        raise ArgumentError(message, argument_name)
