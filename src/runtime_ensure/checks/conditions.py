"""General condition checks.

Both accept a plain bool or a zero-argument callable. A callable is only
invoked while checks are enabled, which is how an expensive predicate is
kept out of production runs:

    argument_condition(lambda: all(x > 0 for x in xs), "Must be positive.", "xs")
"""

from typing import Callable

from runtime_ensure.checks.base import Predicate, elidable, evaluate, require


@elidable
def argument_condition(condition: Predicate, message: str, argument_name: str) -> None:
    """Validate that a condition holds for an argument.

    Raises
    ------
    ArgumentError
        With ``message`` and ``argument_name`` if the condition is false.
    """
    require(evaluate(condition), message, argument_name)


@elidable
def condition(condition: Predicate, get_exception: Callable[[], BaseException]) -> None:
    """Validate a general condition, raising a caller-built exception.

    A catch-all: use it only when none of the argument checks fit.
    ``get_exception`` is called only when the condition fails.

    Raises
    ------
    BaseException
        Whatever ``get_exception`` returns.
    TypeError
        If ``get_exception`` does not return an exception.
    """
    if evaluate(condition):
        return

    exc = get_exception()
    if not isinstance(exc, BaseException):
        raise TypeError(
            f"get_exception must return an exception, got {type(exc).__name__}"
        )
    raise exc
