"""None checks.

Three shapes of "must be present":

- a plain reference (``argument_not_none``)
- an optional value (``argument_has_value``), where numpy's masked scalar
  also counts as missing
- a value whose declared type decides whether None is even possible
  (``generic_argument_not_none``)

plus the iterable form that can also reject None items.
"""

import enum
import types
import typing
from decimal import Decimal
from fractions import Fraction
from typing import Any, Iterable, Optional

import numpy as np

from runtime_ensure.checks.base import elidable
from runtime_ensure.errors import ArgumentError, ArgumentNullError
from runtime_ensure.messages import ITEM_WAS_NONE

# Types whose instances are values: a slot declared with one of these
# cannot legitimately hold None.
VALUE_TYPES = (bool, int, float, complex, Decimal, Fraction, enum.Enum, np.generic)


def is_nullable_type(tp: Any) -> bool:
    """Whether a slot declared as ``tp`` may hold None.

    Parameters
    ----------
    tp : type or typing construct
        ``None``, ``Any`` and ``object`` are unconstrained. ``Optional[X]``
        and ``X | None`` are nullable. Classes in VALUE_TYPES (and their
        subclasses) are not. Any other class is a reference type.

    Examples
    --------
    >>> is_nullable_type(int)
    False
    >>> is_nullable_type(Optional[int])
    True
    >>> is_nullable_type(str)
    True
    """
    if tp is None or tp is Any or tp is object or tp is type(None):
        return True

    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        return any(is_nullable_type(arg) for arg in typing.get_args(tp))
    if origin is not None:
        # list[int] -> list
        tp = origin

    if isinstance(tp, type):
        return not issubclass(tp, VALUE_TYPES)

    # TypeVars, forward references, Literal
    return True


@elidable
def argument_not_none(value: Any, argument_name: str) -> None:
    """Validate that an argument is not None.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None.
    """
    if value is None:
        raise ArgumentNullError(argument_name)


@elidable
def argument_has_value(value: Optional[Any], argument_name: str) -> None:
    """Validate that an optional value is present.

    None and ``numpy.ma.masked`` both mean "no value".

    Raises
    ------
    ArgumentNullError
        If ``value`` is missing.
    """
    if value is None or value is np.ma.masked:
        raise ArgumentNullError(argument_name)


@elidable
def generic_argument_not_none(value: Any, argument_name: str, value_type: Any = None) -> None:
    """Validate a generically-typed argument is not None.

    Useful when the declared type of a slot is only known at the call
    site. If ``value_type`` is a value type (see ``is_nullable_type``)
    the slot cannot hold None and the check passes without looking at
    ``value``.

    Parameters
    ----------
    value : object
        The argument value.
    argument_name : str
        The argument name.
    value_type : type, optional
        Declared type of the slot. Omitted means unconstrained.

    Raises
    ------
    ArgumentNullError
        If the slot is nullable and ``value`` is None.
    """
    if is_nullable_type(value_type):
        argument_not_none(value, argument_name)


@elidable
def argument_not_none_items(
    value: Optional[Iterable[Any]],
    argument_name: str,
    check_items: bool,
    item_type: Any = None,
) -> None:
    """Validate an iterable is not None and, optionally, holds no None items.

    With ``check_items`` false the items are never touched. With it true
    the iterable is consumed once, up to the first None item. Items of a
    non-nullable ``item_type`` are not scanned.

    Parameters
    ----------
    value : iterable
        The argument value.
    argument_name : str
        The argument name.
    check_items : bool
        Also check every item.
    item_type : type, optional
        Declared item type.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None.
    ArgumentError
        If ``check_items`` is true and an item is None.
    """
    argument_not_none(value, argument_name)

    if check_items and is_nullable_type(item_type):
        for item in value:
            if item is None:
                raise ArgumentError(ITEM_WAS_NONE, argument_name)
