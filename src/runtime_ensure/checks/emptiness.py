"""Emptiness and white-space checks for strings, iterables and collections."""

from collections.abc import Sized
from typing import Any, Iterable, Optional

from runtime_ensure.checks.base import elidable, require
from runtime_ensure.checks.nulls import argument_not_none
from runtime_ensure.messages import CANNOT_BE_EMPTY, CANNOT_BE_WHITESPACE

_EXHAUSTED = object()


@elidable
def argument_not_none_or_empty(value: Any, argument_name: str) -> None:
    """Validate that an argument is not None or empty.

    Strings must not equal ``""``; white-space is allowed here (see
    ``argument_not_none_or_whitespace``). Other sized collections are
    checked with ``len()``, any other iterable by pulling one item.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None.
    ArgumentError
        If ``value`` is empty.
    """
    argument_not_none(value, argument_name)

    if isinstance(value, str):
        require(value != "", CANNOT_BE_EMPTY, argument_name)
    elif isinstance(value, Sized):
        collection_not_none_or_empty(value, argument_name)
    else:
        iterable_not_none_or_empty(value, argument_name)


@elidable
def iterable_not_none_or_empty(value: Optional[Iterable[Any]], argument_name: str) -> None:
    """Validate that an iterable is not None and yields at least one item.

    At most one item is pulled from a fresh iterator over ``value``. A
    one-shot iterator (e.g. a generator) loses that item.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None.
    ArgumentError
        If ``value`` yields nothing.
    """
    argument_not_none(value, argument_name)
    require(next(iter(value), _EXHAUSTED) is not _EXHAUSTED, CANNOT_BE_EMPTY, argument_name)


@elidable
def collection_not_none_or_empty(value: Optional[Sized], argument_name: str) -> None:
    """Validate that a sized collection is not None and has a non-zero length.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None.
    ArgumentError
        If ``len(value) == 0``.
    """
    argument_not_none(value, argument_name)
    require(len(value) != 0, CANNOT_BE_EMPTY, argument_name)


@elidable
def argument_not_none_or_whitespace(value: Optional[str], argument_name: str) -> None:
    """Validate that a string has at least one non-white-space character.

    White-space follows ``str.isspace()``, so the ASCII information
    separators U+001C to U+001F count as white-space too, unlike the
    narrower Unicode White_Space property.

    Raises
    ------
    ArgumentNullError
        If ``value`` is None.
    ArgumentError
        If ``value`` is empty or only white-space.
    """
    argument_not_none(value, argument_name)
    require(value != "" and not value.isspace(), CANNOT_BE_WHITESPACE, argument_name)
