"""Enumeration checks.

A value is valid for a plain enumeration if it equals one of the valid
values. For a flags enumeration (any ``enum.Flag`` subclass, including
``IntFlag``) it is valid if it is any OR-combination of the valid values'
bits: each valid value's bits are cleared from the candidate and nothing
may be left over. Zero is valid only if some valid value is zero.

Strict Python enums cannot hold undefined values, so a raw integer may be
checked against an explicit ``enum_type``:

    argument_is_valid_enum(69, "day", enum_type=Weekday)
"""

import enum
from typing import Any, Iterable, Optional, Tuple, Type

import numpy as np

from runtime_ensure.checks.base import elidable
from runtime_ensure.checks.nulls import argument_not_none
from runtime_ensure.errors import ArgumentError
from runtime_ensure.messages import ENUM_NOT_DEFINED, ENUM_NOT_PERMITTED, FLAGS_NOT_VALID


@elidable
def argument_is_valid_enum(
    value: Any,
    argument_name: str,
    enum_type: Optional[Type[enum.Enum]] = None,
) -> None:
    """Validate that a value is a member (or flag combination) of its enumeration.

    Every entry of ``enum_type.__members__`` is valid, aliases and
    zero-valued flags included.

    Parameters
    ----------
    value : Enum or int
        The enumeration value. Raw values need ``enum_type``.
    argument_name : str
        The argument name.
    enum_type : type, optional
        The enumeration type. Defaults to ``type(value)``.

    Raises
    ------
    ArgumentError
        If ``value`` is not valid for the enumeration.
    TypeError
        If no enumeration type can be determined.
    """
    enum_type = _resolve_enum_type(value, enum_type, ())
    _check_enum(value, argument_name, enum_type, tuple(enum_type.__members__.values()))


@elidable
def argument_is_permitted_enum(
    value: Any,
    argument_name: str,
    valid_values: Optional[Iterable[Any]],
    enum_type: Optional[Type[enum.Enum]] = None,
) -> None:
    """Validate that a value is one of an explicit set of enumeration values.

    Use this when only a subset of an enumeration makes sense for the
    argument. For flags enumerations ``value`` may combine any of the
    valid flags.

    Parameters
    ----------
    value : Enum or int
        The enumeration value.
    argument_name : str
        The argument name.
    valid_values : iterable
        The values that are permitted. Consumed once.
    enum_type : type, optional
        The enumeration type. Defaults to the type of ``value``, then to
        the type of the first valid value.

    Raises
    ------
    ArgumentNullError
        If ``valid_values`` is None.
    ArgumentError
        If ``value`` is not permitted. The message says whether the value
        is undefined for the enumeration or merely not allowed here.
    TypeError
        If no enumeration type can be determined, or a valid value is
        not a member of it.
    """
    argument_not_none(valid_values, "valid_values")

    valid = tuple(valid_values)
    enum_type = _resolve_enum_type(value, enum_type, valid)
    _check_enum(value, argument_name, enum_type, _as_members(valid, enum_type))


def enum_type_name(enum_type: type) -> str:
    """Fully qualified name of a type, e.g. ``app.models.Colour``."""
    return f"{enum_type.__module__}.{enum_type.__qualname__}"


def display_value(value: Any, enum_type: Type[enum.Enum]) -> str:
    """Member name if the value maps to a named member, else the raw value."""
    raw = _raw(value)
    for name, member in enum_type.__members__.items():
        if member.value == raw:
            return name
    return str(raw)


def _check_enum(value: Any, argument_name: str, enum_type: Type[enum.Enum], valid: Tuple[Any, ...]) -> None:
    if issubclass(enum_type, enum.Flag):
        if not _is_valid_flags(value, valid):
            raise ArgumentError(_format(FLAGS_NOT_VALID, value, enum_type), argument_name)
        return

    raw = _raw(value)
    if any(raw == _raw(valid_value) for valid_value in valid):
        return

    # tailor the message to whether the value is undefined or just not allowed here
    defined = any(member.value == raw for member in enum_type.__members__.values())
    template = ENUM_NOT_PERMITTED if defined else ENUM_NOT_DEFINED
    raise ArgumentError(_format(template, value, enum_type), argument_name)


def _is_valid_flags(value: Any, valid: Tuple[Any, ...]) -> bool:
    bits = _to_int64(value)
    if bits is None:
        return False

    if bits == 0:
        return any(_to_int64(valid_value) == 0 for valid_value in valid)

    for valid_value in valid:
        valid_bits = _to_int64(valid_value)
        if valid_bits is not None:
            bits &= ~valid_bits

    return bits == 0


def _to_int64(value: Any) -> Optional[int]:
    """Signed 64-bit view of a flag value; None if it is not an integer.

    Raises OverflowError for integers outside the int64 range.
    """
    raw = _raw(value)
    if not isinstance(raw, (int, np.integer)):
        return None
    return int(np.int64(raw))


def _raw(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


def _resolve_enum_type(value: Any, enum_type: Optional[type], valid: Tuple[Any, ...]) -> Type[enum.Enum]:
    if enum_type is not None:
        if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
            raise TypeError(f"enum_type must be an Enum subclass, got {enum_type!r}")
        if isinstance(value, enum.Enum) and not isinstance(value, enum_type):
            raise TypeError(
                f"{value!r} is not a member of {enum_type_name(enum_type)}"
            )
        return enum_type

    if isinstance(value, enum.Enum):
        return type(value)

    for valid_value in valid:
        if isinstance(valid_value, enum.Enum):
            return type(valid_value)

    raise TypeError(
        f"Cannot determine the enumeration type of {value!r}; pass enum_type"
    )


def _format(template: str, value: Any, enum_type: Type[enum.Enum]) -> str:
    return template.format(value=display_value(value, enum_type), type_name=enum_type_name(enum_type))


def _as_members(valid: Tuple[Any, ...], enum_type: Type[enum.Enum]) -> Tuple[enum.Enum, ...]:
    """Convert valid values to members of ``enum_type``.

    Members of another enumeration, raw values that are not members, and
    flag values carrying undefined bits raise TypeError.
    """
    defined = tuple(enum_type.__members__.values())
    members = []
    for valid_value in valid:
        if isinstance(valid_value, enum.Enum) and not isinstance(valid_value, enum_type):
            raise TypeError(
                f"Valid value {valid_value!r} is not a member of {enum_type_name(enum_type)}"
            )

        try:
            member = enum_type(_raw(valid_value))
        except ValueError:
            raise TypeError(
                f"Valid value {valid_value!r} is not a member of {enum_type_name(enum_type)}"
            ) from None

        # IntFlag accepts any integer
        if issubclass(enum_type, enum.Flag) and not _is_valid_flags(member, defined):
            raise TypeError(
                f"Valid value {valid_value!r} has bits not defined by {enum_type_name(enum_type)}"
            )
        members.append(member)
    return tuple(members)
