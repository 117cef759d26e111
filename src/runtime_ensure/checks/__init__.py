"""Argument checks - fail-fast validation of routine preconditions.

Each check either returns None or raises. While the global switch is off
(see runtime_ensure.config) every check returns immediately.

Key principle:
- ArgumentNullError: a required value is missing
- ArgumentError: a value is present but breaks a precondition
- condition(): the caller decides what to raise
"""

from runtime_ensure.checks.base import elidable, require
from runtime_ensure.checks.conditions import argument_condition, condition
from runtime_ensure.checks.emptiness import (
    argument_not_none_or_empty,
    argument_not_none_or_whitespace,
    collection_not_none_or_empty,
    iterable_not_none_or_empty,
)
from runtime_ensure.checks.enums import argument_is_permitted_enum, argument_is_valid_enum
from runtime_ensure.checks.nulls import (
    argument_has_value,
    argument_not_none,
    argument_not_none_items,
    generic_argument_not_none,
    is_nullable_type,
)

__all__ = [
    "elidable",
    "require",
    "argument_not_none",
    "argument_has_value",
    "generic_argument_not_none",
    "argument_not_none_items",
    "is_nullable_type",
    "argument_not_none_or_empty",
    "iterable_not_none_or_empty",
    "collection_not_none_or_empty",
    "argument_not_none_or_whitespace",
    "argument_condition",
    "condition",
    "argument_is_valid_enum",
    "argument_is_permitted_enum",
]
