"""`runtime_ensure` - removable runtime precondition checks.

Subpackages:
- checks: None, emptiness, white-space, condition and enumeration checks
- schemas: Pydantic settings for the global switch

Checks are disabled by default. Turn them on with ``ENSURE=1`` in the
environment or ``runtime_ensure.config.enable()``.
"""

from runtime_ensure import config
from runtime_ensure.checks import (
    argument_condition,
    argument_has_value,
    argument_is_permitted_enum,
    argument_is_valid_enum,
    argument_not_none,
    argument_not_none_items,
    argument_not_none_or_empty,
    argument_not_none_or_whitespace,
    collection_not_none_or_empty,
    condition,
    generic_argument_not_none,
    is_nullable_type,
    iterable_not_none_or_empty,
)
from runtime_ensure.errors import ArgumentError, ArgumentNullError

__version__ = "0.1.0"

__all__ = [
    "config",
    "ArgumentError",
    "ArgumentNullError",
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
