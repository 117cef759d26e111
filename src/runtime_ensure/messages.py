"""Fixed failure messages.

Every message a check can produce lives here. Enum templates are formatted
with ``value`` (display form of the candidate) and ``type_name`` (fully
qualified name of the enumeration type).
"""

CANNOT_BE_NONE = "Value cannot be None."
CANNOT_BE_EMPTY = "Cannot be empty."
CANNOT_BE_WHITESPACE = "Cannot be white-space."
ITEM_WAS_NONE = "An item inside the iterable was None."

FLAGS_NOT_VALID = "Enum value '{value}' is not valid for flags enumeration '{type_name}'."
ENUM_NOT_DEFINED = "Enum value '{value}' is not defined for enumeration '{type_name}'."
ENUM_NOT_PERMITTED = (
    "Enum value '{value}' is defined for enumeration '{type_name}' "
    "but it is not permitted in this context."
)

# Which failure kinds each public check can raise.
CHECK_FAILURES = {
    "argument_not_none": ["ArgumentNullError"],
    "argument_has_value": ["ArgumentNullError"],
    "generic_argument_not_none": ["ArgumentNullError"],
    "argument_not_none_items": ["ArgumentNullError", "ArgumentError"],
    "argument_not_none_or_empty": ["ArgumentNullError", "ArgumentError"],
    "iterable_not_none_or_empty": ["ArgumentNullError", "ArgumentError"],
    "collection_not_none_or_empty": ["ArgumentNullError", "ArgumentError"],
    "argument_not_none_or_whitespace": ["ArgumentNullError", "ArgumentError"],
    "argument_condition": ["ArgumentError"],
    "condition": ["caller-defined"],
    "argument_is_valid_enum": ["ArgumentError"],
    "argument_is_permitted_enum": ["ArgumentNullError", "ArgumentError"],
}
