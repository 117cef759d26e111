"""Base Pydantic model with strict defaults for runtime_ensure settings."""

from pydantic import BaseModel, ConfigDict


class EnsureBaseModel(BaseModel):
    """Base model for all runtime_ensure configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        str_strip_whitespace=True,# Strip whitespace from strings
    )
