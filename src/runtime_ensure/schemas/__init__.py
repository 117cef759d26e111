"""Pydantic configuration schemas for runtime_ensure.

Exports
-------
EnsureSettings : class
    Validated global switch for argument checks
EnsureBaseModel : class
    Strict base for configuration models
"""

from runtime_ensure.schemas.base import EnsureBaseModel
from runtime_ensure.schemas.settings import ENV_VAR, EnsureSettings

__all__ = [
    'EnsureBaseModel',
    'EnsureSettings',
    'ENV_VAR',
]
