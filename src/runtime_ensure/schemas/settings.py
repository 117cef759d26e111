"""EnsureSettings: the validated form of the global check switch.

Checks are off unless something turns them on. The process-wide default
comes from the ``ENSURE`` environment variable, the runtime counterpart of
defining a build symbol.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import ConfigDict, ValidationError

from runtime_ensure.schemas.base import EnsureBaseModel

logger = logging.getLogger(__name__)

ENV_VAR = "ENSURE"


class EnsureSettings(EnsureBaseModel):
    """Global settings for argument checks.

    Attributes
    ----------
    enabled : bool
        When False every check returns immediately without inspecting its
        arguments.

    Examples
    --------
    >>> EnsureSettings(enabled="yes").enabled
    True
    >>> EnsureSettings.from_env({"ENSURE": "0"}).enabled
    False
    """

    enabled: bool = False

    model_config = ConfigDict(frozen=True)  # merged with EnsureBaseModel's config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EnsureSettings":
        """Build settings from the ``ENSURE`` environment variable.

        Parameters
        ----------
        environ : mapping, optional
            Environment to read. Defaults to ``os.environ``.

        Returns
        -------
        EnsureSettings
            Defaults when the variable is unset, blank or not a boolean.
            A malformed value is logged as a warning.
        """
        if environ is None:
            environ = os.environ

        raw = environ.get(ENV_VAR, "").strip()
        if not raw:
            return cls()
        try:
            return cls.model_validate({"enabled": raw})
        except ValidationError:
            logger.warning("Ignoring %s=%r: not a boolean, argument checks stay disabled", ENV_VAR, raw)
            return cls()
