"""Global on/off switch for argument checks.

The switch is read on every check call, nothing is cached, so turning it
on takes effect on the very next call. It starts from the ``ENSURE``
environment variable and defaults to off.

Usage
-----
    import runtime_ensure
    from runtime_ensure import config

    config.enable()
    runtime_ensure.argument_not_none(client, "client")

    with config.enabled(False):
        ...  # checks are no-ops here
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from runtime_ensure.schemas import EnsureSettings

logger = logging.getLogger(__name__)

_settings: EnsureSettings = EnsureSettings.from_env()


def get_settings() -> EnsureSettings:
    """Return the current (immutable) settings."""
    return _settings


def is_enabled() -> bool:
    """True when checks are active."""
    return _settings.enabled


def configure(**overrides) -> EnsureSettings:
    """Replace the current settings with validated overrides.

    Parameters
    ----------
    **overrides
        Fields of EnsureSettings, e.g. ``enabled=True``.

    Returns
    -------
    EnsureSettings
        The settings now in effect.

    Raises
    ------
    pydantic.ValidationError
        If an override is unknown or has the wrong type.
    """
    new_settings = EnsureSettings.model_validate({**_settings.model_dump(), **overrides})
    _replace(new_settings)
    return new_settings


def enable() -> None:
    """Turn argument checks on."""
    configure(enabled=True)


def disable() -> None:
    """Turn argument checks off. Every check becomes a no-op."""
    configure(enabled=False)


def reload_from_env(environ: Optional[Mapping[str, str]] = None) -> EnsureSettings:
    """Re-read the ``ENSURE`` environment variable and apply it."""
    new_settings = EnsureSettings.from_env(environ)
    _replace(new_settings)
    return new_settings


@contextmanager
def enabled(flag: bool = True) -> Iterator[EnsureSettings]:
    """Temporarily switch checks on (or off), restoring the previous state.

    Examples
    --------
    >>> with enabled():
    ...     argument_not_none(None, "x")
    Traceback (most recent call last):
    ...
    runtime_ensure.errors.ArgumentNullError: Value cannot be None. (argument 'x')
    """
    previous = _settings
    try:
        yield configure(enabled=flag)
    finally:
        _replace(previous)


def _replace(new_settings: EnsureSettings) -> None:
    global _settings

    if new_settings.enabled != _settings.enabled:
        logger.info("Argument checks %s", "enabled" if new_settings.enabled else "disabled")
    else:
        logger.debug("Argument checks unchanged (enabled=%s)", new_settings.enabled)
    _settings = new_settings
