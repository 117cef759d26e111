"""Failure kinds raised by argument checks.

Checks fail fast and loud. Every failure carries the name of the argument
that was rejected, so the caller can tell which precondition broke without
reading a traceback.
"""

from typing import Optional

from runtime_ensure.messages import CANNOT_BE_NONE


class ArgumentError(ValueError):
    """Raised when an argument is present but violates a precondition.

    Examples are an empty string, a whitespace-only string, a false
    condition or an enumeration value that is not allowed.

    Attributes
    ----------
    message : str
        The failure description, without the argument name.
    argument_name : str or None
        Name of the offending argument.
    """

    def __init__(self, message: str, argument_name: Optional[str] = None) -> None:
        self.message = message
        self.argument_name = argument_name
        super().__init__(message, argument_name)

    def __str__(self) -> str:
        if self.argument_name is None:
            return self.message
        return f"{self.message} (argument '{self.argument_name}')"


class ArgumentNullError(ArgumentError):
    """Raised when a required argument is None.

    Subclass of ArgumentError: a missing argument is a special case of an
    invalid one, so ``except ArgumentError`` catches both.
    """

    def __init__(self, argument_name: Optional[str] = None, message: Optional[str] = None) -> None:
        super().__init__(message or CANNOT_BE_NONE, argument_name)

    def __reduce__(self):
        return (type(self), (self.argument_name, self.message))
