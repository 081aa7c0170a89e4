"""Error definitions shared across utilkit."""

from typing import Any

# ============================================================================
#                           General errors
# ============================================================================


class UtilkitError(Exception):
    """Base class for utilkit errors."""


class InvalidArgumentError(UtilkitError, ValueError):
    """Raised when a function receives an argument outside its domain."""

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid value for '{argument}' ({value!r}): {reason}.")
        self.argument = argument
        self.value = value
        self.reason = reason
