"""Configuration utilities for UTILKIT.

This module centralizes small helpers and constants related to configuration
read from the environment.
"""

import os

from utilkit.errors import UtilkitError

SEED_ENV_VAR = "UTILKIT_SEED"  # pragma: no mutate
DEBOUNCE_DELAY_ENV_VAR = "UTILKIT_DEBOUNCE_DELAY"  # pragma: no mutate

DEFAULT_DEBOUNCE_DELAY = 1.0


class InvalidSettingError(UtilkitError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, raw: str, expected: str) -> None:
        super().__init__(f"{name}={raw!r} is not valid; expected {expected}.")
        self.name = name
        self.raw = raw


def get_seed() -> int | None:
    """Get the random seed for the guessing simulation from the environment.

    Returns:
        The integer value of `UTILKIT_SEED`, or None when it is unset or empty.

    Raises:
        InvalidSettingError: If `UTILKIT_SEED` is not an integer.
    """
    if not (raw := os.environ.get(SEED_ENV_VAR, "").strip()):
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidSettingError(SEED_ENV_VAR, raw, "an integer") from e


def get_debounce_delay() -> float:
    """Get the default debounce delay (in seconds) from the environment.

    Returns:
        The value of `UTILKIT_DEBOUNCE_DELAY`, or `DEFAULT_DEBOUNCE_DELAY` if unset.

    Raises:
        InvalidSettingError: If the value is not a positive number.
    """
    if not (raw := os.environ.get(DEBOUNCE_DELAY_ENV_VAR, "").strip()):
        return DEFAULT_DEBOUNCE_DELAY
    try:
        delay = float(raw)
    except ValueError as e:
        raise InvalidSettingError(
            DEBOUNCE_DELAY_ENV_VAR, raw, "a positive number of seconds"
        ) from e
    if delay <= 0:
        raise InvalidSettingError(
            DEBOUNCE_DELAY_ENV_VAR, raw, "a positive number of seconds"
        )
    return delay
