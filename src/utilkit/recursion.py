"""Factorial and Fibonacci."""

import logging

from utilkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def factorial(n: int) -> int:
    """Compute ``n!``.

    Uses an accumulator loop rather than recursion so large `n` does not hit
    the interpreter's recursion limit; results match the recursive definition
    ``n! = n * (n - 1)!`` with ``0! = 1! = 1``.

    Args:
        n: A non-negative integer.

    Returns:
        int: The factorial of `n`.

    Raises:
        InvalidArgumentError: If `n` is negative.
    """
    if n < 0:
        raise InvalidArgumentError(
            "n", n, "factorial is not defined for negative numbers"
        )
    result = 1
    for k in range(2, n + 1):
        result *= k
    logger.debug("factorial(%s) computed", n)
    return result


def fibonacci(n: int) -> int:
    """Return the `n`-th Fibonacci number using the naive recursive definition.

    Exponential time on its own; intended to be wrapped with
    :class:`utilkit.wrappers.memoize.Memoizer`.

    Raises:
        InvalidArgumentError: If `n` is negative.
    """
    if n < 0:
        raise InvalidArgumentError("n", n, "must be a non-negative integer")
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)
