"""Guess-and-check simulation.

Plays a "guess the number" game without user input: a secret number is drawn
from a closed range, and guesses are taken from a guess source until one
matches or the attempt limit is exceeded.

The guess source is any zero-argument callable returning an integer, so tests
can feed a fixed sequence (``iter([...]).__next__``) instead of random draws.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from utilkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_LOWER = 1
DEFAULT_UPPER = 100
DEFAULT_ATTEMPT_LIMIT = 10

GuessSource = Callable[[], int]


class Hint(str, Enum):
    """Feedback given after a guess."""

    CORRECT = "correct"
    HIGHER = "higher"
    LOWER = "lower"


@dataclass(frozen=True)
class GuessAttempt:
    """A single guess and the hint it produced."""

    number: int
    guess: int
    hint: Hint


@dataclass(frozen=True)
class GuessingResult:
    """Outcome of a simulated game.

    Attributes:
        secret: The number that had to be guessed.
        attempts: How many guesses were made.
        guessed: True if the last guess matched the secret.
        history: Every attempt, in order.
    """

    secret: int
    attempts: int
    guessed: bool
    history: tuple[GuessAttempt, ...] = field(default_factory=tuple)


def hint_for(guess: int, secret: int) -> Hint:
    """Compare a guess against the secret.

    Returns:
        Hint: CORRECT on a match, HIGHER if the secret is above the guess,
        LOWER if it is below.
    """
    if guess == secret:
        return Hint.CORRECT
    if guess < secret:
        return Hint.HIGHER
    return Hint.LOWER


def simulate_guessing_game(  # pylint: disable=too-many-arguments
    *,
    secret: int | None = None,
    guess_source: GuessSource | None = None,
    rng: random.Random | None = None,
    lower: int = DEFAULT_LOWER,
    upper: int = DEFAULT_UPPER,
    attempt_limit: int = DEFAULT_ATTEMPT_LIMIT,
) -> GuessingResult:
    """Run a guess-and-check loop until the secret is found or attempts run out.

    The loop stops as soon as the attempt counter exceeds `attempt_limit`, so
    at most ``attempt_limit + 1`` guesses are made. This bound guarantees
    termination for any guess source.

    Args:
        secret: Number to guess. Drawn uniformly from [lower, upper] when None.
        guess_source: Callable producing the next guess. Defaults to uniform
            draws from [lower, upper].
        rng: Random generator for the secret and default guesses. A fresh
            unseeded ``random.Random`` is used when None.
        lower: Smallest possible secret.
        upper: Largest possible secret.
        attempt_limit: Attempt count after which the game gives up.

    Returns:
        GuessingResult: The secret, the number of attempts, and the history.

    Raises:
        InvalidArgumentError: If the range is empty or `attempt_limit` < 1.
    """
    if lower > upper:
        raise InvalidArgumentError("lower", lower, f"must not exceed upper ({upper})")
    if attempt_limit < 1:
        raise InvalidArgumentError("attempt_limit", attempt_limit, "must be at least 1")

    rng = rng or random.Random()
    if secret is None:
        secret = rng.randint(lower, upper)
    if guess_source is None:
        guess_source = lambda: rng.randint(lower, upper)  # noqa: E731

    attempts = 0
    guessed = False
    history: list[GuessAttempt] = []
    while not guessed:
        guess = guess_source()
        attempts += 1
        hint = hint_for(guess, secret)
        history.append(GuessAttempt(number=attempts, guess=guess, hint=hint))
        logger.debug("Attempt %s: guessed %s (%s)", attempts, guess, hint.value)

        guessed = hint is Hint.CORRECT
        if attempts > attempt_limit:
            break

    if guessed:
        logger.info("Secret %s found after %s attempts", secret, attempts)
    else:
        logger.info("Gave up on secret %s after %s attempts", secret, attempts)
    return GuessingResult(
        secret=secret, attempts=attempts, guessed=guessed, history=tuple(history)
    )
