"""Single-utility commands for the utilkit CLI.

Results go to stdout; status lines and warnings go to stderr (see
:mod:`utilkit.entrypoints.cli.helpers.messages`).
"""

from __future__ import annotations

import random

import click

from utilkit import config
from utilkit.dates import is_valid_date
from utilkit.errors import UtilkitError
from utilkit.guessing import (
    DEFAULT_ATTEMPT_LIMIT,
    DEFAULT_LOWER,
    DEFAULT_UPPER,
    Hint,
    simulate_guessing_game,
)
from utilkit.recursion import factorial
from utilkit.text import extract_unique_words

from .helpers import success, warn

HINT_TEXT = {
    Hint.CORRECT: "correct!",
    Hint.HIGHER: "higher",
    Hint.LOWER: "lower",
}


def resolve_seed(seed: int | None) -> int | None:
    """Use the --seed option if given, otherwise fall back to UTILKIT_SEED."""
    if seed is not None:
        return seed
    try:
        return config.get_seed()
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e


@click.command("validate-date")
@click.argument("day", type=int)
@click.argument("month", type=int)
@click.argument("year", type=int)
@click.pass_context
def validate_date_cmd(ctx: click.Context, day: int, month: int, year: int) -> None:
    """Check whether DAY/MONTH/YEAR is a real calendar date.

    Exits with status 1 when the date is invalid.
    """
    label = f"{day:02d}/{month:02d}/{year:04d}"
    if is_valid_date(day, month, year):
        click.echo(f"{label}: valid")
    else:
        click.echo(f"{label}: invalid")
        ctx.exit(1)


@click.command("guess")
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible runs (falls back to UTILKIT_SEED).",
)
@click.option(
    "--lower",
    type=int,
    default=DEFAULT_LOWER,
    show_default=True,
    help="Smallest possible secret.",
)
@click.option(
    "--upper",
    type=int,
    default=DEFAULT_UPPER,
    show_default=True,
    help="Largest possible secret.",
)
@click.option(
    "--attempt-limit",
    type=click.IntRange(min=1),
    default=DEFAULT_ATTEMPT_LIMIT,
    show_default=True,
    help="Give up once this many attempts have been exceeded.",
)
def guess_cmd(seed: int | None, lower: int, upper: int, attempt_limit: int) -> None:
    """Simulate a guess-the-number game with random guesses."""
    rng = random.Random(resolve_seed(seed))
    try:
        result = simulate_guessing_game(
            rng=rng, lower=lower, upper=upper, attempt_limit=attempt_limit
        )
    except UtilkitError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Guess the number between {lower} and {upper}!")
    for attempt in result.history:
        click.echo(
            f"Attempt {attempt.number}: {attempt.guess} ({HINT_TEXT[attempt.hint]})"
        )
    if result.guessed:
        success(f"Found {result.secret} in {result.attempts} attempts!")
    else:
        warn(
            f"Gave up after {result.attempts} attempts; "
            f"the number was {result.secret}."
        )


@click.command("unique-words")
@click.argument("text", nargs=-1, required=True)
def unique_words_cmd(text: tuple[str, ...]) -> None:
    """Print the distinct words of TEXT, lower-cased, in first-seen order."""
    for word in extract_unique_words(" ".join(text)):
        click.echo(word)


@click.command("factorial")
@click.argument("n", type=int)
def factorial_cmd(n: int) -> None:
    """Print N! (N must not be negative)."""
    try:
        result = factorial(n)
    except UtilkitError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result)
