"""``utilkit demo``: run every utility on sample inputs and print the results."""

from __future__ import annotations

import logging
import random
import threading

import click

from utilkit import config
from utilkit.conversions import object_to_pairs, pairs_to_object
from utilkit.dates import is_valid_date
from utilkit.errors import InvalidArgumentError
from utilkit.guessing import simulate_guessing_game
from utilkit.records import group_totals_by_customer, sort_names_by_price
from utilkit.recursion import factorial, fibonacci
from utilkit.text import extract_unique_words
from utilkit.wrappers import Debounce, Memoizer

from .helpers import error, success, warn
from .tools import resolve_seed

logger = logging.getLogger(__name__)

SAMPLE_DATES = [(29, 2, 2024), (29, 2, 2023), (31, 4, 2024), (15, 7, 2024)]
SAMPLE_TEXT = "olá olá mundo mundo javascript é incrível javascript"
SAMPLE_PRODUCTS = [
    {"name": "Notebook", "price": 2500},
    {"name": "Mouse", "price": 50},
    {"name": "Teclado", "price": 150},
    {"name": "Monitor", "price": 800},
]
SAMPLE_SALES = [
    {"customer": "João", "total": 100},
    {"customer": "Maria", "total": 200},
    {"customer": "João", "total": 150},
    {"customer": "Pedro", "total": 75},
    {"customer": "Maria", "total": 300},
]
SAMPLE_PAIRS = [("name", "João"), ("age", 30), ("city", "São Paulo")]


def _section(number: int, title: str) -> None:
    click.echo()
    click.secho(f"{number}. {title}", bold=True)


@click.command()
@click.option("--seed", type=int, default=None, help="Seed for the guessing game.")
@click.option(
    "--debounce-delay",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Debounce delay in seconds (falls back to UTILKIT_DEBOUNCE_DELAY).",
)
def demo(seed: int | None, debounce_delay: float | None) -> None:
    """Run every utility once on sample inputs."""
    if debounce_delay is None:
        try:
            debounce_delay = config.get_debounce_delay()
        except config.InvalidSettingError as e:
            raise click.ClickException(str(e)) from e

    click.echo("=== UTILKIT DEMO ===")

    _section(1, "Date validation")
    for day, month, year in SAMPLE_DATES:
        valid = is_valid_date(day, month, year)
        click.echo(f"{day:02d}/{month:02d}/{year}: {valid}")

    _section(2, "Guessing game (simulated)")
    result = simulate_guessing_game(rng=random.Random(resolve_seed(seed)))
    for attempt in result.history:
        click.echo(
            f"Attempt {attempt.number}: {attempt.guess} ({attempt.hint.value})"
        )
    if result.guessed:
        success(f"Found {result.secret} in {result.attempts} attempts!")
    else:
        warn(f"Gave up after {result.attempts} attempts (secret: {result.secret})")

    _section(3, "Unique words")
    click.echo(f'Text: "{SAMPLE_TEXT}"')
    click.echo(f"Unique words: {extract_unique_words(SAMPLE_TEXT)}")

    _section(4, "Factorial")
    click.echo(f"5! = {factorial(5)}")
    click.echo(f"0! = {factorial(0)}")
    try:
        factorial(-1)
    except InvalidArgumentError as e:
        error(f"Error for -1: {e}")

    _section(5, "Debounce")
    fired = threading.Event()
    calls: list[int] = []

    def record(call_number: int) -> None:
        calls.append(call_number)
        fired.set()

    debounced = Debounce(record, debounce_delay)
    click.echo("Calling the debounced function 3 times...")
    for call_number in (1, 2, 3):
        debounced(call_number)
    if not fired.wait(timeout=debounce_delay + 5):
        debounced.cancel()
        raise click.ClickException("Debounced call never ran.")
    click.echo(f"Executed {len(calls)} time(s), with call #{calls[-1]}")

    _section(6, "Memoization")
    memo_fibonacci = Memoizer(fibonacci)
    click.echo(f"fibonacci(10): {memo_fibonacci(10)}")
    click.echo(f"fibonacci(10) again: {memo_fibonacci(10)}")
    info = memo_fibonacci.cache_info()
    click.echo(f"cache: hits={info.hits}, misses={info.misses}, size={info.size}")

    _section(7, "Sorting")
    click.echo(f"Products by price: {sort_names_by_price(SAMPLE_PRODUCTS)}")

    _section(8, "Grouping")
    click.echo(f"Totals by customer: {group_totals_by_customer(SAMPLE_SALES)}")

    _section(9, "Pair/object conversion")
    obj = pairs_to_object(SAMPLE_PAIRS)
    click.echo(f"Pairs to object: {obj}")
    click.echo(f"Object to pairs: {object_to_pairs(obj)}")

    click.echo()
    click.echo("=== END OF DEMO ===")
    logger.info("Demo finished")
