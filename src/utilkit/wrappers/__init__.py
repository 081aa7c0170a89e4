"""Stateful call wrappers."""

from .debounce import Debounce, debounce
from .memoize import Memoizer, memoize

__all__ = ["Debounce", "Memoizer", "debounce", "memoize"]
