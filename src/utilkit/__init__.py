"""UTILKIT

A small collection of general-purpose utilities: calendar date validation,
a guess-and-check simulation, order-preserving word de-duplication,
factorial, call debouncing, memoization, and record/mapping transforms.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
