"""Entrypoints for UTILKIT.

Expose the library to the outside world through the ``utilkit`` CLI. Parse
and validate inputs, call the library functions, and present results.
"""
