"""Unit tests.

No real timers or threads except where a test is about thread safety; use
fakes at the boundaries and keep tests small and deterministic.
"""
