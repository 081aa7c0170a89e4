"""UTILKIT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Checks that use real threads and timers.
- e2e/          : The ``utilkit`` CLI driven through Click's CliRunner.

General guidance
- Keep unit tests deterministic: inject guess sources, seeds and fake timers.
- Integration tests may sleep, but only for small multiples of a short delay.
"""
