"""Global pytest configuration for UTILKIT.

Every test is marked after the top-level folder it lives in (`unit`,
`integration` or `e2e`) unless it already carries that mark.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
LAYERS = ("unit", "integration", "e2e")


def pytest_configure(config: pytest.Config) -> None:
    """Register the layer and property markers."""
    for layer in LAYERS:
        config.addinivalue_line("markers", f"{layer}: tests under tests/{layer}/")
    config.addinivalue_line("markers", "property: hypothesis property tests")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default layer mark to each collected item."""
    for item in items:
        path = item.path.resolve()
        for layer in LAYERS:
            if TESTS_ROOT / layer in path.parents:
                if not any(marker.name == layer for marker in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, layer))
                break
