"""Conversion between key/value pair sequences and mappings.

``object_to_pairs(pairs_to_object(pairs))`` keeps every association of a
duplicate-free `pairs`, in the same order, because dicts preserve insertion
order. With duplicate keys the later value wins and the key keeps the
position of its first occurrence.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from utilkit.errors import InvalidArgumentError


def pairs_to_object(pairs: Iterable[Sequence[Any]]) -> dict[str, Any]:
    """Build a dict from ``(key, value)`` pairs.

    Keys are converted with ``str()``. Later pairs overwrite earlier ones
    with the same key.

    Raises:
        InvalidArgumentError: If an item is not a two-element sequence.
    """
    obj: dict[str, Any] = {}
    for index, pair in enumerate(pairs):
        if isinstance(pair, (str, bytes)) or len(pair) != 2:
            raise InvalidArgumentError(
                f"pairs[{index}]", pair, "expected a (key, value) pair"
            )
        key, value = pair
        obj[str(key)] = value
    return obj


def object_to_pairs(obj: Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    """Return the ``(key, value)`` pairs of `obj` in its iteration order."""
    return list(obj.items())
