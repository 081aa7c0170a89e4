"""Transforms over collections of mapping records.

Records are plain mappings such as ``{"name": "Mouse", "price": 50}``.
Input collections are never mutated.
"""

from collections.abc import Hashable, Iterable, Mapping
from typing import Any


def sort_names_by_price(
    products: Iterable[Mapping[str, Any]],
    *,
    price_key: str = "price",
    name_key: str = "name",
) -> list[Any]:
    """Return product names ordered by ascending price.

    The sort is stable: products with equal prices keep their input order.

    Args:
        products: Records with a numeric `price_key` and a `name_key` field.
        price_key: Field to sort by.
        name_key: Field to project.

    Returns:
        list: The `name_key` values in price order.

    Example:
        >>> sort_names_by_price([{"name": "A", "price": 2}, {"name": "B", "price": 1}])
        ['B', 'A']
    """
    return [p[name_key] for p in sorted(products, key=lambda p: p[price_key])]


def group_totals_by_customer(
    sales: Iterable[Mapping[str, Any]],
    *,
    group_key: str = "customer",
    total_key: str = "total",
) -> dict[Hashable, Any]:
    """Sum sale totals per customer.

    Customers appear in the result in the order they are first seen.

    Args:
        sales: Records with a `group_key` field and a numeric `total_key`.
        group_key: Field to group by.
        total_key: Field to sum.

    Returns:
        dict: customer -> sum of totals.
    """
    totals: dict[Hashable, Any] = {}
    for sale in sales:
        customer = sale[group_key]
        if customer in totals:
            totals[customer] += sale[total_key]
        else:
            totals[customer] = sale[total_key]
    return totals
