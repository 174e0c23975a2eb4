"""
Reports Module
==============
Stock valuation summary per product category.
"""

import numpy as np

from .catalog import categories, name_of
from .config import config


def stock_summary(inventory):
    """
    Aggregates the inventory by category.

    Args:
        inventory (Inventory): Inventory to summarise

    Returns:
        list: One dict per category that has items, in catalog order, with
              keys 'category', 'items', 'units' and 'value'
    """
    if len(inventory) == 0:
        return []

    category_ids = np.array([int(item.category) for item in inventory])
    prices = np.array([item.price for item in inventory], dtype=float)
    quantities = np.array([item.quantity for item in inventory], dtype=int)

    summary = []
    for category in categories():
        mask = category_ids == int(category)
        if not mask.any():
            continue
        summary.append({
            'category': name_of(category),
            'items': int(mask.sum()),
            'units': int(quantities[mask].sum()),
            'value': float(np.dot(prices[mask], quantities[mask]))
        })
    return summary


def total_stock_value(inventory):
    """Sum of price x quantity over every item."""
    if len(inventory) == 0:
        return 0.0
    prices = np.array([item.price for item in inventory], dtype=float)
    quantities = np.array([item.quantity for item in inventory], dtype=int)
    return float(np.dot(prices, quantities))


def print_stock_summary(inventory):
    """Prints the per-category valuation table and the overall total."""
    summary = stock_summary(inventory)

    value_header = f"Value ({config.currency})"
    print(f"{'Product':>32}{'Items':>8}{'Units':>10}{value_header:>16}")
    for row in summary:
        print(f"{row['category']:>32}{row['items']:>8d}{row['units']:>10d}{row['value']:>16.2f}")
    print("-" * 66)
    print(f"{'Total':>32}{len(inventory):>8d}"
          f"{sum(row['units'] for row in summary):>10d}"
          f"{total_stock_value(inventory):>16.2f}")
