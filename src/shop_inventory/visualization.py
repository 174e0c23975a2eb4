"""
Visualization Module
====================
Bar chart of units in stock per product category.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .catalog import categories, name_of

DEFAULT_CHART_FILE = "stock_by_category.png"


def units_by_category(inventory):
    """Units in stock for every catalog category, zero when absent."""
    units = {category: 0 for category in categories()}
    for item in inventory:
        units[item.category] += item.quantity
    return units


def save_stock_chart(inventory, filename=DEFAULT_CHART_FILE):
    """
    Draws units in stock per category and saves the figure.

    Args:
        inventory (Inventory): Inventory to plot
        filename (str): Output image path

    Returns:
        str: The path the chart was written to
    """
    units = units_by_category(inventory)
    names = [name_of(category) for category in units]
    values = list(units.values())

    fig = plt.figure(figsize=(10, 5))
    bars = plt.bar(names, values, color='skyblue')
    for bar, value in zip(bars, values):
        if value < 0:
            bar.set_color('orange')
    plt.title("Units in Stock by Product Category")
    plt.ylabel("Units")
    plt.xticks(rotation=45, ha='right')
    plt.grid(True, axis='y', alpha=0.4)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close(fig)
    return filename
