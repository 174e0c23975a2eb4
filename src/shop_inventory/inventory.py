"""
Inventory Module
================
Holds the inventory of all the stocked items in the store.

Items are kept in insertion order. Each item gets a surrogate key when it is
added, and removal and editing work by that key, so a search result stays
usable after other items are added or removed.
"""

import itertools
import logging

from .catalog import name_of
from .config import config

logger = logging.getLogger(__name__)

# Column widths of the item table
PRODUCT_WIDTH = 32
MODEL_CODE_WIDTH = 64
PRICE_WIDTH = 16
QTY_WIDTH = 8


class ItemNotFoundError(KeyError):
    """Raised when no item carries the requested key."""


class Inventory:
    """
    Ordered collection of stocked items.

    Attributes:
        items (list): Items in insertion order
        capacity_hint (int): Expected upper size, advisory only
    """

    def __init__(self, capacity_hint=None):
        self.items = []
        self.capacity_hint = config.capacity_hint if capacity_hint is None else capacity_hint
        self._ids = itertools.count(1)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __contains__(self, item_id):
        return any(item.item_id == item_id for item in self.items)

    def add(self, item):
        """
        Appends an item and assigns it a fresh key.

        Returns:
            int: The key of the added item
        """
        item.item_id = next(self._ids)
        self.items.append(item)
        logger.debug("Added %r", item)
        if len(self.items) > self.capacity_hint:
            logger.info("Inventory holds %d items, above the capacity hint of %d",
                        len(self.items), self.capacity_hint)
        return item.item_id

    def search(self, predicate):
        """
        Look for the first item for which the given predicate returns True.

        Returns:
            Item or None: The first match in sequence order
        """
        return next((item for item in self.items if predicate(item)), None)

    def find_by_model_code(self, model_code):
        return self.search(lambda item: item.model_code == model_code)

    def find_by_category(self, category):
        return self.search(lambda item: item.category == category)

    def _index_of(self, item_id):
        for index, item in enumerate(self.items):
            if item.item_id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def get(self, item_id):
        return self.items[self._index_of(item_id)]

    def remove(self, item_id):
        """
        Deletes the item with the given key. The other items keep their order.

        Returns:
            Item: The removed item

        Raises:
            ItemNotFoundError: If no item has this key
        """
        item = self.items.pop(self._index_of(item_id))
        logger.debug("Removed %r", item)
        return item

    def update(self, item_id, category, model_code, price, quantity):
        """Replaces the fields of an item in place, keeping its key and position."""
        item = self.get(item_id)
        item.category = category
        item.model_code = model_code
        item.price = price
        item.quantity = quantity
        logger.debug("Updated %r", item)
        return item

    def format_header(self):
        return (f"{'Product':>{PRODUCT_WIDTH}}"
                f"{'Model Code':>{MODEL_CODE_WIDTH}}"
                f"{'Price (' + config.currency + ')':>{PRICE_WIDTH}}"
                f"{'Qty.':>{QTY_WIDTH}}")

    @staticmethod
    def format_item(item):
        return (f"{name_of(item.category):>{PRODUCT_WIDTH}}"
                f"{item.model_code:>{MODEL_CODE_WIDTH}}"
                f"{item.price:>{PRICE_WIDTH}.2f}"
                f"{item.quantity:>{QTY_WIDTH}d}")

    def format_rows(self):
        """Header followed by one fixed-width row per item."""
        return [self.format_header()] + [self.format_item(item) for item in self.items]

    def list(self):
        """Prints a table listing currently stocked items in the inventory."""
        for line in self.format_rows():
            print(line)
        print("-" * 15)
