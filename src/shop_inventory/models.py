"""
Models Module
=============
Contains the data model for a stocked item.
"""

from .catalog import name_of


class Item:
    """
    Represents a stocked item belonging to one of the product categories.

    Attributes:
        category (Product): Product category the item falls into
        model_code (str): Model code, used as the item's name for search
        price (float): Unit price
        quantity (int): Units in stock
        item_id (int or None): Surrogate key, assigned when added to an inventory
    """

    def __init__(self, category, model_code, price, quantity, item_id=None):
        self.category = category
        self.model_code = model_code
        self.price = price
        self.quantity = quantity
        self.item_id = item_id

    def __repr__(self):
        return (f"Item {self.item_id} ({name_of(self.category)}): "
                f"{self.model_code}, Price={self.price:.2f}, Qty={self.quantity}")
