"""
Shop Inventory Package
======================
In-memory inventory manager for a clothing store, driven from a text menu.

Modules:
    catalog - Product categories and their display names
    models - Data models (Item class)
    inventory - Ordered item store with surrogate keys
    utils - Parse-and-validate helpers for operator input
    reports - Stock valuation summary
    visualization - Stock chart per category
    config - Runtime settings

Entry Point:
    shell - Interactive menu (also `python -m shop_inventory`)
"""

__version__ = "0.1.0"

from .catalog import Product, is_valid, name_of, list_all
from .config import Config, config
from .inventory import Inventory, ItemNotFoundError
from .models import Item
from .utils import (
    InputValidationError,
    EmptyFieldError,
    NotANumberError,
    NegativeValueError,
    InvalidCategoryError,
    parse_category,
    parse_model_code,
    parse_price,
    parse_quantity
)

__all__ = [
    'Product',
    'is_valid',
    'name_of',
    'list_all',
    'Config',
    'config',
    'Inventory',
    'ItemNotFoundError',
    'Item',
    'InputValidationError',
    'EmptyFieldError',
    'NotANumberError',
    'NegativeValueError',
    'InvalidCategoryError',
    'parse_category',
    'parse_model_code',
    'parse_price',
    'parse_quantity',
]
