"""
Catalog Module
==============
The fixed list of product categories stocked in the store.
"""

from enum import IntEnum


class Product(IntEnum):
    """Product categories. INVALID and COUNT bound the valid range."""
    INVALID = -1
    DRESSES = 0
    CROP_TOPS = 1
    SWEATSHIRTS_HOODIES = 2
    BLOUSES = 3
    SKIRTS = 4
    SHORTS = 5
    JEANS = 6
    MATCHING_SETS = 7
    SWIMWEAR = 8
    ACCESSORIES = 9
    COUNT = 10


PRODUCT_NAMES = {
    Product.DRESSES: "Dresses",
    Product.CROP_TOPS: "Crop Tops",
    Product.SWEATSHIRTS_HOODIES: "Sweatshirts & Hoodies",
    Product.BLOUSES: "Blouses",
    Product.SKIRTS: "Skirts",
    Product.SHORTS: "Shorts",
    Product.JEANS: "Jeans",
    # written as two words, like the other multi-word labels
    Product.MATCHING_SETS: "Matching Sets",
    Product.SWIMWEAR: "Swimwear",
    Product.ACCESSORIES: "Accessories",
}


def is_valid(category):
    """
    Checks whether the given value names a real product category.

    Args:
        category (Product or int): Category identifier

    Returns:
        bool: True iff INVALID < category < COUNT
    """
    # bool is an int subclass but never a category
    if isinstance(category, bool) or not isinstance(category, int):
        return False
    return Product.INVALID < category < Product.COUNT


def name_of(category):
    """Return the display name of a category, or "" for an invalid one."""
    if not is_valid(category):
        return ""
    return PRODUCT_NAMES[Product(category)]


def categories():
    """All valid categories in declaration order."""
    return [Product(i) for i in range(Product.DRESSES, Product.COUNT)]


def from_index(value):
    """
    Converts a zero-based index from the printed product list to a Product.

    Raises:
        ValueError: If the index is outside the catalog
    """
    if not is_valid(value):
        raise ValueError(f"No product category with index {value!r}")
    return Product(value)


def list_all():
    """Prints the indexed list of product categories."""
    print("Product list: ")
    for category in categories():
        print(f"({int(category)}) {name_of(category)}")
    print("-" * 15)
