"""
Utility Functions Module
=========================
Parse-and-validate helpers for the fields an operator types in.

Each parser returns a typed value or raises a specific InputValidationError
subclass, so callers can report the failure and ask again.
"""

import logging

import numpy as np

from .catalog import from_index
from .config import config

logger = logging.getLogger(__name__)


class InputValidationError(ValueError):
    """Base class for rejected operator input."""


class EmptyFieldError(InputValidationError):
    pass


class NotANumberError(InputValidationError):
    pass


class NegativeValueError(InputValidationError):
    pass


class InvalidCategoryError(InputValidationError):
    pass


def _to_number(convert, text):
    """
    Applies int or float to operator input. A leading sign is accepted,
    digit-group underscores are not.
    """
    if "_" in text:
        raise ValueError(text)
    return convert(text)


def parse_category(text):
    """
    Parses a category index as printed by the product list.

    Args:
        text (str): Raw operator input

    Returns:
        Product: The selected category

    Raises:
        NotANumberError: If the input is not a whole number
        InvalidCategoryError: If the number is outside the catalog
    """
    text = text.strip()
    try:
        index = _to_number(int, text)
    except ValueError:
        logger.debug("Rejected category input %r", text)
        raise NotANumberError(f"'{text}' is not a category number") from None
    try:
        return from_index(index)
    except ValueError:
        logger.debug("Rejected category index %d", index)
        raise InvalidCategoryError(f"{index} is not in the product list") from None


def parse_model_code(text):
    """Returns the trimmed model code, rejecting blank input."""
    code = text.strip()
    if not code:
        raise EmptyFieldError("Model code cannot be empty")
    return code


def parse_price(text, allow_negative=None):
    """
    Parses a unit price.

    Args:
        text (str): Raw operator input
        allow_negative (bool): Overrides config.allow_negative_price when given

    Returns:
        float: The price

    Raises:
        NotANumberError: If the input is not a finite number
        NegativeValueError: If the price is negative and the policy forbids it
    """
    if allow_negative is None:
        allow_negative = config.allow_negative_price

    text = text.strip()
    try:
        price = _to_number(float, text)
    except ValueError:
        logger.debug("Rejected price input %r", text)
        raise NotANumberError(f"'{text}' is not a valid price") from None
    # float() accepts "nan" and "inf"
    if not np.isfinite(price):
        raise NotANumberError(f"'{text}' is not a valid price")
    if price < 0 and not allow_negative:
        raise NegativeValueError("Price cannot be negative")
    return price


def parse_quantity(text, allow_negative=None):
    """
    Parses a stock quantity.

    Args:
        text (str): Raw operator input
        allow_negative (bool): Overrides config.allow_negative_quantity when given

    Returns:
        int: The quantity

    Raises:
        NotANumberError: If the input is not a whole number
        NegativeValueError: If the quantity is negative and the policy forbids it
    """
    if allow_negative is None:
        allow_negative = config.allow_negative_quantity

    text = text.strip()
    try:
        quantity = _to_number(int, text)
    except ValueError:
        logger.debug("Rejected quantity input %r", text)
        raise NotANumberError(f"'{text}' is not a whole number") from None
    if quantity < 0 and not allow_negative:
        raise NegativeValueError("Quantity cannot be negative")
    return quantity
