"""
Shop Inventory Shell
====================
Interactive text menu for adding, searching, editing, removing and listing
stocked items.

Usage:
    shop-inventory [--allow-negative-price] [--no-negative-quantity]
                   [--capacity-hint N] [--currency CODE] [--log-level LEVEL]
"""

import argparse
import logging
import sys

from . import __version__
from .catalog import list_all
from .config import config
from .inventory import Inventory
from .models import Item
from .reports import print_stock_summary
from .utils import (
    InputValidationError,
    parse_category,
    parse_model_code,
    parse_price,
    parse_quantity
)
from .visualization import DEFAULT_CHART_FILE, save_stock_chart

logger = logging.getLogger(__name__)

INVALID_OPTION = "Invalid option selected. Please try again."

# ---
# MENUS
# ---
MAIN_MENU = [
    ('a', "Add Item"),
    ('s', "Search Item"),
    ('p', "List Product Categories"),
    ('l', "List Items in Stock"),
    ('v', "Stock Valuation Summary"),
    ('g', "Save Stock Chart"),
    ('q', "Quit"),
]

FOUND_ITEM_MENU = [
    ('r', "Remove Item"),
    ('e', "Edit Item"),
    ('q', "Quit"),
]


def print_menu(menu):
    for key, label in menu:
        print(f"({key}) {label}")


def prompt_until_valid(prompt, parser):
    """Asks again until the parser accepts the input."""
    while True:
        try:
            return parser(input(prompt))
        except InputValidationError as e:
            print(f"{e}. Please try again.")


# ---
# SHELL
# ---
class InventoryShell:
    """Menu loop driving a single in-memory inventory"""

    def __init__(self, inventory=None):
        self.inventory = inventory if inventory is not None else Inventory()

    def get_user_action(self, prompt="Select operation: "):
        return input(prompt).strip()

    def prompt_category(self, prompt="Select product category to add: "):
        while True:
            list_all()
            try:
                return parse_category(input(prompt))
            except InputValidationError:
                print(INVALID_OPTION)

    def handle_add_option(self):
        """Collects the fields of a new item. Only returns once all are valid."""
        category = self.prompt_category()
        model_code = prompt_until_valid("Enter model code: ", parse_model_code)
        price = prompt_until_valid("Enter price: ", parse_price)
        quantity = prompt_until_valid("Enter quantity: ", parse_quantity)
        return Item(category, model_code, price, quantity)

    def handle_search_option(self):
        """Search item by name or product category, then offer remove or edit."""
        opt = self.get_user_action("Search by (n) Name, (p) Product Category: ")

        if opt == 'n':
            model_code = input("Enter model name: ").strip()
            item = self.inventory.find_by_model_code(model_code)
        elif opt == 'p':
            list_all()
            try:
                category = parse_category(input("Select product id: "))
            except InputValidationError:
                print(INVALID_OPTION)
                return
            item = self.inventory.find_by_category(category)
        else:
            print(INVALID_OPTION)
            return

        if item is None:
            print("Item not found. Try adding an item.")
            return

        print(self.inventory.format_header())
        print(self.inventory.format_item(item))
        self.handle_found_item(item)

    def handle_found_item(self, item):
        while True:
            print_menu(FOUND_ITEM_MENU)
            opt = self.get_user_action()

            if opt == 'r':
                self.inventory.remove(item.item_id)
                print("Removed item\n")
                return
            elif opt == 'e':
                new_item = self.handle_add_option()
                # the replacement goes to the end of the list
                self.inventory.remove(item.item_id)
                self.inventory.add(new_item)
                print("Updated item\n")
                return
            elif opt == 'q':
                return
            else:
                print(INVALID_OPTION)

    def handle_chart_option(self):
        filename = input(f"Chart file [{DEFAULT_CHART_FILE}]: ").strip() or DEFAULT_CHART_FILE
        try:
            path = save_stock_chart(self.inventory, filename)
        except OSError as e:
            logger.error("Could not save chart to %s: %s", filename, e)
            print(f"Could not save chart: {e}")
            return
        print(f"Chart saved to {path}")

    def dispatch(self, opt):
        """
        Runs one main-menu command.

        Returns:
            bool: False once the operator asked to quit
        """
        if opt == 'a':
            self.inventory.add(self.handle_add_option())
            print("Added item\n")
        elif opt == 's':
            self.handle_search_option()
        elif opt == 'p':
            list_all()
        elif opt == 'l':
            self.inventory.list()
        elif opt == 'v':
            print_stock_summary(self.inventory)
        elif opt == 'g':
            self.handle_chart_option()
        elif opt == 'q':
            return False
        else:
            print(INVALID_OPTION)
        return True

    def run(self):
        print(f"Shop Inventory v{__version__}")
        try:
            while True:
                print_menu(MAIN_MENU)
                if not self.dispatch(self.get_user_action()):
                    break
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving the shell")
        print("\nExiting...")


# ---
# SETUP
# ---
def setup_logging(level="WARNING"):
    """Sends log records to stderr so they stay out of the menu output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    return logging.getLogger()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="shop-inventory",
                                     description="In-memory shop inventory manager.")
    parser.add_argument("--allow-negative-price", action="store_true",
                        help="accept prices below zero")
    parser.add_argument("--no-negative-quantity", action="store_true",
                        help="reject stock quantities below zero")
    parser.add_argument("--capacity-hint", type=int, default=config.capacity_hint,
                        help="expected number of items (default: %(default)s)")
    parser.add_argument("--currency", default=config.currency,
                        help="currency label for prices (default: %(default)s)")
    parser.add_argument("--log-level", default=config.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="logging level (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def apply_args(args, cfg=config):
    cfg.allow_negative_price = args.allow_negative_price
    cfg.allow_negative_quantity = not args.no_negative_quantity
    cfg.capacity_hint = args.capacity_hint
    cfg.currency = args.currency
    cfg.log_level = args.log_level
    return cfg


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    apply_args(args)
    setup_logging(config.log_level)
    logger.debug("Starting with %r", config)

    InventoryShell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
