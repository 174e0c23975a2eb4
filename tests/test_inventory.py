import io
import os
import sys
import unittest
from unittest.mock import patch

# Add src directory to Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

from shop_inventory.catalog import Product
from shop_inventory.inventory import Inventory, ItemNotFoundError
from shop_inventory.models import Item


def model_codes(inventory):
    return [item.model_code for item in inventory]


class TestInventory(unittest.TestCase):

    def setUp(self):
        self.inventory = Inventory()

    def test_list_keeps_insertion_order(self):
        for code in ["A", "B", "C", "D"]:
            self.inventory.add(Item(Product.JEANS, code, 30.0, 1))

        self.assertEqual(model_codes(self.inventory), ["A", "B", "C", "D"])
        rows = self.inventory.format_rows()[1:]
        self.assertEqual([row.split()[1] for row in rows], ["A", "B", "C", "D"])

    def test_keys_are_monotonic_and_never_reused(self):
        first = self.inventory.add(Item(Product.DRESSES, "A", 10.0, 1))
        second = self.inventory.add(Item(Product.DRESSES, "B", 10.0, 1))
        self.inventory.remove(second)
        third = self.inventory.add(Item(Product.DRESSES, "C", 10.0, 1))

        self.assertEqual((first, second, third), (1, 2, 3))
        self.assertIn(first, self.inventory)
        self.assertNotIn(second, self.inventory)

    def test_search_returns_first_match_or_none(self):
        self.inventory.add(Item(Product.SKIRTS, "SK-1", 10.0, 1))
        self.inventory.add(Item(Product.SHORTS, "SH-1", 12.0, 2))
        self.inventory.add(Item(Product.SHORTS, "SH-2", 14.0, 3))

        self.assertEqual(self.inventory.find_by_model_code("SH-2").price, 14.0)
        self.assertEqual(self.inventory.find_by_category(Product.SHORTS).model_code, "SH-1")
        self.assertIsNone(self.inventory.find_by_model_code("sh-2"))
        self.assertIsNone(self.inventory.find_by_category(Product.SWIMWEAR))
        self.assertIsNone(self.inventory.search(lambda item: item.quantity > 5))

    def test_remove_only_drops_the_located_item(self):
        for code in ["A", "B", "C", "D"]:
            self.inventory.add(Item(Product.BLOUSES, code, 20.0, 1))

        found = self.inventory.find_by_model_code("B")
        removed = self.inventory.remove(found.item_id)

        self.assertIs(removed, found)
        self.assertEqual(len(self.inventory), 3)
        self.assertEqual(model_codes(self.inventory), ["A", "C", "D"])

    def test_search_result_survives_other_mutations(self):
        self.inventory.add(Item(Product.BLOUSES, "A", 20.0, 1))
        self.inventory.add(Item(Product.BLOUSES, "B", 20.0, 1))
        found = self.inventory.find_by_model_code("B")

        self.inventory.remove(self.inventory.find_by_model_code("A").item_id)
        self.inventory.add(Item(Product.BLOUSES, "C", 20.0, 1))
        self.inventory.remove(found.item_id)

        self.assertEqual(model_codes(self.inventory), ["C"])

    def test_removing_twice_raises(self):
        item_id = self.inventory.add(Item(Product.SWIMWEAR, "SW-1", 15.0, 4))
        self.inventory.remove(item_id)

        with self.assertRaises(ItemNotFoundError):
            self.inventory.remove(item_id)
        with self.assertRaises(KeyError):
            self.inventory.get(item_id)

    def test_update_is_in_place(self):
        for code in ["A", "B", "C"]:
            self.inventory.add(Item(Product.JEANS, code, 40.0, 2))
        target = self.inventory.find_by_model_code("B")

        updated = self.inventory.update(target.item_id, Product.SHORTS, "B2", 25.5, 9)

        self.assertEqual(model_codes(self.inventory), ["A", "B2", "C"])
        self.assertEqual(updated.item_id, target.item_id)
        self.assertEqual(updated.category, Product.SHORTS)
        self.assertEqual(updated.price, 25.5)
        self.assertEqual(updated.quantity, 9)
        self.assertIsNone(self.inventory.find_by_model_code("B"))

    def test_remove_then_add_moves_replacement_to_end(self):
        for code in ["X", "M", "Z"]:
            self.inventory.add(Item(Product.JEANS, code, 40.0, 2))

        self.inventory.remove(self.inventory.find_by_model_code("X").item_id)
        self.inventory.add(Item(Product.JEANS, "Y", 41.0, 3))

        self.assertEqual(model_codes(self.inventory), ["M", "Z", "Y"])

    def test_duplicate_model_codes(self):
        first_id = self.inventory.add(Item(Product.DRESSES, "DUP", 10.0, 1))
        second_id = self.inventory.add(Item(Product.ACCESSORIES, "DUP", 5.0, 7))

        found = self.inventory.find_by_model_code("DUP")
        self.assertEqual(found.item_id, first_id)

        self.inventory.remove(found.item_id)
        self.assertEqual(self.inventory.find_by_model_code("DUP").item_id, second_id)

    def test_capacity_hint_is_advisory(self):
        inventory = Inventory(capacity_hint=2)
        inventory.add(Item(Product.DRESSES, "A", 1.0, 1))
        inventory.add(Item(Product.DRESSES, "B", 1.0, 1))

        with self.assertLogs('shop_inventory.inventory', level='INFO') as logs:
            inventory.add(Item(Product.DRESSES, "C", 1.0, 1))

        self.assertEqual(len(inventory), 3)
        self.assertIn("capacity hint", logs.output[0])

    def test_row_format(self):
        self.inventory.add(Item(Product.SKIRTS, "SK-100", 24.99, 12))

        header, row = self.inventory.format_rows()
        self.assertEqual(header.split(), ["Product", "Model", "Code", "Price", "(GBP)", "Qty."])
        self.assertEqual(row.split(), ["Skirts", "SK-100", "24.99", "12"])
        self.assertEqual(len(row), 32 + 64 + 16 + 8)
        self.assertTrue(row.endswith("  24.99      12"))

    def test_price_is_rounded_to_two_decimals(self):
        self.inventory.add(Item(Product.CROP_TOPS, "CT-1", 9.999, 3))

        row = self.inventory.format_rows()[1]
        self.assertEqual(row.split()[-2:], ["10.00", "3"])
        self.assertTrue(row.startswith(" " * (32 - len("Crop Tops")) + "Crop Tops"))

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_list_prints_header_rows_and_separator(self, mock_stdout):
        self.inventory.add(Item(Product.SKIRTS, "SK-100", 24.99, 12))

        self.inventory.list()

        lines = mock_stdout.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("Model Code", lines[0])
        self.assertEqual(lines[2], "---------------")

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_list_empty_inventory(self, mock_stdout):
        self.inventory.list()

        lines = mock_stdout.getvalue().splitlines()
        self.assertEqual(len(lines), 2)


class TestEndToEnd(unittest.TestCase):

    def test_add_find_remove_skirt(self):
        inventory = Inventory()
        inventory.add(Item(Product.SKIRTS, "SK-100", 24.99, 12))
        self.assertEqual(inventory.format_rows()[1].split(), ["Skirts", "SK-100", "24.99", "12"])

        found = inventory.find_by_model_code("SK-100")
        self.assertIsNotNone(found)
        inventory.remove(found.item_id)

        self.assertEqual(len(inventory), 0)
        self.assertEqual(len(inventory.format_rows()), 1)


if __name__ == '__main__':
    unittest.main()
