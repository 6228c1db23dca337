# tests/test_product_model.py

"""Tests for the ProductSummary / ProductDetail value objects."""

import dataclasses
import unittest

from shopsearch.models.product import (
    ProductDetail,
    ProductSummary,
    Specification,
)


class TestProductSummary(unittest.TestCase):
    """ProductSummary wire form and immutability."""

    def test_to_dict_uses_camel_case_product_id(self) -> None:
        """productId is emitted under its camelCase key."""
        summary = ProductSummary(
            id="42", name="Laptop", price=10.5, seller="Shop",
            image="https://img/1.jpg", product_id="42",
        )
        self.assertEqual(
            summary.to_dict(),
            {
                "id": "42",
                "name": "Laptop",
                "price": 10.5,
                "seller": "Shop",
                "image": "https://img/1.jpg",
                "productId": "42",
            },
        )

    def test_to_dict_omits_missing_product_id(self) -> None:
        """Items without an upstream id carry no productId key."""
        summary = ProductSummary(id="3", name="Laptop")
        self.assertNotIn("productId", summary.to_dict())

    def test_from_dict_restores_summary(self) -> None:
        """from_dict reads the same wire form back."""
        original = ProductSummary(
            id="7", name="Mouse", price=9.99, seller="A",
            image="x", product_id="7",
        )
        self.assertEqual(
            ProductSummary.from_dict(original.to_dict()), original
        )

    def test_frozen(self) -> None:
        """Summaries cannot be mutated after construction."""
        summary = ProductSummary(id="1", name="A")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            summary.name = "B"  # type: ignore[misc]


class TestProductDetail(unittest.TestCase):
    """ProductDetail wire form."""

    def test_to_dict_keys(self) -> None:
        """The wire form keeps totalPrice and {key, value} specs."""
        detail = ProductDetail(
            id="1",
            name="Laptop",
            total_price=12.0,
            extensions=("8 GB RAM",),
            specifications=(Specification("CPU", "Ryzen"),),
        )
        data = detail.to_dict()
        self.assertEqual(data["totalPrice"], 12.0)
        self.assertEqual(data["extensions"], ["8 GB RAM"])
        self.assertEqual(
            data["specifications"], [{"key": "CPU", "value": "Ryzen"}]
        )

    def test_from_dict_restores_tuples(self) -> None:
        """Lists in the wire form come back as tuples."""
        detail = ProductDetail.from_dict(
            {
                "id": "1",
                "name": "Laptop",
                "extensions": ["a", "b"],
                "specifications": [{"key": "k", "value": "v"}],
            }
        )
        self.assertEqual(detail.extensions, ("a", "b"))
        self.assertEqual(detail.specifications, (Specification("k", "v"),))
        self.assertEqual(detail.price, 0.0)


if __name__ == "__main__":
    unittest.main()
