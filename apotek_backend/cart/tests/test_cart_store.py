# cart/tests/test_cart_store.py

"""
CART STORE TESTS

GUARANTEES:
- one line per product; re-adding sums quantities
- set_quantity(id, 0) behaves exactly like remove_item(id)
- subtotal == sum(unit_price * quantity)
- every mutation is persisted; unreadable storage loads as an empty cart
"""

from __future__ import annotations

import json
from decimal import Decimal
from types import SimpleNamespace

from django.test import SimpleTestCase

from cart.services.cart_store import (
    CART_STORAGE_KEY,
    MAX_LINE_QUANTITY,
    AddItem,
    CartLine,
    CartStore,
    Clear,
    RemoveItem,
    SetQuantity,
    apply_command,
)
from cart.services.storage import MemoryStorage


def _line(product_id=1, unit_price="15000", quantity=1, **kwargs) -> CartLine:
    return CartLine(
        product_id=product_id,
        name=kwargs.pop("name", f"Produk {product_id}"),
        unit_price=Decimal(unit_price),
        quantity=quantity,
        **kwargs,
    )


def _product(**overrides):
    data = {
        "id": 7,
        "name": "Vitamin C 1000mg",
        "price": Decimal("18000"),
        "discount_price": Decimal("15000"),
        "media_url": "https://cdn.example.com/vitc.jpg",
        "unit": "botol",
        "stock": 30,
        "primary_category": "Vitamin & Suplemen",
    }
    data.update(overrides)
    return SimpleNamespace(**data)


class FailingStorage(MemoryStorage):
    def write(self, key, value):
        return False


class ApplyCommandTests(SimpleTestCase):
    def test_repeated_add_sums_into_one_line(self):
        lines = ()
        lines = apply_command(lines, AddItem(_line(1, quantity=2)))
        lines = apply_command(lines, AddItem(_line(1, quantity=3)))

        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].quantity, 5)

    def test_add_keeps_existing_snapshot(self):
        lines = apply_command((), AddItem(_line(1, unit_price="15000")))
        lines = apply_command(lines, AddItem(_line(1, unit_price="99999", name="Renamed")))

        self.assertEqual(lines[0].unit_price, Decimal("15000"))
        self.assertEqual(lines[0].name, "Produk 1")

    def test_set_quantity_zero_equals_remove(self):
        start = (_line(1, quantity=2), _line(2, quantity=1))

        self.assertEqual(
            apply_command(start, SetQuantity(1, 0)),
            apply_command(start, RemoveItem(1)),
        )
        self.assertEqual(
            apply_command(start, SetQuantity(1, -3)),
            apply_command(start, RemoveItem(1)),
        )

    def test_set_quantity_replaces_and_ignores_missing(self):
        start = (_line(1, quantity=2),)

        self.assertEqual(apply_command(start, SetQuantity(1, 9))[0].quantity, 9)
        self.assertEqual(apply_command(start, SetQuantity(42, 9)), start)

    def test_remove_and_clear(self):
        start = (_line(1), _line(2))

        self.assertEqual([l.product_id for l in apply_command(start, RemoveItem(1))], [2])
        self.assertEqual(apply_command(start, RemoveItem(3)), start)
        self.assertEqual(apply_command(start, Clear()), ())

    def test_non_positive_lines_never_survive(self):
        lines = apply_command((), AddItem(_line(1, quantity=0)))
        self.assertEqual(lines, ())

    def test_input_is_not_mutated(self):
        start = (_line(1, quantity=1),)
        apply_command(start, AddItem(_line(1, quantity=1)))
        self.assertEqual(start[0].quantity, 1)


class CartStoreTests(SimpleTestCase):
    def setUp(self):
        self.storage = MemoryStorage()
        self.store = CartStore(self.storage)
        self.store.load()

    def _persisted(self):
        return json.loads(self.storage.read(CART_STORAGE_KEY))

    def test_add_item_snapshots_effective_price(self):
        self.store.add_item(_product(), 2)

        line = self.store.find_line(7)
        self.assertEqual(line.unit_price, Decimal("15000.00"))
        self.assertEqual(line.list_price, Decimal("18000.00"))
        self.assertEqual(line.category, "Vitamin & Suplemen")
        self.assertEqual(self.store.item_count(), 2)
        self.assertTrue(self.store.is_in_cart(7))
        self.assertFalse(self.store.is_in_cart(8))

    def test_subtotal_is_sum_of_line_totals(self):
        self.store.add_item(_product(id=1, price=Decimal("15000"), discount_price=None), 3)
        self.store.add_item(_product(id=2, price=Decimal("2500"), discount_price=None), 2)

        self.assertEqual(self.store.subtotal(), Decimal("50000.00"))
        self.assertEqual(self.store.item_count(), 5)

    def test_every_mutation_is_persisted(self):
        self.store.add_item(_product(), 1)
        self.assertEqual(self._persisted()[0]["quantity"], 1)

        self.store.set_quantity(7, 4)
        self.assertEqual(self._persisted()[0]["quantity"], 4)

        self.store.remove_item(7)
        self.assertEqual(self._persisted(), [])

    def test_persisted_cart_reloads(self):
        self.store.add_item(_product(), 2)

        reloaded = CartStore(self.storage)
        reloaded.load()

        self.assertEqual(reloaded.lines, self.store.lines)

    def test_missing_or_corrupt_storage_loads_empty(self):
        oversized = json.dumps([{"id": 1, "name": "X", "price": "10000", "quantity": MAX_LINE_QUANTITY + 1}])
        for payload in (None, "not json", '{"id": 1}', '[{"id": 1, "quantity": "two"}]', oversized):
            storage = MemoryStorage() if payload is None else MemoryStorage({CART_STORAGE_KEY: payload})
            store = CartStore(storage)
            with self.subTest(payload=payload):
                self.assertEqual(store.load(), ())

    def test_failed_write_keeps_in_memory_state(self):
        store = CartStore(FailingStorage())
        store.load()
        store.add_item(_product(), 1)

        self.assertFalse(store.last_write_ok)
        self.assertEqual(store.item_count(), 1)
