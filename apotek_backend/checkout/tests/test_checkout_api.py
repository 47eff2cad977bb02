# checkout/tests/test_checkout_api.py

from decimal import Decimal
from unittest import mock

from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from checkout.models import Order
from checkout.services.exceptions import OrderPersistenceError
from products.models import Product


class CheckoutApiTestBase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.product = Product.objects.create(
            name="Paracetamol 500mg",
            price=Decimal("15000"),
            stock=50,
            unit="strip",
        )
        self.other = Product.objects.create(name="Vitamin C", price=Decimal("18000"), stock=10)

    def add_to_cart(self, product, quantity):
        res = self.client.post(
            reverse("cart-items"),
            {"product_id": product.id, "quantity": quantity},
            format="json",
        )
        self.assertEqual(res.status_code, 201)

    def cart(self):
        return self.client.get(reverse("cart")).data

    def submit(self, **payload):
        data = {"customer_name": "Budi", "area_name": "Widoro", "delivery_option_id": "secepatnya"}
        data.update(payload)
        return self.client.post(reverse("public-checkout"), data, format="json")


class CheckoutFlowTests(CheckoutApiTestBase):
    def test_end_to_end_totals(self):
        self.add_to_cart(self.product, 3)
        self.assertEqual(self.cart()["subtotal"], "45000.00")

        quote_url = reverse("public-checkout-quote")
        res = self.client.post(quote_url, {"area_name": "Krandegan", "delivery_option_id": "regular"}, format="json")
        self.assertEqual(res.data["total"], "45000.00")

        res = self.client.post(quote_url, {"area_name": "Widoro", "delivery_option_id": "secepatnya"}, format="json")
        self.assertEqual(res.data["delivery_fee"], "12000.00")
        self.assertEqual(res.data["total"], "57000.00")
        self.assertEqual(res.data["fee_label"], "Biaya Express")

        res = self.submit()

        self.assertEqual(res.status_code, 201)
        self.assertFalse(res.data["replayed"])
        self.assertEqual(res.data["order"]["total"], "57000.00")
        self.assertIn("Total: Rp 57.000", res.data["message"])
        self.assertEqual(res.data["dispatch"]["channel"], "whatsapp")

        order = Order.objects.get()
        self.assertEqual(order.order_no, res.data["order"]["order_no"])
        self.assertEqual(order.total_amount, Decimal("57000.00"))
        self.assertEqual(order.status, Order.Status.PENDING)
        self.assertEqual(order.lines_snapshot[0]["quantity"], 3)

        self.assertEqual(self.cart()["items"], [])

    def test_submit_records_history(self):
        self.add_to_cart(self.product, 1)
        self.submit(customer_name="  Siti ")

        res = self.client.get(reverse("public-checkout-history"))
        self.assertEqual(res.data, {"names": ["Siti"], "areas": ["Widoro"]})

    def test_empty_cart(self):
        res = self.submit()

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "empty_cart")
        self.assertFalse(Order.objects.exists())

    def test_missing_name_keeps_cart(self):
        self.add_to_cart(self.product, 1)
        self.add_to_cart(self.other, 1)

        res = self.submit(customer_name="")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "validation_error")
        self.assertEqual(res.data["error"]["message"], "Nama wajib diisi")
        self.assertIn("customer_name", res.data["error"]["fields"])
        self.assertEqual(len(self.cart()["items"]), 2)
        self.assertFalse(Order.objects.exists())

    def test_unknown_area_is_rejected(self):
        self.add_to_cart(self.product, 1)

        res = self.submit(area_name="Atlantis")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["fields"], {"area_name": "Pilih daerah tujuan"})

    @override_settings(EXPRESS_DELIVERY_ENABLED=False)
    def test_express_disabled_falls_back_to_regular(self):
        self.add_to_cart(self.product, 3)

        res = self.submit()

        self.assertEqual(res.status_code, 201)
        order = Order.objects.get()
        self.assertEqual(order.delivery_option, "regular")
        self.assertEqual(order.delivery_fee, Decimal("8000.00"))
        self.assertEqual(order.total_amount, Decimal("53000.00"))

    def test_persistence_failure_returns_503_and_keeps_cart(self):
        self.add_to_cart(self.product, 2)

        with mock.patch(
            "checkout.views.api.DatabaseOrderLog.append",
            side_effect=OrderPersistenceError("Pesanan gagal disimpan, silakan coba lagi"),
        ):
            res = self.submit()

        self.assertEqual(res.status_code, 503)
        self.assertEqual(res.data["error"]["code"], "order_persistence_failed")
        self.assertEqual(self.cart()["item_count"], 2)

    def test_idempotent_replay(self):
        self.add_to_cart(self.product, 1)
        first = self.submit(idempotency_key="k-1")

        second = self.submit(idempotency_key="k-1")

        self.assertEqual(second.status_code, 200)
        self.assertTrue(second.data["replayed"])
        self.assertEqual(second.data["order"]["order_no"], first.data["order"]["order_no"])
        self.assertEqual(second.data["message"], first.data["message"])
        self.assertEqual(Order.objects.count(), 1)

    def test_idempotency_key_from_another_visitor_is_not_replayed(self):
        self.add_to_cart(self.product, 1)
        self.submit(customer_name="Alice", notes="Rumah nomor 7", idempotency_key="shared")

        stranger = APIClient()
        res = stranger.post(
            reverse("public-checkout"),
            {"customer_name": "Bob", "area_name": "Melis", "idempotency_key": "shared"},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "empty_cart")
        self.assertNotIn("Alice", str(res.data))

        stranger.post(reverse("cart-items"), {"product_id": self.other.id, "quantity": 1}, format="json")
        res = stranger.post(
            reverse("public-checkout"),
            {"customer_name": "Bob", "area_name": "Melis", "idempotency_key": "shared"},
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        self.assertFalse(res.data["replayed"])
        self.assertEqual(res.data["order"]["customer"]["customer_name"], "Bob")
        self.assertEqual(Order.objects.count(), 2)

    def test_reused_key_with_changed_cart_keeps_cart(self):
        self.add_to_cart(self.product, 1)
        self.submit(idempotency_key="k")

        self.add_to_cart(self.other, 3)
        res = self.submit(idempotency_key="k")

        self.assertEqual(res.status_code, 409)
        self.assertEqual(res.data["error"]["code"], "idempotency_conflict")
        self.assertEqual(self.cart()["item_count"], 3)
        self.assertEqual(Order.objects.count(), 1)

    def test_total_too_large_is_a_validation_error(self):
        expensive = Product.objects.create(name="Alat Medis", price=Decimal("9999999999.00"), stock=1)
        self.add_to_cart(expensive, 200)

        res = self.submit()

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "validation_error")
        self.assertIn("total", res.data["error"]["fields"])
        self.assertEqual(self.cart()["item_count"], 200)
        self.assertFalse(Order.objects.exists())


class CheckoutReferenceApiTests(CheckoutApiTestBase):
    def test_options_without_area(self):
        res = self.client.get(reverse("public-checkout-options"))

        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data["areas"]), 9)
        self.assertEqual([o["id"] for o in res.data["delivery_options"]], ["regular", "secepatnya"])
        self.assertIsNone(res.data["delivery_options"][0]["fee"])
        self.assertEqual([m["id"] for m in res.data["payment_methods"]], ["cod", "transfer"])

    def test_options_with_area_preview_fees(self):
        res = self.client.get(reverse("public-checkout-options"), {"area": "Melis"})

        self.assertEqual([o["fee"] for o in res.data["delivery_options"]], ["5000.00", "8000.00"])

    @override_settings(EXPRESS_DELIVERY_ENABLED=False)
    def test_options_report_express_unavailable(self):
        res = self.client.get(reverse("public-checkout-options"))

        self.assertFalse(res.data["express_available"])
        self.assertFalse(res.data["delivery_options"][1]["available"])

    def test_area_search_marks_recent(self):
        self.add_to_cart(self.product, 1)
        self.submit(area_name="Wonocoyo", delivery_option_id="regular")

        res = self.client.get(reverse("public-checkout-areas"), {"q": "wo"})

        self.assertEqual([a["name"] for a in res.data], ["Wonocoyo"])
        self.assertTrue(res.data[0]["recent"])

        res = self.client.get(reverse("public-checkout-areas"))
        self.assertEqual(res.data[0]["name"], "Wonocoyo")
        self.assertFalse(res.data[1]["recent"])

    def test_history_clear_by_list(self):
        self.add_to_cart(self.product, 1)
        self.submit()

        res = self.client.delete(reverse("public-checkout-history") + "?list=names")
        self.assertEqual(res.data, {"names": [], "areas": ["Widoro"]})

        res = self.client.delete(reverse("public-checkout-history"))
        self.assertEqual(res.data, {"names": [], "areas": []})

    def test_history_rejects_unknown_list(self):
        res = self.client.get(reverse("public-checkout-history"), {"list": "orders"})
        self.assertEqual(res.status_code, 400)
