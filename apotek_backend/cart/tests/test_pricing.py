# cart/tests/test_pricing.py

from decimal import Decimal

from django.test import SimpleTestCase

from cart.services.pricing import effective_price, format_price, line_total, money


class PricingTests(SimpleTestCase):
    def test_money_quantizes_half_up(self):
        self.assertEqual(money("10.005"), Decimal("10.01"))
        self.assertEqual(money(None), Decimal("0.00"))
        self.assertEqual(money(""), Decimal("0.00"))

    def test_format_price_uses_dot_thousands(self):
        self.assertEqual(format_price(45000), "Rp 45.000")
        self.assertEqual(format_price(Decimal("1250000.00")), "Rp 1.250.000")
        self.assertEqual(format_price(0), "Rp 0")
        self.assertEqual(format_price(500), "Rp 500")

    def test_effective_price(self):
        self.assertEqual(effective_price(18000, 15000), Decimal("15000.00"))
        self.assertEqual(effective_price(18000, None), Decimal("18000.00"))
        self.assertEqual(effective_price(18000, 0), Decimal("18000.00"))

    def test_line_total(self):
        self.assertEqual(line_total(Decimal("15000"), 3), Decimal("45000.00"))
