# checkout/tests/test_delivery.py

from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from checkout.data import AREAS, EXPRESS, REGULAR, get_delivery_options
from checkout.services.delivery import (
    delivery_options_for,
    express_available,
    find_area,
    quote,
    search_areas,
)


def _names(areas):
    return [a.name for a in areas]


class DeliveryQuoteTests(SimpleTestCase):
    def setUp(self):
        self.options = get_delivery_options(express_enabled=True)

    def test_no_area_means_free_delivery(self):
        q = quote(Decimal("45000"), "", REGULAR, self.options)

        self.assertIsNone(q.area)
        self.assertEqual(q.delivery_fee, Decimal("0.00"))
        self.assertEqual(q.total, Decimal("45000.00"))

    def test_regular_fee_uses_regular_cost(self):
        q = quote(Decimal("45000"), "Melis", REGULAR, self.options)

        self.assertEqual(q.delivery_fee, Decimal("5000.00"))
        self.assertEqual(q.total, Decimal("50000.00"))
        self.assertEqual(q.fee_label, "Ongkos Kirim")

    def test_express_replaces_regular_cost(self):
        q = quote(Decimal("45000"), "Melis", EXPRESS, self.options)

        # 8000, never 5000 + 8000
        self.assertEqual(q.delivery_fee, Decimal("8000.00"))
        self.assertEqual(q.total, Decimal("53000.00"))
        self.assertEqual(q.fee_label, "Biaya Express")

    def test_express_falls_back_to_regular_when_disabled(self):
        options = get_delivery_options(express_enabled=False)
        q = quote(Decimal("45000"), "Melis", EXPRESS, options)

        self.assertEqual(q.delivery_option_id, REGULAR)
        self.assertEqual(q.delivery_fee, Decimal("5000.00"))
        self.assertFalse(express_available(options))

    def test_unknown_option_is_charged_and_reported_as_regular(self):
        q = quote(Decimal("45000"), "Widoro", "foo", self.options)

        self.assertEqual(q.delivery_option_id, REGULAR)
        self.assertEqual(q.delivery_fee, Decimal("8000.00"))
        self.assertEqual(q.fee_label, "Ongkos Kirim")

    def test_zero_cost_area(self):
        q = quote(Decimal("45000"), "Krandegan", REGULAR, self.options)
        self.assertEqual(q.delivery_fee, Decimal("0.00"))
        self.assertEqual(q.total, Decimal("45000.00"))

    def test_unknown_area_is_treated_as_unselected(self):
        self.assertIsNone(find_area("Atlantis"))
        self.assertEqual(quote(100, "Atlantis", REGULAR, self.options).delivery_fee, Decimal("0.00"))

    @override_settings(EXPRESS_DELIVERY_ENABLED=False)
    def test_default_options_follow_settings(self):
        self.assertFalse(express_available(get_delivery_options()))

    def test_option_rows_preview_fee_for_area(self):
        rows = delivery_options_for(find_area("Widoro"), self.options)

        self.assertEqual([r["id"] for r in rows], [REGULAR, EXPRESS])
        self.assertEqual([r["fee"] for r in rows], ["8000.00", "12000.00"])
        self.assertTrue(all(r["fee"] is None for r in delivery_options_for(None, self.options)))


class AreaSearchTests(SimpleTestCase):
    def test_blank_query_lists_history_first(self):
        result = _names(search_areas("", ["Widoro", "Melis"]))

        self.assertEqual(result[:2], ["Widoro", "Melis"])
        self.assertEqual(sorted(result), sorted(_names(AREAS)))
        self.assertEqual(len(result), len(AREAS))

    def test_query_matches_case_insensitively_history_first(self):
        result = _names(search_areas("O", ["Wonocoyo", "Widoro"]))

        self.assertEqual(
            result,
            ["Widoro", "Wonocoyo", "Sukorame", "Ngadirenggo", "Bendorejo"],
        )

    def test_stale_history_entries_are_ignored(self):
        result = _names(search_areas(None, ["Hilang", "Melis"]))
        self.assertEqual(result[0], "Melis")
        self.assertNotIn("Hilang", result)

    def test_no_match(self):
        self.assertEqual(search_areas("zzz", ["Melis"]), [])
