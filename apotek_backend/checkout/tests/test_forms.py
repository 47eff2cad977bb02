# checkout/tests/test_forms.py

from django.test import SimpleTestCase

from checkout.data import COD, EXPRESS, REGULAR, get_delivery_options
from checkout.services.forms import (
    MSG_AREA_REQUIRED,
    MSG_DELIVERY_REQUIRED,
    MSG_NAME_REQUIRED,
    MSG_PAYMENT_REQUIRED,
    CheckoutForm,
    validate_checkout_form,
)


class CheckoutFormTests(SimpleTestCase):
    def setUp(self):
        self.options = get_delivery_options(express_enabled=True)

    def test_from_raw_defaults_absent_fields(self):
        form = CheckoutForm.from_raw({"customer_name": "  Budi ", "area_name": "Melis"})

        self.assertEqual(form.customer_name, "Budi")
        self.assertEqual(form.delivery_option_id, REGULAR)
        self.assertEqual(form.payment_method_id, COD)
        self.assertIsNone(form.idempotency_key)

    def test_valid_form(self):
        form = CheckoutForm(customer_name="Budi", area_name="Melis", delivery_option_id=EXPRESS)
        self.assertTrue(validate_checkout_form(form, options=self.options).ok)

    def test_errors_are_reported_in_order(self):
        form = CheckoutForm.from_raw(
            {"customer_name": " ", "area_name": "Atlantis", "delivery_option_id": "", "payment_method_id": "kripto"}
        )

        result = validate_checkout_form(form, options=self.options)

        self.assertFalse(result.ok)
        self.assertEqual(
            list(result.errors.items()),
            [
                ("customer_name", MSG_NAME_REQUIRED),
                ("area_name", MSG_AREA_REQUIRED),
                ("delivery_option_id", MSG_DELIVERY_REQUIRED),
                ("payment_method_id", MSG_PAYMENT_REQUIRED),
            ],
        )

    def test_unavailable_express_is_normalized_not_rejected(self):
        options = get_delivery_options(express_enabled=False)
        form = CheckoutForm(customer_name="Budi", area_name="Melis", delivery_option_id=EXPRESS)

        self.assertTrue(validate_checkout_form(form, options=options).ok)
        self.assertEqual(form.normalized(options).delivery_option_id, REGULAR)
