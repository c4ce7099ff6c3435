"""Unit tests for payment strategies.

Run with: pytest tests/test_payments.py -v
"""

from decimal import Decimal

import pytest

from tickets.domain import CardDetails, CardPayment, CashPayment, PaymentKind, QRPayment

CARD = CardDetails(number="4111 1111 1111 1234", holder="Ana Pérez", security_code="987")


class TestPaymentMethods:
    """Tests for cash, card and QR payments."""

    def test_cash_confirmation(self):
        """Cash confirms the amount paid in cash."""
        confirmation = CashPayment(currency="Bs.").pay(Decimal("43.0"))
        assert confirmation.kind is PaymentKind.CASH
        assert confirmation.amount == Decimal("43.0")
        assert confirmation.message == "Pagando Bs.43.00 en efectivo."

    def test_qr_confirmation(self):
        """QR confirms a QR payment."""
        confirmation = QRPayment().pay(Decimal("80"))
        assert confirmation.kind is PaymentKind.QR
        assert confirmation.message == "Pagando 80.00 mediante QR."

    def test_card_confirmation_masks_number(self):
        """Card confirmation shows the last four digits and the holder only."""
        confirmation = CardPayment(CARD, currency="Bs.").pay(Decimal("20.0"))
        assert confirmation.kind is PaymentKind.CARD
        assert confirmation.message == "Pagando Bs.20.00 con tarjeta **** 1234 titular: Ana Pérez"
        assert "4111" not in confirmation.message
        assert "987" not in confirmation.message

    def test_card_details_repr_hides_secrets(self):
        """CardDetails never prints the full number or security code."""
        assert "4111" not in repr(CARD)
        assert "987" not in repr(CARD)

    @pytest.mark.parametrize("method", [CashPayment(), QRPayment(), CardPayment(CARD)])
    def test_pay_is_deterministic(self, method):
        """Same amount always yields the same confirmation."""
        assert method.pay(Decimal("12.5")) == method.pay(Decimal("12.5"))

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5")])
    def test_pay_accepts_any_amount(self, amount):
        """Zero and negative amounts are accepted exactly as given."""
        assert CashPayment().pay(amount).amount == amount

    def test_pay_logs_without_card_number(self, caplog):
        """Payment logging never includes card data."""
        with caplog.at_level("INFO", logger="tickets"):
            CardPayment(CARD).pay(Decimal("10"))
        assert "Payment confirmed: card 10.00" in caplog.text
        assert "4111" not in caplog.text

    @pytest.mark.parametrize("number", ["", "12", "1234", " 12 34 "])
    def test_short_card_number_is_fully_masked(self, number):
        """Numbers of four digits or fewer are hidden behind the mask."""
        card = CardDetails(number=number, holder="Ana", security_code="1")
        assert card.masked_number == "****"

    def test_card_number_spaces_are_ignored_when_masking(self):
        """Grouped numbers keep only their last four digits."""
        assert CARD.masked_number == "**** 1234"
