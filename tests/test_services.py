"""Unit tests for SaleService.

These test the usage rules and error mapping around the domain.
Run with: pytest tests/test_services.py -v
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from tickets.config import SalesConfig
from tickets.domain import (
    CardDetails,
    CardPayment,
    CashPayment,
    Extra,
    Money,
    PaymentConfirmation,
    PaymentKind,
    PaymentMethod,
    QRPayment,
    SaleSession,
    TicketType,
)
from tickets.domain.errors import (
    CardDetailsRequiredError,
    EmptySessionError,
    ErrorCode,
    ExtraNotAllowedError,
    InvalidTicketTypeError,
)
from tickets.services import SaleService


class TestPricing:
    """Tests for price lookup and ticket creation."""

    @pytest.mark.parametrize(
        "ticket_type, price",
        [(TicketType.TWO_D, "20.0"), (TicketType.THREE_D, "30.0"), (TicketType.VIP, "50.0")],
    )
    def test_price_for_uses_price_table(self, service, ticket_type, price):
        """price_for returns the configured price."""
        assert service.price_for(ticket_type) == Money(Decimal(price))

    def test_price_for_type_missing_from_table_raises_error(self):
        """A type left out of the price table cannot be sold."""
        service = SaleService(SalesConfig.from_mapping({"2D": "20.0"}))
        with pytest.raises(InvalidTicketTypeError):
            service.price_for(TicketType.VIP)

    def test_create_ticket_uses_base_price(self, service):
        """Tickets are built with the price of their type."""
        ticket = service.create_ticket("Dune", "5", "F7", "19:30", TicketType.VIP)
        assert ticket.price() == Decimal("50.0")
        assert ticket.ticket_type == "VIP"
        assert "Película: Dune" in ticket.describe()


class TestExtras:
    """Tests for apply_extra rules."""

    def test_glasses_on_2d_ticket_raises_error(self, service):
        """3D glasses are rejected for 2D tickets and nothing is recorded."""
        ticket = service.create_ticket("Up", "1", "A1", "18:00", TicketType.TWO_D)
        with pytest.raises(ExtraNotAllowedError) as exc_info:
            service.apply_extra(ticket, TicketType.TWO_D, Extra.GLASSES_3D)
        assert exc_info.value.code is ErrorCode.EXTRA_NOT_ALLOWED
        assert exc_info.value.message == "No se pueden agregar gafas 3D a una entrada 2D."
        assert ticket.extras == ()

    def test_combo_on_2d_ticket_is_allowed(self, service):
        """Combos can go on any ticket."""
        ticket = service.create_ticket("Up", "1", "A1", "18:00", TicketType.TWO_D)
        assert service.apply_extra(ticket, TicketType.TWO_D, Extra.COMBO).price() == Decimal("30.0")

    def test_3d_ticket_with_glasses_and_combo(self, service):
        """3D base plus glasses plus combo totals 43.0."""
        item = service.create_ticket("Dune", "5", "F7", "19:30", TicketType.THREE_D)
        item = service.apply_extra(item, TicketType.THREE_D, Extra.GLASSES_3D)
        item = service.apply_extra(item, TicketType.THREE_D, Extra.COMBO)
        assert item.price() == Decimal("43.0")
        assert item.extras == ("Gafas 3D", "Combo Palomitas/Bebida")


class TestPayment:
    """Tests for payment selection and checkout."""

    @pytest.mark.parametrize(
        "kind, expected",
        [(PaymentKind.CASH, CashPayment), (PaymentKind.QR, QRPayment)],
    )
    def test_payment_method_for_kind(self, service, kind, expected):
        """Each payment kind builds its strategy."""
        assert isinstance(service.payment_method(kind), expected)

    def test_card_payment_requires_details(self, service):
        """A card payment without card details raises an error."""
        with pytest.raises(CardDetailsRequiredError):
            service.payment_method(PaymentKind.CARD)

    def test_card_payment_with_details(self, service):
        """Card details build a card payment."""
        card = CardDetails("4111111111111234", "Ana", "123")
        assert isinstance(service.payment_method(PaymentKind.CARD, card), CardPayment)

    def test_checkout_pays_session_total_once(self, service):
        """The total of every ticket is passed unchanged to pay."""
        session = SaleSession()
        session.add(service.create_ticket("Up", "1", "A1", "18:00", TicketType.TWO_D))
        vip = service.create_ticket("Up", "1", "A2", "18:00", TicketType.VIP)
        session.add(service.apply_extra(vip, TicketType.VIP, Extra.COMBO))

        method = Mock(spec=PaymentMethod)
        method.kind = PaymentKind.QR
        method.pay.return_value = PaymentConfirmation(PaymentKind.QR, Decimal("80.0"), "ok")

        confirmation = service.checkout(session, method)

        method.pay.assert_called_once_with(Decimal("80.0"))
        assert confirmation.amount == Decimal("80.0")

    def test_checkout_uses_configured_currency(self, service):
        """Confirmation messages carry the configured currency."""
        session = SaleSession()
        session.add(service.create_ticket("Up", "1", "A1", "18:00", TicketType.TWO_D))
        confirmation = service.checkout(session, service.payment_method(PaymentKind.CASH))
        assert confirmation.message == "Pagando Bs.20.00 en efectivo."

    def test_checkout_empty_session_raises_error(self, service):
        """Checking out with no tickets raises EmptySessionError."""
        with pytest.raises(EmptySessionError):
            service.checkout(SaleSession(), service.payment_method(PaymentKind.CASH))
