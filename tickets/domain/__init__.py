from tickets.domain.builder import TicketBuilder
from tickets.domain.extras import Combo, Extra, ExtraDecorator, Glasses3D
from tickets.domain.models import PricedItem, SaleSession, Ticket
from tickets.domain.payments import (
    CardDetails,
    CardPayment,
    CashPayment,
    PaymentConfirmation,
    PaymentKind,
    PaymentMethod,
    QRPayment,
)
from tickets.domain.value_objects import Money, TicketType

__all__ = [
    "Ticket",
    "TicketBuilder",
    "PricedItem",
    "SaleSession",
    "ExtraDecorator",
    "Glasses3D",
    "Combo",
    "Extra",
    "PaymentMethod",
    "PaymentKind",
    "PaymentConfirmation",
    "CardDetails",
    "CashPayment",
    "CardPayment",
    "QRPayment",
    "Money",
    "TicketType",
]
