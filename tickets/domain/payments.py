"""Payment strategies for settling a sale.

Every strategy accepts the amount exactly as given and always succeeds; no
real payment is processed. The caller picks a PaymentKind and the matching
strategy is built for a single transaction.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from tickets.domain.models import format_amount

logger = logging.getLogger(__name__)


class PaymentKind(Enum):
    """Supported payment methods."""

    CASH = "cash"
    CARD = "card"
    QR = "qr"


@dataclass(frozen=True)
class CardDetails:
    """Card data typed in at the counter. Not validated, never stored."""

    number: str
    holder: str
    security_code: str

    @property
    def masked_number(self) -> str:
        """Last four digits behind a mask; numbers that short are hidden entirely."""
        digits = self.number.replace(" ", "")
        if len(digits) <= 4:
            return "****"
        return f"**** {digits[-4:]}"

    def __repr__(self) -> str:
        return f"CardDetails(number={self.masked_number!r}, holder={self.holder!r})"


@dataclass(frozen=True)
class PaymentConfirmation:
    """Result of a simulated payment."""

    kind: PaymentKind
    amount: Decimal
    message: str


class PaymentMethod(ABC):
    """Interface for turning an amount into a payment confirmation."""

    kind: PaymentKind

    def __init__(self, currency: str = "") -> None:
        self._currency = currency

    def pay(self, amount: Decimal) -> PaymentConfirmation:
        """Settle the amount and return the confirmation."""
        confirmation = PaymentConfirmation(
            kind=self.kind,
            amount=amount,
            message=self.confirmation_message(f"{self._currency}{format_amount(amount)}"),
        )
        logger.info("Payment confirmed: %s %s", self.kind.value, format_amount(amount))
        return confirmation

    @abstractmethod
    def confirmation_message(self, amount: str) -> str:
        """Return the user-facing confirmation text for an amount already formatted."""
        ...


class CashPayment(PaymentMethod):
    kind = PaymentKind.CASH

    def confirmation_message(self, amount: str) -> str:
        return f"Pagando {amount} en efectivo."


class CardPayment(PaymentMethod):
    kind = PaymentKind.CARD

    def __init__(self, card: CardDetails, currency: str = "") -> None:
        super().__init__(currency)
        self._card = card

    def confirmation_message(self, amount: str) -> str:
        return f"Pagando {amount} con tarjeta {self._card.masked_number} titular: {self._card.holder}"


class QRPayment(PaymentMethod):
    kind = PaymentKind.QR

    def confirmation_message(self, amount: str) -> str:
        return f"Pagando {amount} mediante QR."
