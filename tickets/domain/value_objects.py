"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Self

from tickets.domain.errors import InvalidTicketTypeError


class TicketType(StrEnum):
    """Ticket categories sold at the box office."""

    TWO_D = "2D"
    THREE_D = "3D"
    VIP = "VIP"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse user text into a ticket type, ignoring case and padding.

        Raises:
            InvalidTicketTypeError: If the text names no known type.
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidTicketTypeError(value) from None


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(amount=Decimal(value))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
