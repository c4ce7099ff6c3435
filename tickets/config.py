"""Box office configuration, read once from Django settings.

The service receives a SalesConfig at startup and never touches settings
itself.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import InvalidOperation
from types import MappingProxyType
from typing import Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from tickets.domain import Money, TicketType

DEFAULT_TICKET_PRICES = {"2D": "20.0", "3D": "30.0", "VIP": "50.0"}
DEFAULT_CURRENCY = "Bs."


@dataclass(frozen=True)
class SalesConfig:
    """Price table and display currency for one run."""

    prices: Mapping[TicketType, Money]
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_mapping(cls, prices: Mapping[str, str], currency: str = DEFAULT_CURRENCY) -> Self:
        """Build a config from raw label/price pairs.

        Raises:
            ImproperlyConfigured: If a label is unknown or a price is not positive.
        """
        table: dict[TicketType, Money] = {}
        for label, raw_price in prices.items():
            try:
                ticket_type = TicketType(label)
            except ValueError:
                raise ImproperlyConfigured(f"Unknown ticket type in TICKET_PRICES: {label!r}") from None
            try:
                price = Money.from_string(str(raw_price))
            except (InvalidOperation, ValueError):
                raise ImproperlyConfigured(f"Invalid price for {label!r}: {raw_price!r}") from None
            if not price.amount.is_finite() or price.amount == 0:
                raise ImproperlyConfigured(f"Price for {label!r} must be a positive number")
            table[ticket_type] = price
        if not table:
            raise ImproperlyConfigured("TICKET_PRICES must list at least one ticket type")
        return cls(prices=MappingProxyType(table), currency=currency)

    @classmethod
    def from_settings(cls) -> Self:
        return cls.from_mapping(
            getattr(settings, "TICKET_PRICES", DEFAULT_TICKET_PRICES),
            getattr(settings, "TICKET_CURRENCY", DEFAULT_CURRENCY),
        )
