"""Domain models for a box office sale.

These are pure domain objects with no console or settings concerns.
Terminal input/output lives in tickets/handlers (presentation layer).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal


def format_amount(amount: Decimal) -> str:
    return f"{amount:.2f}"


class PricedItem(ABC):
    """Anything that can be priced and described on a receipt.

    Tickets and every extra decorator implement this, so decorators can wrap
    a ticket or another decorator uniformly.
    """

    @abstractmethod
    def price(self) -> Decimal:
        """Return the price including every wrapped increment."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Return the multi-line receipt text for this item."""
        ...

    @property
    @abstractmethod
    def extras(self) -> tuple[str, ...]:
        """Labels of the extras applied so far, in the order they were added."""
        ...

    @abstractmethod
    def record_extra(self, label: str) -> None:
        """Append an extra label to the underlying ticket."""
        ...


@dataclass(frozen=True)
class Ticket(PricedItem):
    """A single cinema ticket before any extras are priced in.

    Fields are fixed at build time; only the extras list grows, and only
    through record_extra.
    """

    movie: str = ""
    room: str = ""
    seat: str = ""
    showtime: str = ""
    ticket_type: str = ""
    base_price: Decimal = Decimal("0")
    _extras: list[str] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def extras(self) -> tuple[str, ...]:
        return tuple(self._extras)

    def record_extra(self, label: str) -> None:
        self._extras.append(label)

    def price(self) -> Decimal:
        return self.base_price

    def describe(self) -> str:
        lines = [
            f"Película: {self.movie}",
            f"Sala: {self.room}",
            f"Asiento: {self.seat}",
            f"Horario: {self.showtime}",
            f"Tipo: {self.ticket_type}",
        ]
        if self._extras:
            lines.append(f"Extras: {', '.join(self._extras)}")
        return "\n".join(lines) + "\n"


@dataclass
class SaleSession:
    """Tickets collected during one run of the box office loop."""

    _items: list[PricedItem] = field(default_factory=list)

    def add(self, item: PricedItem) -> None:
        self._items.append(item)

    @property
    def items(self) -> tuple[PricedItem, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def total(self) -> Decimal:
        """Return the sum of every item's price."""
        return sum((item.price() for item in self._items), Decimal("0"))
