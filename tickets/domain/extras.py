"""Stackable extras that wrap a priced item and add to its price."""

from abc import abstractmethod
from decimal import Decimal
from enum import Enum

from tickets.domain.models import PricedItem, format_amount


class ExtraDecorator(PricedItem):
    """Base for extras: adds a fixed increment on top of the wrapped item.

    Wrapping records the label on the underlying ticket straight away, so the
    ticket lists every extra no matter how many layers sit above it. The 2D
    restriction on 3D glasses is checked by the caller before wrapping.
    """

    @property
    @abstractmethod
    def label(self) -> str:
        """Name recorded on the ticket."""
        ...

    @property
    @abstractmethod
    def increment(self) -> Decimal:
        """Amount added on top of the wrapped price."""
        ...

    def __init__(self, wrapped: PricedItem) -> None:
        self._wrapped = wrapped
        self._wrapped.record_extra(self.label)

    @property
    def wrapped(self) -> PricedItem:
        return self._wrapped

    @property
    def extras(self) -> tuple[str, ...]:
        return self._wrapped.extras

    def record_extra(self, label: str) -> None:
        self._wrapped.record_extra(label)

    def price(self) -> Decimal:
        return self._wrapped.price() + self.increment

    def describe(self) -> str:
        return (
            self._wrapped.describe()
            + f"Precio final con extras: {format_amount(self.price())}\n"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrapped!r})"


class Glasses3D(ExtraDecorator):
    label = "Gafas 3D"
    increment = Decimal("3.0")


class Combo(ExtraDecorator):
    label = "Combo Palomitas/Bebida"
    increment = Decimal("10.0")


class Extra(Enum):
    """Extras offered at the counter."""

    GLASSES_3D = "glasses_3d"
    COMBO = "combo"

    @property
    def decorator(self) -> type[ExtraDecorator]:
        return _DECORATORS[self]

    @property
    def label(self) -> str:
        return self.decorator.label

    @property
    def increment(self) -> Decimal:
        return self.decorator.increment

    def apply(self, item: PricedItem) -> ExtraDecorator:
        return self.decorator(item)


_DECORATORS: dict[Extra, type[ExtraDecorator]] = {
    Extra.GLASSES_3D: Glasses3D,
    Extra.COMBO: Combo,
}
