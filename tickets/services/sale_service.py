"""Sale service - all box office business rules live here.

Services:
- Depend only on the domain and an explicit SalesConfig
- Enforce usage rules the domain objects cannot see (e.g. 3D glasses on 2D)
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging

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
    PricedItem,
    QRPayment,
    SaleSession,
    Ticket,
    TicketBuilder,
    TicketType,
)
from tickets.domain.errors import (
    CardDetailsRequiredError,
    EmptySessionError,
    ExtraNotAllowedError,
    InvalidTicketTypeError,
)

logger = logging.getLogger(__name__)


class SaleService:
    """Service for selling tickets and settling the bill."""

    def __init__(self, config: SalesConfig) -> None:
        self._config = config

    @property
    def config(self) -> SalesConfig:
        return self._config

    def price_for(self, ticket_type: TicketType) -> Money:
        """Return the configured base price for a ticket type.

        Raises:
            InvalidTicketTypeError: If the type is not in the price table.
        """
        try:
            return self._config.prices[ticket_type]
        except KeyError:
            raise InvalidTicketTypeError(str(ticket_type)) from None

    def create_ticket(
        self,
        movie: str,
        room: str,
        seat: str,
        showtime: str,
        ticket_type: TicketType,
    ) -> Ticket:
        """Build a ticket priced from the price table.

        Raises:
            InvalidTicketTypeError: If the type is not in the price table.
        """
        price = self.price_for(ticket_type)
        ticket = (
            TicketBuilder()
            .set_movie(movie)
            .set_room(room)
            .set_seat(seat)
            .set_showtime(showtime)
            .set_type(ticket_type)
            .set_price(price.amount)
            .build()
        )
        logger.info("Ticket created: %s room=%s seat=%s type=%s", movie, room, seat, ticket_type)
        return ticket

    def apply_extra(self, item: PricedItem, ticket_type: TicketType, extra: Extra) -> PricedItem:
        """Wrap an item with an extra, enforcing the ticket-type rules.

        Raises:
            ExtraNotAllowedError: If 3D glasses are added to a 2D ticket.
        """
        if extra is Extra.GLASSES_3D and ticket_type == TicketType.TWO_D:
            logger.warning("Rejected %s for a %s ticket", extra.label, ticket_type)
            raise ExtraNotAllowedError("gafas 3D", str(ticket_type))
        decorated = extra.apply(item)
        logger.info("Extra added: %s (price now %s)", extra.label, decorated.price())
        return decorated

    def payment_method(self, kind: PaymentKind, card: CardDetails | None = None) -> PaymentMethod:
        """Build the payment strategy for a payment kind.

        Raises:
            CardDetailsRequiredError: If a card payment has no card details.
        """
        if kind is PaymentKind.CARD:
            if card is None:
                raise CardDetailsRequiredError()
            return CardPayment(card, currency=self._config.currency)
        if kind is PaymentKind.QR:
            return QRPayment(currency=self._config.currency)
        return CashPayment(currency=self._config.currency)

    def checkout(self, session: SaleSession, method: PaymentMethod) -> PaymentConfirmation:
        """Charge the session total once through the given method.

        Raises:
            EmptySessionError: If no ticket was added to the session.
        """
        if session.is_empty:
            raise EmptySessionError()
        total = session.total()
        logger.info("Checkout: %d ticket(s), total %s, method %s", len(session.items), total, method.kind.value)
        return method.pay(total)
