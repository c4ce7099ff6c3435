"""Step-by-step construction of tickets.

The builder performs no validation: callers check the ticket type against the
price table before handing it over.
"""

from decimal import Decimal
from typing import Self

from tickets.domain.models import Ticket


class TicketBuilder:
    """Fluent builder for Ticket."""

    def __init__(self) -> None:
        self._movie = ""
        self._room = ""
        self._seat = ""
        self._showtime = ""
        self._ticket_type = ""
        self._price = Decimal("0")

    def set_movie(self, movie: str) -> Self:
        self._movie = movie
        return self

    def set_room(self, room: str) -> Self:
        self._room = room
        return self

    def set_seat(self, seat: str) -> Self:
        self._seat = seat
        return self

    def set_showtime(self, showtime: str) -> Self:
        self._showtime = showtime
        return self

    def set_type(self, ticket_type: str) -> Self:
        self._ticket_type = ticket_type
        return self

    def set_price(self, price: Decimal) -> Self:
        self._price = price
        return self

    def build(self) -> Ticket:
        """Return a new Ticket with the fields assigned so far."""
        return Ticket(
            movie=self._movie,
            room=self._room,
            seat=self._seat,
            showtime=self._showtime,
            ticket_type=self._ticket_type,
            base_price=self._price,
        )
