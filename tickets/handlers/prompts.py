"""Console prompt handling - terminal concerns only.

Prompt handlers:
- Read raw text and parse menu selections
- Call services for business rules
- Map domain errors to console messages and re-prompt
- Never contain business logic
"""

from typing import TextIO

from django.core.management.base import CommandError, OutputWrapper

from tickets.domain import CardDetails, Extra, PaymentKind, TicketType
from tickets.domain.errors import InvalidMenuOptionError, InvalidTicketTypeError
from tickets.services import SaleService

STOP_OPTION = "0"

EXTRA_OPTIONS: dict[str, Extra] = {
    "1": Extra.GLASSES_3D,
    "2": Extra.COMBO,
}

PAYMENT_OPTIONS: dict[str, PaymentKind] = {
    "1": PaymentKind.CASH,
    "2": PaymentKind.CARD,
    "3": PaymentKind.QR,
}


def parse_extra_option(text: str) -> Extra | None:
    """Return the selected extra, or None when the user is done.

    Raises:
        InvalidMenuOptionError: If the text is not a listed option.
    """
    option = text.strip()
    if option == STOP_OPTION:
        return None
    try:
        return EXTRA_OPTIONS[option]
    except KeyError:
        raise InvalidMenuOptionError(text) from None


def parse_payment_option(text: str) -> PaymentKind:
    """Return the selected payment kind.

    Raises:
        InvalidMenuOptionError: If the text is not a listed option.
    """
    try:
        return PAYMENT_OPTIONS[text.strip()]
    except KeyError:
        raise InvalidMenuOptionError(text) from None


def wants_another(text: str) -> bool:
    return text.strip().lower() == "s"


class Prompter:
    """Reads answers from a text stream, echoing prompts to the command output."""

    def __init__(self, stdin: TextIO, stdout: OutputWrapper) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def say(self, message: str = "") -> None:
        self._stdout.write(message)

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the answer without its line ending.

        Raises:
            CommandError: If the input stream is exhausted.
        """
        self._stdout.write(prompt, ending="")
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise CommandError("Entrada finalizada inesperadamente.")
        return line.rstrip("\r\n")

    def ask_ticket_type(self, service: SaleService) -> TicketType:
        """Prompt until the user names a ticket type present in the price table."""
        while True:
            answer = self.ask("Ingrese el tipo de entrada (2D/3D/VIP): ")
            try:
                ticket_type = TicketType.parse(answer)
                service.price_for(ticket_type)
            except InvalidTicketTypeError as exc:
                self.say(exc.message)
                continue
            return ticket_type

    def ask_card_details(self) -> CardDetails:
        return CardDetails(
            number=self.ask("Número de tarjeta: "),
            holder=self.ask("Titular: "),
            security_code=self.ask("CVV: "),
        )
