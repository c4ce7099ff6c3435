"""Interactive box office: sell tickets with extras and take one payment.

Run with: python manage.py sell_tickets
"""

import dataclasses
import logging
import sys

from django.core.management.base import BaseCommand

from tickets.config import SalesConfig
from tickets.domain import PaymentKind, PaymentMethod, PricedItem, SaleSession, TicketType
from tickets.domain.errors import ExtraNotAllowedError, InvalidMenuOptionError
from tickets.handlers import (
    FAREWELL,
    PAYMENT_MENU,
    SALE_HEADER,
    Prompter,
    parse_extra_option,
    parse_payment_option,
    render_extras_menu,
    render_price_table,
    render_ticket,
    render_total,
    wants_another,
)
from tickets.services import SaleService

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Sell cinema tickets interactively and simulate the payment."

    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument(
            "--currency",
            help="Currency symbol shown next to prices (defaults to TICKET_CURRENCY).",
        )

    def handle(self, *args, **options):
        config = SalesConfig.from_settings()
        if options.get("currency"):
            config = dataclasses.replace(config, currency=options["currency"])
        self.service = SaleService(config)
        self.prompter = Prompter(options.get("stdin") or sys.stdin, self.stdout)

        session = SaleSession()
        while True:
            session.add(self.sell_ticket())
            if not wants_another(self.prompter.ask("¿Desea agregar otra entrada? (s/n): ")):
                break

        self.prompter.say(render_total(session.total(), config))
        confirmation = self.service.checkout(session, self.choose_payment())
        self.prompter.say(confirmation.message)
        self.stdout.write(self.style.SUCCESS(FAREWELL))

    def sell_ticket(self) -> PricedItem:
        prompter = self.prompter
        prompter.say(f"\n{SALE_HEADER}")
        movie = prompter.ask("Ingrese la película: ")
        room = prompter.ask("Ingrese la sala: ")
        seat = prompter.ask("Ingrese el asiento: ")
        showtime = prompter.ask("Ingrese el horario: ")

        prompter.say(render_price_table(self.service.config))
        ticket_type = prompter.ask_ticket_type(self.service)
        item = self.service.create_ticket(movie, room, seat, showtime, ticket_type)
        item = self.choose_extras(item, ticket_type)

        prompter.say(render_ticket(item))
        return item

    def choose_extras(self, item: PricedItem, ticket_type: TicketType) -> PricedItem:
        prompter = self.prompter
        while True:
            prompter.say(render_extras_menu(self.service.config))
            answer = prompter.ask("Opción: ")
            try:
                extra = parse_extra_option(answer)
                if extra is None:
                    prompter.say("Selección de extras finalizada.")
                    return item
                item = self.service.apply_extra(item, ticket_type, extra)
            except (InvalidMenuOptionError, ExtraNotAllowedError) as exc:
                prompter.say(exc.message)

    def choose_payment(self) -> PaymentMethod:
        prompter = self.prompter
        prompter.say(PAYMENT_MENU)
        answer = prompter.ask("Seleccione: ")
        try:
            kind = parse_payment_option(answer)
        except InvalidMenuOptionError:
            logger.warning("Unknown payment option %r, falling back to cash", answer)
            kind = PaymentKind.CASH
        card = prompter.ask_card_details() if kind is PaymentKind.CARD else None
        return self.service.payment_method(kind, card)
