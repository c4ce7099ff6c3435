from tickets.handlers.prompts import Prompter, parse_extra_option, parse_payment_option, wants_another
from tickets.handlers.receipts import (
    FAREWELL,
    PAYMENT_MENU,
    SALE_HEADER,
    render_extras_menu,
    render_price_table,
    render_ticket,
    render_total,
)

__all__ = [
    "Prompter",
    "parse_extra_option",
    "parse_payment_option",
    "wants_another",
    "render_extras_menu",
    "render_price_table",
    "render_ticket",
    "render_total",
    "SALE_HEADER",
    "PAYMENT_MENU",
    "FAREWELL",
]
