"""Console rendering of menus, tickets and payment results."""

from decimal import Decimal

from tickets.config import SalesConfig
from tickets.domain import Extra, Money, PricedItem
from tickets.handlers.prompts import EXTRA_OPTIONS, STOP_OPTION

SALE_HEADER = "=== Venta de Entradas de Cine ==="
PAYMENT_MENU = "Métodos de pago: 1-Efectivo, 2-Tarjeta, 3-QR"
FAREWELL = "¡Gracias por su compra!"

EXTRA_CAPTIONS: dict[Extra, str] = {
    Extra.GLASSES_3D: "Gafas 3D",
    Extra.COMBO: "Combo palomitas/bebida",
}


def format_increment(amount: Decimal) -> str:
    """Whole amounts drop their decimals: 3.0 -> "3", 2.5 -> "2.50"."""
    if amount == amount.to_integral_value():
        return f"{amount:.0f}"
    return f"{amount:.2f}"


def render_price_table(config: SalesConfig) -> str:
    lines = ["=== Tipos de entradas y precios ==="]
    for index, (ticket_type, price) in enumerate(config.prices.items(), start=1):
        lines.append(f"{index} - {ticket_type}: {config.currency}{price}")
    return "\n".join(lines)


def render_extras_menu(config: SalesConfig) -> str:
    lines = ["", "Seleccione extras:"]
    for option, extra in EXTRA_OPTIONS.items():
        increment = format_increment(extra.increment)
        lines.append(f"{option} - {EXTRA_CAPTIONS[extra]} (+{config.currency}{increment})")
    lines.append(f"{STOP_OPTION} - Terminar selección")
    return "\n".join(lines)


def render_ticket(item: PricedItem) -> str:
    return "\nEntrada agregada:\n" + item.describe()


def render_total(total: Decimal, config: SalesConfig) -> str:
    return f"\nTotal a pagar: {config.currency}{Money(total)}"

