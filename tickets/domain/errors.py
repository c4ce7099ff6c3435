"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    INVALID_MENU_OPTION = "INVALID_MENU_OPTION"
    EXTRA_NOT_ALLOWED = "EXTRA_NOT_ALLOWED"
    CARD_DETAILS_REQUIRED = "CARD_DETAILS_REQUIRED"
    EMPTY_SESSION = "EMPTY_SESSION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidTicketTypeError(DomainError):
    """Raised when a ticket type is not in the price table."""

    def __init__(self, ticket_type: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message="Tipo inválido.",
        )
        object.__setattr__(self, "ticket_type", ticket_type)


class InvalidMenuOptionError(DomainError):
    """Raised when a menu selection is out of range or not a number."""

    def __init__(self, option: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MENU_OPTION,
            message="Opción inválida.",
        )
        object.__setattr__(self, "option", option)


class ExtraNotAllowedError(DomainError):
    """Raised when an extra cannot be added to a ticket of the given type."""

    def __init__(self, extra: str, ticket_type: str) -> None:
        super().__init__(
            code=ErrorCode.EXTRA_NOT_ALLOWED,
            message=f"No se pueden agregar {extra} a una entrada {ticket_type}.",
        )
        object.__setattr__(self, "ticket_type", ticket_type)


class CardDetailsRequiredError(DomainError):
    """Raised when a card payment is requested without card details."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CARD_DETAILS_REQUIRED,
            message="Faltan los datos de la tarjeta.",
        )


class EmptySessionError(DomainError):
    """Raised when checking out a session with no tickets."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_SESSION,
            message="No hay entradas para cobrar.",
        )
