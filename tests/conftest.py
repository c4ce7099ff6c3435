"""Pytest configuration and shared fixtures."""

from io import StringIO

import pytest
from django.core.management import call_command

from tickets.config import DEFAULT_TICKET_PRICES, SalesConfig
from tickets.services import SaleService


@pytest.fixture
def config() -> SalesConfig:
    return SalesConfig.from_mapping(DEFAULT_TICKET_PRICES)


@pytest.fixture
def service(config: SalesConfig) -> SaleService:
    return SaleService(config)


@pytest.fixture
def sell_tickets():
    """Run the sell_tickets command with scripted answers, returning its output."""

    def run(*answers: str, **options) -> str:
        stdout = StringIO()
        stdin = StringIO("".join(f"{answer}\n" for answer in answers))
        call_command("sell_tickets", stdin=stdin, stdout=stdout, **options)
        return stdout.getvalue()

    return run
