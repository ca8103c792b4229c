"""
Shared pytest fixtures for the ticket service tests.

These fixtures provide fresh mock collaborators for every test so recorded
payments and reservations never leak between tests.
"""

import pytest

from thirdparty.payment_gateway import MockTicketPaymentService
from thirdparty.seat_booking import MockSeatReservationService
from ticketing.models import TicketType, TicketTypeRequest
from ticketing.ticket_service import TicketService


@pytest.fixture
def payment_service() -> MockTicketPaymentService:
    """Fresh payment gateway for each test."""
    return MockTicketPaymentService(fail_rate=0.0)


@pytest.fixture
def reservation_service() -> MockSeatReservationService:
    """Fresh seat booking system for each test."""
    return MockSeatReservationService(fail_rate=0.0)


@pytest.fixture
def ticket_service(
    payment_service: MockTicketPaymentService,
    reservation_service: MockSeatReservationService,
) -> TicketService:
    """TicketService wired to the fresh mock collaborators."""
    return TicketService(payment_service, reservation_service)


# =============================================================================
# Ticket Request Fixtures
# =============================================================================

@pytest.fixture
def adult() -> TicketTypeRequest:
    """A single Adult ticket."""
    return TicketTypeRequest(TicketType.ADULT, 1)


@pytest.fixture
def two_children() -> TicketTypeRequest:
    """Two Child tickets."""
    return TicketTypeRequest(TicketType.CHILD, 2)


@pytest.fixture
def infant() -> TicketTypeRequest:
    """A single Infant ticket."""
    return TicketTypeRequest(TicketType.INFANT, 1)
