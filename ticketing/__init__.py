"""
Ticket purchasing for the venue.

This package contains the purchase rules and the types they work on:
- Ticket types, prices and seat rules
- Ticket requests and purchase totals
- The TicketService that validates and processes purchases
- Interfaces for the payment and seat booking services
"""

from ticketing.exceptions import InvalidPurchaseError
from ticketing.models import (
    TICKET_RULES,
    PurchaseTotals,
    TicketRule,
    TicketType,
    TicketTypeRequest,
)
from ticketing.ports import SeatReservationService, TicketPaymentService
from ticketing.ticket_service import MAXIMUM_TICKETS, TicketService

__all__ = [
    "InvalidPurchaseError",
    "TICKET_RULES",
    "PurchaseTotals",
    "TicketRule",
    "TicketType",
    "TicketTypeRequest",
    "SeatReservationService",
    "TicketPaymentService",
    "MAXIMUM_TICKETS",
    "TicketService",
]
