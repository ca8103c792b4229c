"""
Stand-ins for the external services the ticket service calls.

- Payment gateway: takes payment for a purchase
- Seat booking: reserves seats for a purchase

Both log what they do and record it so tests and demos can inspect it.
"""

from thirdparty.payment_gateway import MockTicketPaymentService, PaymentError, PaymentRecord
from thirdparty.seat_booking import (
    MockSeatReservationService,
    ReservationRecord,
    SeatReservationError,
)

__all__ = [
    "MockTicketPaymentService",
    "PaymentError",
    "PaymentRecord",
    "MockSeatReservationService",
    "ReservationRecord",
    "SeatReservationError",
]
