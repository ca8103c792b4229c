"""
Interfaces for the external services the ticket service depends on.

The payment gateway and the seat booking system are owned by other teams.
The ticket service only knows these two operations; implementations live
in the thirdparty/ package.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Takes payment for a purchase.

    Implementations either succeed or raise their own errors.
    """

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge an account."""


class SeatReservationService(ABC):
    """Reserves seats for a purchase.

    Implementations either succeed or raise their own errors.
    """

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for an account."""
