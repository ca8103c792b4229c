"""
Mock seat booking system for demos and tests.

Simulates reserving seats by logging the reservation. Seat numbers are not
allocated; the booking system only needs to know how many.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ticketing.ports import SeatReservationService

logger = logging.getLogger("seat_booking")


class SeatReservationError(Exception):
    """The seat booking system could not reserve the seats."""


@dataclass
class ReservationRecord:
    """A reservation the booking system has made."""
    account_id: int
    seats: int
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def __str__(self) -> str:
        return f"{self.seats} seats for account {self.account_id}"


class MockSeatReservationService(SeatReservationService):
    """
    Mock seat booking system.

    Logs reservations and tracks them for test assertions.
    Can simulate failures for testing error handling.
    """

    def __init__(self, fail_rate: float = 0.0):
        """
        Initialize the booking system.

        Args:
            fail_rate: Probability of reservation failure (0.0 to 1.0), for testing.
        """
        self.fail_rate = fail_rate
        self.reservations: list[ReservationRecord] = []

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """
        Reserve seats (mock implementation).

        Raises:
            ValueError: If the account ID or seat count is invalid
            SeatReservationError: If a failure is simulated
        """
        if account_id <= 0:
            raise ValueError(f"Invalid account ID: {account_id}")
        if total_seats_to_allocate < 0:
            raise ValueError(f"Seat count cannot be negative: {total_seats_to_allocate}")

        if random.random() < self.fail_rate:
            logger.error(f"[RESERVATION FAILED] Account: {account_id} | Seats: {total_seats_to_allocate}")
            raise SeatReservationError(f"Simulated reservation failure for account {account_id}")

        record = ReservationRecord(account_id=account_id, seats=total_seats_to_allocate)
        self.reservations.append(record)
        logger.info(f"[RESERVATION] Account: {account_id} | Seats: {total_seats_to_allocate}")

    def get_reservation_count(self) -> int:
        """Get the number of reservations made (for testing)."""
        return len(self.reservations)

    def get_total_seats(self, account_id: Optional[int] = None) -> int:
        """Total seats reserved, optionally for one account."""
        return sum(
            r.seats for r in self.reservations
            if account_id is None or r.account_id == account_id
        )

    def last_reservation(self) -> Optional[ReservationRecord]:
        """The most recent reservation, if any."""
        return self.reservations[-1] if self.reservations else None

    def clear_history(self):
        """Clear reservation history (useful between tests)."""
        self.reservations.clear()
