"""
Demonstration scripts for the ticket service.

Each scenario runs one purchase against the mock payment gateway and seat
booking system, then prints what was charged and reserved.
"""

from typing import Callable

from thirdparty.payment_gateway import MockTicketPaymentService
from thirdparty.seat_booking import MockSeatReservationService
from ticketing.config import configure_logging
from ticketing.exceptions import InvalidPurchaseError
from ticketing.models import TicketType, TicketTypeRequest
from ticketing.ticket_service import TicketService


def _run_purchase(title: str, account_id: int, *requests: TicketTypeRequest) -> bool:
    """Run one purchase with fresh services and print the outcome."""
    print("\n" + "=" * 70)
    print(f"DEMO: {title}")
    print("=" * 70 + "\n")

    payment_service = MockTicketPaymentService()
    reservation_service = MockSeatReservationService()
    ticket_service = TicketService(payment_service, reservation_service)

    print(f"Account {account_id} requests: " + ", ".join(str(r) for r in requests))
    print("-" * 70)

    try:
        ticket_service.purchase_tickets(account_id, *requests)
    except InvalidPurchaseError as e:
        print(f"\nREJECTED: {e.message}")
        print(f"  Payments taken:     {payment_service.get_payment_count()}")
        print(f"  Reservations made:  {reservation_service.get_reservation_count()}")
        return False

    print("\nACCEPTED")
    print(f"  Charged:        £{payment_service.get_total_charged(account_id)}")
    print(f"  Seats reserved: {reservation_service.get_total_seats(account_id)}")
    return True


def run_valid_demo() -> bool:
    """Two adults: the simplest accepted purchase."""
    return _run_purchase(
        "Adults only",
        1,
        TicketTypeRequest(TicketType.ADULT, 2),
    )


def run_mixed_demo() -> bool:
    """A family purchase: infants are free and don't take a seat."""
    return _run_purchase(
        "Adult, children and an infant",
        99,
        TicketTypeRequest(TicketType.ADULT, 1),
        TicketTypeRequest(TicketType.CHILD, 2),
        TicketTypeRequest(TicketType.INFANT, 1),
    )


def run_no_adult_demo() -> bool:
    """Children on their own are turned away."""
    return _run_purchase(
        "Children without an adult",
        1,
        TicketTypeRequest(TicketType.CHILD, 2),
    )


def run_too_many_infants_demo() -> bool:
    """Each infant needs an adult lap."""
    return _run_purchase(
        "More infants than adults",
        10,
        TicketTypeRequest(TicketType.ADULT, 1),
        TicketTypeRequest(TicketType.INFANT, 2),
    )


def run_too_many_tickets_demo() -> bool:
    """No more than 25 tickets per purchase."""
    return _run_purchase(
        "Over the ticket limit",
        1,
        TicketTypeRequest(TicketType.ADULT, 20),
        TicketTypeRequest(TicketType.CHILD, 6),
    )


SCENARIOS: dict[str, Callable[[], bool]] = {
    "valid": run_valid_demo,
    "mixed": run_mixed_demo,
    "no-adult": run_no_adult_demo,
    "too-many-infants": run_too_many_infants_demo,
    "too-many": run_too_many_tickets_demo,
}


def run_all_demos() -> dict[str, bool]:
    """Run every scenario and return whether each purchase was accepted."""
    return {name: scenario() for name, scenario in SCENARIOS.items()}


if __name__ == "__main__":
    configure_logging()
    run_all_demos()
