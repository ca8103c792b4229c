"""
Ticket purchasing for the venue.

TicketService checks a purchase against the ticket rules, works out what it
costs and how many seats it needs, then hands off to the payment gateway and
the seat booking system.

Rules enforced:
- The account ID must be a positive number
- At least one ticket request, and no missing requests
- No more than 25 tickets in one purchase
- Child and Infant tickets need at least one Adult ticket
- Infants sit on an adult's lap, so never more infants than adults
- Infants are free and don't get a seat

Nothing is charged or reserved until every rule has passed.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from ticketing.exceptions import InvalidPurchaseError
from ticketing.models import PurchaseTotals, TicketType, TicketTypeRequest
from ticketing.ports import SeatReservationService, TicketPaymentService

logger = logging.getLogger("ticket_service")

MAXIMUM_TICKETS = 25


class TicketService:
    """
    Validates and processes ticket purchases.

    Holds no state between purchases apart from its two collaborators.

    Example:
        service = TicketService(payment_service, reservation_service)
        service.purchase_tickets(
            1,
            TicketTypeRequest(TicketType.ADULT, 2),
            TicketTypeRequest(TicketType.CHILD, 1),
        )
    """

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
    ):
        if payment_service is None:
            raise ValueError("Payment service cannot be None")
        if reservation_service is None:
            raise ValueError("Reservation service cannot be None")
        self._payment_service = payment_service
        self._reservation_service = reservation_service

    @property
    def payment_service(self) -> TicketPaymentService:
        return self._payment_service

    @property
    def reservation_service(self) -> SeatReservationService:
        return self._reservation_service

    def purchase_tickets(
        self,
        account_id: Optional[int],
        *ticket_requests: Optional[TicketTypeRequest],
    ) -> None:
        """
        Purchase tickets for an account.

        Pays for the tickets, then reserves their seats. Errors from the
        payment or reservation services are not caught.

        Raises:
            InvalidPurchaseError: If the purchase breaks any ticket rule.
                Neither external service is called in that case.
        """
        try:
            self._verify_account(account_id)
            totals = self.calculate_totals(ticket_requests)
        except InvalidPurchaseError as e:
            logger.warning(f"Purchase rejected for account {account_id}: {e.message}")
            raise

        self._payment_service.make_payment(account_id, totals.total_cost)
        self._reservation_service.reserve_seat(account_id, totals.total_seats)

        logger.info(
            f"Purchase complete for account {account_id}: "
            f"{totals.total_tickets} tickets, £{totals.total_cost}, "
            f"{totals.total_seats} seats"
        )

    def calculate_totals(
        self,
        ticket_requests: Optional[Iterable[Optional[TicketTypeRequest]]],
    ) -> PurchaseTotals:
        """
        Check a set of ticket requests and add them up.

        Applies every rule except the account check, without calling
        either external service.

        Raises:
            InvalidPurchaseError: If the requests break any ticket rule.
        """
        requests = self._verify_ticket_requests(ticket_requests)
        totals = self._aggregate(requests)

        self._verify_total_tickets(totals.total_tickets)
        self._verify_adult_count(totals.adult_count, totals.infant_count)

        return totals

    @staticmethod
    def _aggregate(requests: list[TicketTypeRequest]) -> PurchaseTotals:
        """Add up ticket counts, cost and seats in one pass."""
        counts = {ticket_type: 0 for ticket_type in TicketType}
        total_cost = 0
        total_seats = 0

        for request in requests:
            rule = request.rule
            counts[request.ticket_type] += request.quantity
            total_cost += rule.price * request.quantity
            if rule.requires_seat:
                total_seats += request.quantity

        return PurchaseTotals(
            total_tickets=sum(counts.values()),
            total_cost=total_cost,
            total_seats=total_seats,
            adult_count=counts[TicketType.ADULT],
            child_count=counts[TicketType.CHILD],
            infant_count=counts[TicketType.INFANT],
        )

    @staticmethod
    def _verify_account(account_id: Optional[int]) -> None:
        # bool is an int subclass but never a real account
        if (
            account_id is None
            or isinstance(account_id, bool)
            or not isinstance(account_id, int)
            or account_id <= 0
        ):
            raise InvalidPurchaseError("Account ID must be a positive number")

    @staticmethod
    def _verify_ticket_requests(
        ticket_requests: Optional[Iterable[Optional[TicketTypeRequest]]],
    ) -> list[TicketTypeRequest]:
        requests = list(ticket_requests) if ticket_requests is not None else []
        if not requests:
            raise InvalidPurchaseError("Ticket request list cannot be empty")
        for request in requests:
            if request is None:
                raise InvalidPurchaseError("Individual ticket request cannot be None")
        return requests

    @staticmethod
    def _verify_total_tickets(total_tickets: int) -> None:
        if total_tickets > MAXIMUM_TICKETS:
            raise InvalidPurchaseError(
                f"You cannot purchase more than {MAXIMUM_TICKETS} tickets at a time"
            )

    @staticmethod
    def _verify_adult_count(adult_count: int, infant_count: int) -> None:
        # Zero adults always fails, whatever else was requested
        if adult_count == 0:
            raise InvalidPurchaseError(
                "Child and Infant tickets cannot be purchased without an Adult ticket"
            )
        if infant_count > adult_count:
            raise InvalidPurchaseError("Each infant must have an accompanying adult lap")
