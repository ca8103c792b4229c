"""
FastAPI application for the ticket service.

This application provides:
1. Ticket type and price listing (/ticket-types)
2. Ticket purchasing (/purchases)

The API only turns JSON into ticket requests and errors into responses.
All purchase rules live in ticketing.ticket_service.

Run with:
    uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from thirdparty.payment_gateway import MockTicketPaymentService, PaymentError
from thirdparty.seat_booking import MockSeatReservationService, SeatReservationError
from ticketing.config import configure_logging
from ticketing.exceptions import InvalidPurchaseError
from ticketing.models import TICKET_RULES, TicketType, TicketTypeRequest
from ticketing.ticket_service import TicketService

configure_logging()

logger = logging.getLogger("ticket_api")


# Request/response models
class PurchaseRequest(BaseModel):
    """
    Request to buy tickets for an account.

    Account and list checks are left to the ticket service, so a missing
    account or a null ticket request is rejected with the service's message.
    """
    account_id: Optional[int] = Field(default=None, description="Account making the purchase")
    ticket_requests: Optional[list[Optional[TicketTypeRequest]]] = Field(
        default=None,
        description="Ticket types and quantities requested",
    )


class PurchaseResponse(BaseModel):
    """What was charged and reserved for a purchase."""
    account_id: int
    total_cost: int
    seats_reserved: int


class TicketTypeInfo(BaseModel):
    """Price and seat rule for one ticket type."""
    ticket_type: TicketType
    price: int
    requires_seat: bool


# Module-level instances (would use proper DI in production)
_payment_service: Optional[MockTicketPaymentService] = None
_reservation_service: Optional[MockSeatReservationService] = None


def get_payment_service() -> MockTicketPaymentService:
    """Get the payment gateway instance."""
    global _payment_service
    if _payment_service is None:
        _payment_service = MockTicketPaymentService()
    return _payment_service


def get_reservation_service() -> MockSeatReservationService:
    """Get the seat booking instance."""
    global _reservation_service
    if _reservation_service is None:
        _reservation_service = MockSeatReservationService()
    return _reservation_service


def reset_api_state(
    payment_service: Optional[MockTicketPaymentService] = None,
    reservation_service: Optional[MockSeatReservationService] = None,
) -> None:
    """Reset API state (for testing)."""
    global _payment_service, _reservation_service
    _payment_service = payment_service
    _reservation_service = reservation_service


# Exception handlers
async def invalid_purchase_handler(request: Request, exc: Exception) -> JSONResponse:
    message = exc.message if isinstance(exc, InvalidPurchaseError) else str(exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Upstream service failed: {exc}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting Ticket Service API")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Ticket Service",
    description="""
    Validates and processes ticket purchases for the venue.

    ## Rules

    - Adult £25, Child £15, Infant free (no seat, sits on an adult's lap)
    - Up to 25 tickets per purchase
    - Child and Infant tickets need an Adult ticket
    - No more infants than adults
    """,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_exception_handler(InvalidPurchaseError, invalid_purchase_handler)
app.add_exception_handler(PaymentError, upstream_error_handler)
app.add_exception_handler(SeatReservationError, upstream_error_handler)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "ticket-service"}


# =============================================================================
# Tickets
# =============================================================================

@app.get("/ticket-types", response_model=list[TicketTypeInfo], tags=["Tickets"])
def list_ticket_types() -> list[TicketTypeInfo]:
    """List every ticket type with its price and seat rule."""
    return [
        TicketTypeInfo(ticket_type=ticket_type, price=rule.price, requires_seat=rule.requires_seat)
        for ticket_type, rule in TICKET_RULES.items()
    ]


@app.post(
    "/purchases",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Tickets"],
)
def purchase_tickets(
    request: PurchaseRequest,
    payment_service: MockTicketPaymentService = Depends(get_payment_service),
    reservation_service: MockSeatReservationService = Depends(get_reservation_service),
) -> PurchaseResponse:
    """
    Buy tickets for an account.

    Returns 400 if the purchase breaks a ticket rule, in which case nothing
    is charged or reserved.
    """
    ticket_service = TicketService(payment_service, reservation_service)
    ticket_requests = request.ticket_requests or ()
    ticket_service.purchase_tickets(request.account_id, *ticket_requests)

    # Shared collaborators may record other requests concurrently
    totals = ticket_service.calculate_totals(ticket_requests)
    return PurchaseResponse(
        account_id=request.account_id,
        total_cost=totals.total_cost,
        seats_reserved=totals.total_seats,
    )
