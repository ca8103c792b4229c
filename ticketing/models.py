"""
Domain models for the ticket service.

These models describe what a customer asks for and what a purchase adds up to.
They carry no behaviour beyond their own validation.

Design decisions:
- Using Pydantic for validation at construction time
- Ticket types are a flat enum; price and seat rules live in a lookup table
- Ticket requests are frozen so they can't change between validation and payment
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Ticket Types and Pricing Rules
# =============================================================================

class TicketType(str, Enum):
    """The ticket categories sold at the venue."""
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"         # Sits on an adult's lap


@dataclass(frozen=True)
class TicketRule:
    """Price and seat requirement for a single ticket type."""
    price: int
    requires_seat: bool


TICKET_RULES: MappingProxyType[TicketType, TicketRule] = MappingProxyType({
    TicketType.ADULT: TicketRule(price=25, requires_seat=True),
    TicketType.CHILD: TicketRule(price=15, requires_seat=True),
    TicketType.INFANT: TicketRule(price=0, requires_seat=False),
})


# =============================================================================
# Ticket Requests
# =============================================================================

class TicketTypeRequest(BaseModel):
    """
    A request for a number of tickets of one type.

    Immutable once built. Construction fails with a pydantic
    ValidationError (a ValueError) when the type is missing or unknown,
    or when the quantity is not a positive integer.

    Example:
        TicketTypeRequest(TicketType.ADULT, 2)
        TicketTypeRequest(ticket_type="CHILD", quantity=1)
    """
    ticket_type: TicketType = Field(..., description="Category of ticket requested")
    quantity: int = Field(..., gt=0, strict=True, description="Number of tickets of this type")

    model_config = ConfigDict(frozen=True)

    def __init__(self, ticket_type: TicketType | str | None = None, quantity: int = 0, **data):
        super().__init__(ticket_type=ticket_type, quantity=quantity, **data)

    @property
    def rule(self) -> TicketRule:
        """Pricing rule for this request's ticket type."""
        return TICKET_RULES[self.ticket_type]

    def __str__(self) -> str:
        return f"{self.quantity} x {self.ticket_type.value}"


# =============================================================================
# Purchase Totals
# =============================================================================

@dataclass(frozen=True)
class PurchaseTotals:
    """
    Totals for one purchase, computed in a single pass over its requests.

    Only lives for the duration of a purchase call.
    """
    total_tickets: int = 0
    total_cost: int = 0
    total_seats: int = 0
    adult_count: int = 0
    child_count: int = 0
    infant_count: int = 0
