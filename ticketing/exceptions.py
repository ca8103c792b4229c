"""
Errors raised by the ticket service.

Ticket requests that can't be built raise pydantic's ValidationError at
construction. Everything detected while checking a whole purchase raises
InvalidPurchaseError.
"""


class InvalidPurchaseError(Exception):
    """A purchase broke one of the ticket rules and was rejected."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
