"""
Mock payment gateway for demos and tests.

Simulates taking payment by logging it. In a real deployment this would be
a client for the venue's payment provider.

Design decisions:
- All payments are logged for visibility
- Payments are recorded for test assertions
- Failures can be simulated with a fail rate
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ticketing.ports import TicketPaymentService

logger = logging.getLogger("payment_gateway")


class PaymentError(Exception):
    """The payment gateway refused or failed to take a payment."""


@dataclass
class PaymentRecord:
    """A payment the gateway has taken."""
    account_id: int
    amount: int
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def __str__(self) -> str:
        return f"£{self.amount} from account {self.account_id}"


class MockTicketPaymentService(TicketPaymentService):
    """
    Mock payment gateway.

    Logs payments and tracks them for test assertions.
    Can simulate failures for testing error handling.
    """

    def __init__(self, fail_rate: float = 0.0):
        """
        Initialize the payment gateway.

        Args:
            fail_rate: Probability of payment failure (0.0 to 1.0), for testing.
        """
        self.fail_rate = fail_rate
        self.payments: list[PaymentRecord] = []

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """
        Take a payment (mock implementation).

        Raises:
            ValueError: If the account ID or amount is invalid
            PaymentError: If a failure is simulated
        """
        if account_id <= 0:
            raise ValueError(f"Invalid account ID: {account_id}")
        if total_amount_to_pay < 0:
            raise ValueError(f"Payment amount cannot be negative: {total_amount_to_pay}")

        if random.random() < self.fail_rate:
            logger.error(f"[PAYMENT FAILED] Account: {account_id} | Amount: £{total_amount_to_pay}")
            raise PaymentError(f"Simulated payment failure for account {account_id}")

        record = PaymentRecord(account_id=account_id, amount=total_amount_to_pay)
        self.payments.append(record)
        logger.info(f"[PAYMENT] Account: {account_id} | Amount: £{total_amount_to_pay}")

    def get_payment_count(self) -> int:
        """Get the number of payments taken (for testing)."""
        return len(self.payments)

    def get_total_charged(self, account_id: Optional[int] = None) -> int:
        """Total charged, optionally for one account."""
        return sum(
            p.amount for p in self.payments
            if account_id is None or p.account_id == account_id
        )

    def last_payment(self) -> Optional[PaymentRecord]:
        """The most recent payment, if any."""
        return self.payments[-1] if self.payments else None

    def clear_history(self):
        """Clear payment history (useful between tests)."""
        self.payments.clear()
