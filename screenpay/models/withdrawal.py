import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from screenpay.utils.money import to_money
from screenpay.utils.timestamps import utc_now, to_iso

PENDING = "pending"
AUTO_COMPLETED = "auto_completed"


def gen_withdraw_id():
    return f"wd_{uuid.uuid4().hex[:12]}"


@dataclass
class Withdrawal:
    id: str
    amount: Decimal
    status: str = PENDING
    requested_at: Optional[str] = None
    processed_at: Optional[str] = None

    def __post_init__(self):
        self.id = str(self.id)
        self.amount = to_money(self.amount)

    @classmethod
    def create(cls, amount, now=None):
        return cls(
            id=gen_withdraw_id(),
            amount=to_money(amount),
            status=PENDING,
            requested_at=to_iso(now or utc_now()),
        )

    @property
    def is_pending(self):
        return self.status == PENDING

    def mark(self, status, now=None):
        self.status = status
        self.processed_at = to_iso(now or utc_now())
