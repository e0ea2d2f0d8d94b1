from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from screenpay.models.withdrawal import Withdrawal
from screenpay.utils.exceptions import Internal
from screenpay.utils.money import to_money


@dataclass
class UserRecord:
    screenshots: int = 0
    balance: Decimal = field(default_factory=lambda: Decimal("0.00"))
    withdraws: List[Withdrawal] = field(default_factory=list)

    def __post_init__(self):
        self.balance = to_money(self.balance)

    def find_withdrawal(self, withdraw_id) -> Optional[Withdrawal]:
        wanted = str(withdraw_id)
        for w in self.withdraws:
            if str(w.id) == wanted:
                return w
        return None


@dataclass
class Document:
    users: Dict[str, UserRecord] = field(default_factory=dict)
    # records that failed validation, written back untouched
    unreadable: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def _check_readable(self, username):
        if username in self.unreadable:
            raise Internal("user record is unreadable", details={"username": username})

    def get_user(self, username) -> Optional[UserRecord]:
        self._check_readable(username)
        return self.users.get(username)

    def get_or_create_user(self, username) -> UserRecord:
        self._check_readable(username)
        user = self.users.get(username)
        if user is None:
            user = UserRecord()
            self.users[username] = user
        return user
