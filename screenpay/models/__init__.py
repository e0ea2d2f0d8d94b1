from screenpay.models.withdrawal import Withdrawal, PENDING, AUTO_COMPLETED
from screenpay.models.user_record import UserRecord, Document

__all__ = ["Withdrawal", "UserRecord", "Document", "PENDING", "AUTO_COMPLETED"]
