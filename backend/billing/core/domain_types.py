"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - CompanyId, UserId, ClientId, ClientBankAccountId, InvoiceId wrap 26-char ULID strings
    - InvoiceStatus is closed: every consumer matches all four members
    - InvoiceStatus values are the labels persisted in invoices.status

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and to a VARCHAR column without custom encoders
    - Labels kept from the system of record so existing rows stay readable
"""

from enum import Enum
from typing import NewType, assert_never


# ─── Identity Types ──────────────────────────────────────────────

CompanyId = NewType("CompanyId", str)
UserId = NewType("UserId", str)
ClientId = NewType("ClientId", str)
ClientBankAccountId = NewType("ClientBankAccountId", str)
InvoiceId = NewType("InvoiceId", str)


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice processing states - maps to DB `status` column."""
    UNPROCESSED = "未処理"
    PROCESSING = "処理中"
    PROCESSED = "処理済"
    ERROR = "エラー"

    @property
    def is_final(self) -> bool:
        """True once processing has finished, successfully or not."""
        match self:
            case InvoiceStatus.UNPROCESSED | InvoiceStatus.PROCESSING:
                return False
            case InvoiceStatus.PROCESSED | InvoiceStatus.ERROR:
                return True
            case _:
                assert_never(self)
