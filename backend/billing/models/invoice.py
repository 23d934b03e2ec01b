"""Invoice ORM - persists an issued invoice and its computed charges.

Invariants:
    - Money columns are NUMERIC(20, 2), rate columns NUMERIC(5, 4); never FLOAT
    - status stores the InvoiceStatus label and is indexed
    - payment_due_date is indexed: range listing filters and orders on it

Design Decisions:
    - status as VARCHAR rather than a native ENUM: adding a member needs no
      ALTER TYPE, and InvoiceStatus(row.status) rejects unknown labels on read
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import CHAR, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from billing.core.domain_types import ClientId, CompanyId, InvoiceId, InvoiceStatus
from billing.core.entities import Invoice
from billing.db.base import Base
from billing.models._columns import (
    ULID_LENGTH, as_utc, created_at_column, ulid_primary_key, updated_at_column,
)

MONEY = Numeric(20, 2)
RATE = Numeric(5, 4)


class InvoiceRow(Base):
    __tablename__ = "invoices"

    id: Mapped[str] = ulid_primary_key()
    company_id: Mapped[str] = mapped_column(
        CHAR(ULID_LENGTH), ForeignKey("companies.id"), nullable=False, index=True,
    )
    client_id: Mapped[str] = mapped_column(
        CHAR(ULID_LENGTH), ForeignKey("clients.id"), nullable=False, index=True,
    )
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    payment_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    fee: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    fee_rate: Mapped[Decimal] = mapped_column(RATE, nullable=False)
    tax: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    tax_rate: Mapped[Decimal] = mapped_column(RATE, nullable=False)
    invoice_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    payment_due_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True,
        default=InvoiceStatus.UNPROCESSED.value,
    )
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceRow":
        row = cls(
            company_id=invoice.company_id,
            client_id=invoice.client_id,
            issue_date=invoice.issue_date,
            payment_amount=invoice.payment_amount,
            fee=invoice.fee,
            fee_rate=invoice.fee_rate,
            tax=invoice.tax,
            tax_rate=invoice.tax_rate,
            invoice_amount=invoice.invoice_amount,
            payment_due_date=invoice.payment_due_date,
            status=invoice.status.value,
        )
        if invoice.id:
            row.id = invoice.id
        return row

    def to_entity(self) -> Invoice:
        return Invoice(
            id=InvoiceId(self.id),
            company_id=CompanyId(self.company_id),
            client_id=ClientId(self.client_id),
            issue_date=self.issue_date,
            payment_amount=self.payment_amount,
            fee=self.fee,
            fee_rate=self.fee_rate,
            tax=self.tax,
            tax_rate=self.tax_rate,
            invoice_amount=self.invoice_amount,
            payment_due_date=self.payment_due_date,
            status=InvoiceStatus(self.status),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
