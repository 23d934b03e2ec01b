"""Invoice Schemas - Pydantic models for invoice creation and listing.

Invariants:
    - payment_amount is at least one whole currency unit, at most 2 decimal places
    - client_id is a 26-character ULID
    - Decimals serialize as strings in JSON mode, dates as YYYY-MM-DD
    - status serializes as its stored label

Design Decisions:
    - Amount precision enforced here (API boundary) so the core only sees
      values the NUMERIC(20, 2) columns can hold
    - from_entity is the single converter from core.entities.Invoice
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from billing.core.domain_types import InvoiceStatus
from billing.core.entities import Invoice


class InvoiceCreate(BaseModel):
    """Invoice creation body. Fee, tax and total are computed server-side."""
    client_id: str = Field(min_length=26, max_length=26)
    issue_date: date
    payment_amount: Decimal = Field(ge=1, max_digits=20, decimal_places=2)
    payment_due_date: date

    @field_validator("client_id")
    @classmethod
    def normalize_client_id(cls, v: str) -> str:
        return v.strip().upper()


class InvoiceResponse(BaseModel):
    id: str
    company_id: str
    client_id: str
    issue_date: date
    payment_amount: Decimal
    fee: Decimal
    fee_rate: Decimal
    tax: Decimal
    tax_rate: Decimal
    invoice_amount: Decimal
    payment_due_date: date
    status: InvoiceStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls(
            id=invoice.id,
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
            status=invoice.status,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )
