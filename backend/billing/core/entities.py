"""Domain Entities - plain dataclasses passed between services and store ports.

Invariants:
    - id, created_at, updated_at are assigned by the store; callers leave them unset
    - Monetary fields are Decimal, dates are datetime.date
    - Entities never reference ORM rows; models/ converts in one place per entity

Design Decisions:
    - Mutable dataclasses: the store hydrates id and timestamps in place after
      insert, the same object the service built is returned to the caller
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from billing.core.domain_types import (
    ClientBankAccountId, ClientId, CompanyId, InvoiceId, InvoiceStatus, UserId,
)


@dataclass
class Company:
    corporate_name: str
    representative_name: str
    phone_number: str
    postal_code: str
    address: str
    id: CompanyId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class User:
    company_id: CompanyId
    name: str
    email: str
    password: str  # bcrypt hash, never the plain text
    id: UserId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Client:
    company_id: CompanyId
    corporate_name: str
    representative_name: str
    phone_number: str
    postal_code: str
    address: str
    id: ClientId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ClientBankAccount:
    client_id: ClientId
    bank_name: str
    branch_name: str
    account_number: str
    account_name: str
    id: ClientBankAccountId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Invoice:
    """A bill issued by a company to one of its clients."""
    company_id: CompanyId
    client_id: ClientId
    issue_date: date
    payment_amount: Decimal
    fee: Decimal
    fee_rate: Decimal
    tax: Decimal
    tax_rate: Decimal
    invoice_amount: Decimal
    payment_due_date: date
    status: InvoiceStatus = InvoiceStatus.UNPROCESSED
    id: InvoiceId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
