"""ORM Models - SQLAlchemy declarative models for all billing entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Company is the aggregate root; users, clients and invoices carry company_id
    - Each model owns exactly one from_entity()/to_entity() pair; no other
      module converts between rows and core.entities

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from billing.models.company import CompanyRow  # noqa: F401
from billing.models.user import UserRow  # noqa: F401
from billing.models.client import ClientRow  # noqa: F401
from billing.models.client_bank_account import ClientBankAccountRow  # noqa: F401
from billing.models.invoice import InvoiceRow  # noqa: F401
