"""Boundary Protocols - contracts between the core and the persistence shell.

Invariants:
    - Core NEVER imports from repositories/ - dependency arrows point inward only
    - Every method takes the request's transaction handle first and uses it unchanged
    - find_* return None for "no such row"; every other failure raises
      DependencyFailureError (ConflictError for constraint violations)
    - create() assigns id, created_at and updated_at on the passed entity and returns it

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; the arithmetic they surround stays sync
    - None for not-found instead of raising: Authenticator must tell "unknown email"
      from "database down" without catching driver-specific exceptions
"""

from datetime import date
from typing import Any, Protocol

from billing.core.domain_types import ClientBankAccountId, ClientId, CompanyId, UserId
from billing.core.entities import Client, ClientBankAccount, Company, Invoice, User


class UserRepository(Protocol):
    """Identity store - implemented by the shell."""
    async def create(self, db: Any, user: User) -> User: ...
    async def find_by_id(self, db: Any, user_id: UserId) -> User | None: ...
    async def find_by_email(self, db: Any, email: str) -> User | None: ...


class CompanyRepository(Protocol):
    async def create(self, db: Any, company: Company) -> Company: ...
    async def find_by_id(self, db: Any, company_id: CompanyId) -> Company | None: ...


class ClientRepository(Protocol):
    async def create(self, db: Any, client: Client) -> Client: ...
    async def find_by_id(self, db: Any, client_id: ClientId) -> Client | None: ...


class ClientBankAccountRepository(Protocol):
    async def create(
        self, db: Any, account: ClientBankAccount,
    ) -> ClientBankAccount: ...
    async def find_by_id(
        self, db: Any, account_id: ClientBankAccountId,
    ) -> ClientBankAccount | None: ...


class InvoiceRepository(Protocol):
    """Invoice store - implemented by the shell."""
    async def create(self, db: Any, invoice: Invoice) -> Invoice: ...
    async def find_by_due_date_range(
        self, db: Any, start: date, end: date, offset: int, limit: int,
    ) -> list[Invoice]: ...
