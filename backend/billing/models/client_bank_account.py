"""ClientBankAccount ORM - where a client receives payment."""

from datetime import datetime

from sqlalchemy import CHAR, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from billing.core.domain_types import ClientBankAccountId, ClientId
from billing.core.entities import ClientBankAccount
from billing.db.base import Base
from billing.models._columns import (
    ULID_LENGTH, as_utc, created_at_column, ulid_primary_key, updated_at_column,
)


class ClientBankAccountRow(Base):
    __tablename__ = "client_bank_accounts"

    id: Mapped[str] = ulid_primary_key()
    client_id: Mapped[str] = mapped_column(
        CHAR(ULID_LENGTH), ForeignKey("clients.id"), nullable=False, index=True,
    )
    bank_name: Mapped[str] = mapped_column(String(255), nullable=False)
    branch_name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_number: Mapped[str] = mapped_column(String(20), nullable=False)
    account_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    @classmethod
    def from_entity(cls, account: ClientBankAccount) -> "ClientBankAccountRow":
        row = cls(
            client_id=account.client_id,
            bank_name=account.bank_name,
            branch_name=account.branch_name,
            account_number=account.account_number,
            account_name=account.account_name,
        )
        if account.id:
            row.id = account.id
        return row

    def to_entity(self) -> ClientBankAccount:
        return ClientBankAccount(
            id=ClientBankAccountId(self.id),
            client_id=ClientId(self.client_id),
            bank_name=self.bank_name,
            branch_name=self.branch_name,
            account_number=self.account_number,
            account_name=self.account_name,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
