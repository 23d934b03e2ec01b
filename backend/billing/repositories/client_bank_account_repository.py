"""ClientBankAccount Repository - SQLAlchemy implementation of ClientBankAccountRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from billing.core.domain_types import ClientBankAccountId
from billing.core.entities import ClientBankAccount
from billing.models.client_bank_account import ClientBankAccountRow
from billing.repositories.errors import translate_db_errors


class SqlClientBankAccountRepository:

    async def create(
        self, db: AsyncSession, account: ClientBankAccount,
    ) -> ClientBankAccount:
        row = ClientBankAccountRow.from_entity(account)
        with translate_db_errors("client_bank_account.create"):
            db.add(row)
            await db.flush()
        account.id = ClientBankAccountId(row.id)
        account.created_at = row.created_at
        account.updated_at = row.updated_at
        return account

    async def find_by_id(
        self, db: AsyncSession, account_id: ClientBankAccountId,
    ) -> ClientBankAccount | None:
        with translate_db_errors("client_bank_account.find_by_id"):
            result = await db.execute(
                select(ClientBankAccountRow).where(ClientBankAccountRow.id == account_id),
            )
            row = result.scalar_one_or_none()
        return row.to_entity() if row else None
