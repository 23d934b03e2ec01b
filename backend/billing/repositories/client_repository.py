"""Client Repository - SQLAlchemy implementation of ClientRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from billing.core.domain_types import ClientId
from billing.core.entities import Client
from billing.models.client import ClientRow
from billing.repositories.errors import translate_db_errors


class SqlClientRepository:

    async def create(self, db: AsyncSession, client: Client) -> Client:
        row = ClientRow.from_entity(client)
        with translate_db_errors("client.create"):
            db.add(row)
            await db.flush()
        client.id = ClientId(row.id)
        client.created_at = row.created_at
        client.updated_at = row.updated_at
        return client

    async def find_by_id(self, db: AsyncSession, client_id: ClientId) -> Client | None:
        with translate_db_errors("client.find_by_id"):
            result = await db.execute(select(ClientRow).where(ClientRow.id == client_id))
            row = result.scalar_one_or_none()
        return row.to_entity() if row else None
