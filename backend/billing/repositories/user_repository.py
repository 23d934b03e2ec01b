"""User Repository - SQLAlchemy implementation of the identity store.

Invariants:
    - find_by_email matches the stored email exactly
    - A duplicate email on create raises ConflictError
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from billing.core.domain_types import UserId
from billing.core.entities import User
from billing.models.user import UserRow
from billing.repositories.errors import translate_db_errors

logger = logging.getLogger(__name__)


class SqlUserRepository:

    async def create(self, db: AsyncSession, user: User) -> User:
        row = UserRow.from_entity(user)
        with translate_db_errors("user.create"):
            db.add(row)
            await db.flush()
        user.id = UserId(row.id)
        user.created_at = row.created_at
        user.updated_at = row.updated_at
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def find_by_id(self, db: AsyncSession, user_id: UserId) -> User | None:
        with translate_db_errors("user.find_by_id"):
            result = await db.execute(select(UserRow).where(UserRow.id == user_id))
            row = result.scalar_one_or_none()
        return row.to_entity() if row else None

    async def find_by_email(self, db: AsyncSession, email: str) -> User | None:
        with translate_db_errors("user.find_by_email"):
            result = await db.execute(select(UserRow).where(UserRow.email == email))
            row = result.scalar_one_or_none()
        return row.to_entity() if row else None
