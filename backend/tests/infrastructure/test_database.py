"""Database Session Manager - verifies commit, rollback and error mapping.

Tests:
    - transaction() commits rows written inside a clean block
    - transaction() rolls back when the block raises
    - A uniqueness violation at commit surfaces as ConflictError
    - health_check reports a reachable database
"""

import pytest
from sqlalchemy import func, select

from billing.core.errors import ConflictError
from billing.db.base import Base
from billing.infrastructure.database import DatabaseSessionManager
from billing.models.company import CompanyRow
from billing.models.user import UserRow


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'billing.db'}")
    async with mgr.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield mgr
    await mgr.dispose()


def _company() -> CompanyRow:
    return CompanyRow(
        corporate_name="Acme", representative_name="Rep",
        phone_number="000", postal_code="000-0000", address="Tokyo",
    )


async def _count(manager, model) -> int:
    async with manager.session() as db:
        return await db.scalar(select(func.count()).select_from(model))


async def test_transaction_commits_on_success(manager):
    async with manager.transaction() as db:
        db.add(_company())
    assert await _count(manager, CompanyRow) == 1


async def test_transaction_rolls_back_on_error(manager):
    with pytest.raises(RuntimeError):
        async with manager.transaction() as db:
            db.add(_company())
            await db.flush()
            raise RuntimeError("boom")
    assert await _count(manager, CompanyRow) == 0


async def test_duplicate_email_at_commit_raises_conflict(manager):
    async with manager.transaction() as db:
        company = _company()
        db.add(company)
        await db.flush()
        company_id = company.id

    with pytest.raises(ConflictError):
        async with manager.transaction() as db:
            for _ in range(2):
                db.add(UserRow(
                    company_id=company_id, name="Admin",
                    email="admin@localhost.ai", password="x",
                ))
    assert await _count(manager, UserRow) == 0


async def test_health_check_reports_reachable_database(manager):
    assert await manager.health_check() is True
