"""API test fixtures - FastAPI client over an in-memory database.

Invariants:
    - db_manager points at the test engine, so get_db runs its real
      transaction() (commit on success, rollback on error)
    - seeded stores the admin user, a client and one invoice before the request

Design Decisions:
    - db_manager patched instead of overriding get_db: the commit/rollback
      path under test is the one production uses
"""

from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

import billing.infrastructure.database as db_module
from billing.core.request_context import RequestContext
from billing.infrastructure.database import DatabaseSessionManager
from billing.infrastructure.security import PasswordHasher
from billing.main import app
from billing.repositories.invoice_repository import SqlInvoiceRepository
from billing.repositories.user_repository import SqlUserRepository
from billing.seed import DEFAULT_EMAIL, DEFAULT_PASSWORD, seed
from billing.services.invoice_service import InvoiceService

SEED_DATE = date(2024, 1, 10)


@pytest.fixture
async def client(test_engine, test_session_factory):
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seeded(test_session_factory):
    async with test_session_factory() as session:
        result = await seed(
            RequestContext().with_transaction(session),
            email=DEFAULT_EMAIL,
            password=DEFAULT_PASSWORD,
            password_hasher=PasswordHasher(rounds=4),
            invoice_service=InvoiceService(
                SqlInvoiceRepository(), SqlUserRepository(),
                fee_rate=Decimal("0.04"), tax_rate=Decimal("0.10"),
            ),
            today=SEED_DATE,
        )
        await session.commit()
    return result


@pytest.fixture
async def auth_headers(client, seeded):
    res = await client.post(
        "/api/login", json={"email": DEFAULT_EMAIL, "password": DEFAULT_PASSWORD},
    )
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
