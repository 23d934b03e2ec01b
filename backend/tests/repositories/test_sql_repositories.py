"""SQL Repositories - verifies create/find round trips and store-assigned fields.

Tests:
    - create() hydrates id (26-char ULID) and both timestamps
    - find_* returns None for unknown keys, never raises
    - Duplicate email raises ConflictError
    - Caller-supplied timestamps are ignored by the store
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from billing.core.domain_types import InvoiceStatus
from billing.core.entities import ClientBankAccount, Invoice, User
from billing.core.errors import ConflictError
from billing.core.request_context import RequestContext
from billing.repositories.client_bank_account_repository import SqlClientBankAccountRepository
from billing.repositories.client_repository import SqlClientRepository
from billing.repositories.company_repository import SqlCompanyRepository
from billing.repositories.invoice_repository import SqlInvoiceRepository
from billing.repositories.user_repository import SqlUserRepository
from billing.services.invoice_service import InvoiceService

UNKNOWN_ID = "01HZZZZZZZZZZZZZZZZZZZZZZZ"


async def test_company_round_trip(test_db, company):
    assert len(company.id) == 26
    assert company.created_at is not None
    assert company.updated_at is not None
    loaded = await SqlCompanyRepository().find_by_id(test_db, company.id)
    assert loaded.corporate_name == "Acme Corp"
    assert loaded.id == company.id


async def test_find_unknown_returns_none(test_db):
    assert await SqlCompanyRepository().find_by_id(test_db, UNKNOWN_ID) is None
    assert await SqlUserRepository().find_by_id(test_db, UNKNOWN_ID) is None
    assert await SqlClientRepository().find_by_id(test_db, UNKNOWN_ID) is None
    assert await SqlClientBankAccountRepository().find_by_id(test_db, UNKNOWN_ID) is None


async def test_user_found_by_email_and_id(test_db, user):
    repo = SqlUserRepository()
    by_email = await repo.find_by_email(test_db, "admin@localhost.ai")
    by_id = await repo.find_by_id(test_db, user.id)
    assert by_email.id == by_id.id == user.id
    assert by_email.company_id == user.company_id
    assert await repo.find_by_email(test_db, "nobody@localhost.ai") is None


async def test_duplicate_email_raises_conflict(test_db, user):
    with pytest.raises(ConflictError):
        await SqlUserRepository().create(test_db, User(
            company_id=user.company_id, name="Other",
            email="admin@localhost.ai", password="x",
        ))


async def test_store_overrides_caller_timestamps(test_db, company):
    stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
    created = await SqlUserRepository().create(test_db, User(
        company_id=company.id, name="Late", email="late@localhost.ai",
        password="x", created_at=stale, updated_at=stale,
    ))
    assert created.created_at != stale
    assert created.updated_at != stale


async def test_client_and_bank_account_round_trip(test_db, client_entity):
    account = await SqlClientBankAccountRepository().create(test_db, ClientBankAccount(
        client_id=client_entity.id, bank_name="Sample Bank",
        branch_name="Head Office", account_number="1234567",
        account_name="CLIENT LLC",
    ))
    loaded = await SqlClientBankAccountRepository().find_by_id(test_db, account.id)
    assert loaded.client_id == client_entity.id
    assert loaded.account_number == "1234567"

    loaded_client = await SqlClientRepository().find_by_id(test_db, client_entity.id)
    assert loaded_client.company_id == client_entity.company_id


def _invoice(company_id, client_id, due: date, amount: str = "100000") -> Invoice:
    return Invoice(
        company_id=company_id,
        client_id=client_id,
        issue_date=date(2024, 1, 1),
        payment_amount=Decimal(amount),
        fee=Decimal("4000"),
        fee_rate=Decimal("0.0400"),
        tax=Decimal("400"),
        tax_rate=Decimal("0.1000"),
        invoice_amount=Decimal("104400"),
        payment_due_date=due,
    )


async def test_invoice_round_trip(test_db, company, client_entity):
    repo = SqlInvoiceRepository()
    created = await repo.create(test_db, _invoice(company.id, client_entity.id, date(2024, 1, 31)))
    assert len(created.id) == 26
    assert created.created_at is not None

    [loaded] = await repo.find_by_due_date_range(
        test_db, date.min, date.max, 0, 100,
    )
    assert loaded.id == created.id
    assert loaded.company_id == company.id
    assert loaded.client_id == client_entity.id
    assert loaded.issue_date == date(2024, 1, 1)
    assert loaded.payment_due_date == date(2024, 1, 31)
    assert loaded.payment_amount == Decimal("100000")
    assert loaded.fee == Decimal("4000")
    assert loaded.fee_rate == Decimal("0.04")
    assert loaded.tax == Decimal("400")
    assert loaded.tax_rate == Decimal("0.1")
    assert loaded.invoice_amount == Decimal("104400")
    assert loaded.status is InvoiceStatus.UNPROCESSED


async def test_range_is_inclusive_and_ordered(test_db, company, client_entity):
    repo = SqlInvoiceRepository()
    for due in (date(2024, 3, 31), date(2024, 1, 31), date(2024, 2, 29), date(2024, 4, 30)):
        await repo.create(test_db, _invoice(company.id, client_entity.id, due))

    found = await repo.find_by_due_date_range(
        test_db, date(2024, 1, 31), date(2024, 3, 31), 0, 100,
    )
    assert [i.payment_due_date for i in found] == [
        date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31),
    ]


async def test_range_pages_do_not_overlap(test_db, company, client_entity):
    repo = SqlInvoiceRepository()
    for _ in range(5):
        await repo.create(test_db, _invoice(company.id, client_entity.id, date(2024, 5, 31)))

    first = await repo.find_by_due_date_range(test_db, date.min, date.max, 0, 3)
    second = await repo.find_by_due_date_range(test_db, date.min, date.max, 3, 3)
    assert len(first) == 3
    assert len(second) == 2
    assert {i.id for i in first}.isdisjoint({i.id for i in second})
    assert [i.id for i in first + second] == sorted(i.id for i in first + second)


async def test_range_without_matches_is_empty(test_db, company, client_entity):
    repo = SqlInvoiceRepository()
    await repo.create(test_db, _invoice(company.id, client_entity.id, date(2024, 1, 31)))
    assert await repo.find_by_due_date_range(
        test_db, date(2025, 1, 1), date(2025, 12, 31), 0, 100,
    ) == []


async def test_reloaded_invoice_keeps_total_identity(test_db, test_session_factory, company, client_entity):
    service = InvoiceService(
        SqlInvoiceRepository(), SqlUserRepository(),
        fee_rate=Decimal("0.04"), tax_rate=Decimal("0.10"),
    )
    user = await SqlUserRepository().create(test_db, User(
        company_id=company.id, name="Issuer", email="issuer@localhost.ai", password="x",
    ))
    ctx = RequestContext().with_transaction(test_db).with_identity(user.id)
    created = await service.create_invoice(
        ctx, client_entity.id, date(2024, 1, 1), Decimal("1000.5"), date(2024, 1, 31),
    )
    await test_db.commit()

    async with test_session_factory() as fresh:
        [loaded] = await SqlInvoiceRepository().find_by_due_date_range(
            fresh, date.min, date.max, 0, 100,
        )
    assert loaded.invoice_amount == loaded.payment_amount + loaded.fee + loaded.tax
    for field in ("payment_amount", "fee", "tax", "invoice_amount"):
        assert str(getattr(loaded, field)) == str(getattr(created, field))
    assert loaded.created_at.tzinfo is not None
    assert loaded.updated_at.tzinfo is not None
