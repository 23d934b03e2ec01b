"""Seed Tool - one-shot bootstrap of a company, an admin login and sample data.

Invariants:
    - Everything is written in one transaction: either all rows exist or none
    - The admin password is stored bcrypt-hashed, never in plain text
    - The sample invoice goes through InvoiceService, so its fee/tax/total
      use the same configured rates as the API
    - Re-running against a seeded database fails with ConflictError (unique email)

Design Decisions:
    - click for the command line, matching the other operational commands
    - --create-schema runs Base.metadata.create_all for throwaway databases;
      real deployments migrate with Alembic first
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

import click

from billing.config import get_settings, to_async_driver_url
from billing.core.entities import Client, ClientBankAccount, Company, Invoice, User
from billing.core.errors import BillingError
from billing.core.request_context import RequestContext
from billing.db.base import Base
from billing.infrastructure.database import DatabaseSessionManager
from billing.infrastructure.observability import setup_logging
from billing.infrastructure.security import PasswordHasher
from billing.repositories.client_bank_account_repository import SqlClientBankAccountRepository
from billing.repositories.client_repository import SqlClientRepository
from billing.repositories.company_repository import SqlCompanyRepository
from billing.repositories.invoice_repository import SqlInvoiceRepository
from billing.repositories.user_repository import SqlUserRepository
from billing.services.invoice_service import InvoiceService

import billing.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)

DEFAULT_EMAIL = "admin@localhost.ai"
DEFAULT_PASSWORD = "password"
SAMPLE_PAYMENT_AMOUNT = Decimal("100000")
SAMPLE_PAYMENT_TERM = timedelta(days=30)


@dataclass(frozen=True)
class SeedResult:
    company: Company
    user: User
    client: Client
    bank_account: ClientBankAccount
    invoice: Invoice


async def seed(
    ctx: RequestContext,
    *,
    email: str,
    password: str,
    password_hasher: PasswordHasher,
    invoice_service: InvoiceService,
    today: date | None = None,
) -> SeedResult:
    """Create the demo company, its admin user, one client and one invoice."""
    db = ctx.get_transaction()
    issue_date = today or date.today()

    company = await SqlCompanyRepository().create(db, Company(
        corporate_name="Sample Company Inc.",
        representative_name="Taro Yamada",
        phone_number="03-0000-0000",
        postal_code="100-0001",
        address="1-1 Chiyoda, Chiyoda-ku, Tokyo",
    ))
    user = await SqlUserRepository().create(db, User(
        company_id=company.id,
        name="Administrator",
        email=email,
        password=password_hasher.hash(password),
    ))
    client = await SqlClientRepository().create(db, Client(
        company_id=company.id,
        corporate_name="Sample Client LLC",
        representative_name="Hanako Suzuki",
        phone_number="06-0000-0000",
        postal_code="530-0001",
        address="1-1 Umeda, Kita-ku, Osaka",
    ))
    bank_account = await SqlClientBankAccountRepository().create(db, ClientBankAccount(
        client_id=client.id,
        bank_name="Sample Bank",
        branch_name="Head Office",
        account_number="1234567",
        account_name="SAMPLE CLIENT LLC",
    ))
    invoice = await invoice_service.create_invoice(
        ctx.with_identity(user.id),
        client_id=client.id,
        issue_date=issue_date,
        payment_amount=SAMPLE_PAYMENT_AMOUNT,
        payment_due_date=issue_date + SAMPLE_PAYMENT_TERM,
    )
    logger.info(
        "Seed data created",
        extra={"company_id": company.id, "user_id": user.id, "invoice_id": invoice.id},
    )
    return SeedResult(company, user, client, bank_account, invoice)


async def run_seed(
    database_url: str, email: str, password: str, create_schema: bool = False,
) -> SeedResult:
    settings = get_settings()
    manager = DatabaseSessionManager(
        database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if create_schema:
            async with manager.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        invoice_service = InvoiceService(
            invoice_repository=SqlInvoiceRepository(),
            user_repository=SqlUserRepository(),
            fee_rate=settings.fee_rate,
            tax_rate=settings.tax_rate,
        )
        async with manager.transaction() as db:
            return await seed(
                RequestContext().with_transaction(db),
                email=email,
                password=password,
                password_hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
                invoice_service=invoice_service,
            )
    finally:
        await manager.dispose()


@click.command()
@click.option("--email", default=DEFAULT_EMAIL, show_default=True, help="Admin login email")
@click.option("--password", default=DEFAULT_PASSWORD, show_default=True, help="Admin login password")
@click.option("--database-url", default=None, help="Overrides DATABASE_URL")
@click.option("--create-schema", is_flag=True, help="Create tables before seeding")
def main(email, password, database_url, create_schema):
    """Seed a company, an admin user and a sample invoice."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    url = to_async_driver_url(database_url) if database_url else settings.database_url
    try:
        result = asyncio.run(run_seed(url, email, password, create_schema))
    except BillingError as e:
        logger.error(f"Seeding failed: {e.message}", extra={"error_code": e.code})
        raise click.ClickException(e.message) from e
    click.echo(f"Seeded user {result.user.email} (company {result.company.id})")
    click.echo(f"Sample invoice {result.invoice.id}: {result.invoice.invoice_amount}")


if __name__ == "__main__":
    main()
