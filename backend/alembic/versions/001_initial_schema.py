"""Initial schema - companies, users, clients, client_bank_accounts, invoices.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ULID = sa.CHAR(26)
MONEY = sa.Numeric(20, 2)
RATE = sa.Numeric(5, 4)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", ULID, primary_key=True),
        sa.Column("corporate_name", sa.String(255), nullable=False),
        sa.Column("representative_name", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("postal_code", sa.String(10), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "users",
        sa.Column("id", ULID, primary_key=True),
        sa.Column("company_id", ULID, sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_company_id", "users", ["company_id"])

    op.create_table(
        "clients",
        sa.Column("id", ULID, primary_key=True),
        sa.Column("company_id", ULID, sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("corporate_name", sa.String(255), nullable=False),
        sa.Column("representative_name", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("postal_code", sa.String(10), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_clients_company_id", "clients", ["company_id"])

    op.create_table(
        "client_bank_accounts",
        sa.Column("id", ULID, primary_key=True),
        sa.Column("client_id", ULID, sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("bank_name", sa.String(255), nullable=False),
        sa.Column("branch_name", sa.String(255), nullable=False),
        sa.Column("account_number", sa.String(20), nullable=False),
        sa.Column("account_name", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_client_bank_accounts_client_id", "client_bank_accounts", ["client_id"])

    op.create_table(
        "invoices",
        sa.Column("id", ULID, primary_key=True),
        sa.Column("company_id", ULID, sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("client_id", ULID, sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("issue_date", sa.Date, nullable=False),
        sa.Column("payment_amount", MONEY, nullable=False),
        sa.Column("fee", MONEY, nullable=False),
        sa.Column("fee_rate", RATE, nullable=False),
        sa.Column("tax", MONEY, nullable=False),
        sa.Column("tax_rate", RATE, nullable=False),
        sa.Column("invoice_amount", MONEY, nullable=False),
        sa.Column("payment_due_date", sa.Date, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="未処理"),
        *_timestamps(),
    )
    op.create_index("ix_invoices_company_id", "invoices", ["company_id"])
    op.create_index("ix_invoices_client_id", "invoices", ["client_id"])
    op.create_index("ix_invoices_payment_due_date", "invoices", ["payment_due_date"])
    op.create_index("ix_invoices_status", "invoices", ["status"])


def downgrade() -> None:
    op.drop_table("invoices")
    op.drop_table("client_bank_accounts")
    op.drop_table("clients")
    op.drop_table("users")
    op.drop_table("companies")
