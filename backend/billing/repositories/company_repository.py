"""Company Repository - SQLAlchemy implementation of CompanyRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from billing.core.domain_types import CompanyId
from billing.core.entities import Company
from billing.models.company import CompanyRow
from billing.repositories.errors import translate_db_errors


class SqlCompanyRepository:

    async def create(self, db: AsyncSession, company: Company) -> Company:
        row = CompanyRow.from_entity(company)
        with translate_db_errors("company.create"):
            db.add(row)
            await db.flush()
        company.id = CompanyId(row.id)
        company.created_at = row.created_at
        company.updated_at = row.updated_at
        return company

    async def find_by_id(self, db: AsyncSession, company_id: CompanyId) -> Company | None:
        with translate_db_errors("company.find_by_id"):
            result = await db.execute(
                select(CompanyRow).where(CompanyRow.id == company_id),
            )
            row = result.scalar_one_or_none()
        return row.to_entity() if row else None
