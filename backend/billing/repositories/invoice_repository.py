"""Invoice Repository - SQLAlchemy implementation of InvoiceRepository.

Invariants:
    - find_by_due_date_range is inclusive on both bounds
    - Results are ordered by payment_due_date ascending, then id, before
      offset/limit are applied, so pages never overlap
"""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from billing.core.domain_types import InvoiceId
from billing.core.entities import Invoice
from billing.models.invoice import InvoiceRow
from billing.repositories.errors import translate_db_errors

logger = logging.getLogger(__name__)


class SqlInvoiceRepository:

    async def create(self, db: AsyncSession, invoice: Invoice) -> Invoice:
        row = InvoiceRow.from_entity(invoice)
        with translate_db_errors("invoice.create"):
            db.add(row)
            await db.flush()
        invoice.id = InvoiceId(row.id)
        invoice.created_at = row.created_at
        invoice.updated_at = row.updated_at
        logger.info(
            "Invoice created",
            extra={"invoice_id": invoice.id, "company_id": invoice.company_id},
        )
        return invoice

    async def find_by_due_date_range(
        self, db: AsyncSession, start: date, end: date, offset: int, limit: int,
    ) -> list[Invoice]:
        query = (
            select(InvoiceRow)
            .where(InvoiceRow.payment_due_date.between(start, end))
            .order_by(InvoiceRow.payment_due_date.asc(), InvoiceRow.id.asc())
            .offset(offset)
            .limit(limit)
        )
        with translate_db_errors("invoice.find_by_due_date_range"):
            result = await db.execute(query)
            rows = result.scalars().all()
        return [row.to_entity() for row in rows]
