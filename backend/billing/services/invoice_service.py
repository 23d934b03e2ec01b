"""Invoice Service - issues invoices and lists them by payment due date.

Invariants:
    - New invoices are UNPROCESSED and belong to the acting user's company
    - fee/tax/invoice_amount come only from core.money at the configured rates
    - Listing applies normalize_page and resolve_due_date_bounds before the store call
    - Store errors surface unmodified; nothing is retried, nothing is committed here

Design Decisions:
    - Rates injected at construction (from Settings) rather than read per call:
      one process, one rate pair, and tests pass their own
    - An inverted date range short-circuits to [] without a query
"""

from datetime import date
from decimal import Decimal

from billing.core.domain_types import ClientId, InvoiceStatus
from billing.core.entities import Invoice
from billing.core.errors import ErrorContext, InvalidInputError, ResourceNotFoundError
from billing.core.money import compute_charges, normalize_rate
from billing.core.pagination import normalize_page, resolve_due_date_bounds
from billing.core.repository_protocols import InvoiceRepository, UserRepository
from billing.core.request_context import RequestContext


class InvoiceService:
    """Invoice creation and due-date range listing."""

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        user_repository: UserRepository,
        fee_rate: Decimal,
        tax_rate: Decimal,
    ):
        self.invoice_repository = invoice_repository
        self.user_repository = user_repository
        self.fee_rate = normalize_rate(fee_rate)
        self.tax_rate = normalize_rate(tax_rate)

    async def create_invoice(
        self,
        ctx: RequestContext,
        client_id: str,
        issue_date: date,
        payment_amount: Decimal,
        payment_due_date: date,
    ) -> Invoice:
        """Create an invoice on behalf of the authenticated user."""
        db = ctx.get_transaction()
        user_id = ctx.get_identity()

        if payment_due_date < issue_date:
            raise InvalidInputError(
                "payment_due_date must not be earlier than issue_date",
                "payment_due_date",
            )
        charges = compute_charges(payment_amount, self.fee_rate, self.tax_rate)

        user = await self.user_repository.find_by_id(db, user_id)
        if user is None:
            raise ResourceNotFoundError(
                "User", user_id, ErrorContext(user_id=user_id, resource_id=user_id),
            )

        invoice = Invoice(
            company_id=user.company_id,
            client_id=ClientId(client_id),
            issue_date=issue_date,
            payment_amount=charges.payment_amount,
            fee=charges.fee,
            fee_rate=charges.fee_rate,
            tax=charges.tax,
            tax_rate=charges.tax_rate,
            invoice_amount=charges.invoice_amount,
            payment_due_date=payment_due_date,
            status=InvoiceStatus.UNPROCESSED,
        )
        return await self.invoice_repository.create(db, invoice)

    async def list_invoices_by_due_date_range(
        self,
        ctx: RequestContext,
        start_date: date | None = None,
        end_date: date | None = None,
        offset: int = 0,
        limit: int = 0,
    ) -> list[Invoice]:
        db = ctx.get_transaction()
        page = normalize_page(offset, limit)
        bounds = resolve_due_date_bounds(start_date, end_date)
        if bounds.is_empty:
            return []
        return await self.invoice_repository.find_by_due_date_range(
            db, bounds.start, bounds.end, page.offset, page.limit,
        )
