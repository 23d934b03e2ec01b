"""Invoice Routes - create invoices and list them by payment due date.

Invariants:
    - Both endpoints require a valid bearer token (get_authenticated_context)
    - Fee, tax and total are never accepted from the client
    - Listing defaults (offset, limit, open date bounds) are applied by the service

Design Decisions:
    - offset/limit accepted as any int: negative/zero values are defaulted,
      not rejected, so the HTTP surface matches the service contract
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query, status

from billing.api.dependencies import get_authenticated_context, get_invoice_service
from billing.core.request_context import RequestContext
from billing.schemas.invoice import InvoiceCreate, InvoiceResponse
from billing.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
    "", response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    body: InvoiceCreate,
    ctx: RequestContext = Depends(get_authenticated_context),
    service: InvoiceService = Depends(get_invoice_service),
):
    """Issue an invoice for one of the caller's company's clients."""
    invoice = await service.create_invoice(
        ctx,
        client_id=body.client_id,
        issue_date=body.issue_date,
        payment_amount=body.payment_amount,
        payment_due_date=body.payment_due_date,
    )
    logger.info(
        "Invoice issued",
        extra={"invoice_id": invoice.id, "user_id": ctx.get_identity()},
    )
    return InvoiceResponse.from_entity(invoice)


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    offset: int = Query(0),
    limit: int = Query(0),
    ctx: RequestContext = Depends(get_authenticated_context),
    service: InvoiceService = Depends(get_invoice_service),
):
    """Invoices whose payment due date falls in [start_date, end_date]."""
    invoices = await service.list_invoices_by_due_date_range(
        ctx, start_date, end_date, offset, limit,
    )
    return [InvoiceResponse.from_entity(i) for i in invoices]
