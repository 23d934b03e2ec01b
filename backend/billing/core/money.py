"""Monetary Calculator - pure fee, tax and invoice total arithmetic on Decimal.

Invariants:
    - fee = truncate(payment_amount * fee_rate) to whole currency units
    - tax = truncate(fee * tax_rate) to whole currency units
    - invoice_amount = payment_amount + fee + tax, so invoice_amount >= payment_amount
    - Truncation is toward zero (ROUND_DOWN), never banker's rounding
    - float, NaN and Infinity are rejected at every entry point
    - Amounts carry at most 2 fractional digits and fewer than 19 integer digits
      (NUMERIC(20, 2)); rates are quantized to 4 places and stay below 10
      (NUMERIC(5, 4))
    - Every amount returned has exactly 2 fractional digits, the stored scale

Design Decisions:
    - Amounts finer than a cent are rejected, not rounded: a column rounding each
      field on its own would break the total identity after a reload
    - Local decimal context with 38 digits: bounded NUMERIC(20, 2) * NUMERIC(5, 4)
      never exceeds it, so quantize() cannot raise InvalidOperation
    - compute_charges bundles the three steps so services make a single call
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN, localcontext

from billing.core.errors import InvalidInputError

WHOLE_UNIT = Decimal("1")
MONEY_QUANTUM = Decimal("0.01")
RATE_QUANTUM = Decimal("0.0001")
MIN_PAYMENT_AMOUNT = Decimal("1")
MAX_AMOUNT = Decimal(10) ** 18
MAX_RATE = Decimal(10)
_PRECISION = 38


@dataclass(frozen=True)
class InvoiceCharges:
    """Computed charges for one invoice, all amounts at the stored scale."""
    payment_amount: Decimal
    fee: Decimal
    fee_rate: Decimal
    tax: Decimal
    tax_rate: Decimal
    invoice_amount: Decimal


def _require_decimal(value: object, field: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidInputError(
            f"{field} must be a Decimal, got {type(value).__name__}", field,
        )
    value = Decimal(value)
    if not value.is_finite():
        raise InvalidInputError(f"{field} must be a finite number, got {value}", field)
    return value


def _require_amount(value: object, field: str) -> Decimal:
    """Validate a money value and return it at the stored scale."""
    value = _require_decimal(value, field)
    if abs(value) >= MAX_AMOUNT:
        raise InvalidInputError(f"{field} must be below {MAX_AMOUNT}, got {value}", field)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        scaled = value.quantize(MONEY_QUANTUM, rounding=ROUND_DOWN)
    if scaled != value:
        raise InvalidInputError(
            f"{field} must have at most 2 fractional digits, got {value}", field,
        )
    return scaled


def _truncate(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return value.quantize(WHOLE_UNIT, rounding=ROUND_DOWN).quantize(MONEY_QUANTUM)


def normalize_rate(rate: Decimal) -> Decimal:
    """Quantize a rate to four fractional digits (truncating any excess)."""
    rate = _require_decimal(rate, "rate")
    if rate < 0 or rate >= MAX_RATE:
        raise InvalidInputError(f"rate must be in [0, {MAX_RATE}), got {rate}", "rate")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return rate.quantize(RATE_QUANTUM, rounding=ROUND_DOWN)


def compute_fee(payment_amount: Decimal, fee_rate: Decimal) -> Decimal:
    payment_amount = _require_amount(payment_amount, "payment_amount")
    if payment_amount < MIN_PAYMENT_AMOUNT:
        raise InvalidInputError(
            f"payment_amount must be at least {MIN_PAYMENT_AMOUNT}, got {payment_amount}",
            "payment_amount",
        )
    fee_rate = normalize_rate(fee_rate)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return _truncate(payment_amount * fee_rate)


def compute_tax(fee: Decimal, tax_rate: Decimal) -> Decimal:
    fee = _require_amount(fee, "fee")
    if fee < 0:
        raise InvalidInputError(f"fee must be non-negative, got {fee}", "fee")
    tax_rate = normalize_rate(tax_rate)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return _truncate(fee * tax_rate)


def compute_invoice_amount(
    payment_amount: Decimal, fee: Decimal, tax: Decimal,
) -> Decimal:
    payment_amount = _require_amount(payment_amount, "payment_amount")
    fee = _require_amount(fee, "fee")
    tax = _require_amount(tax, "tax")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        total = payment_amount + fee + tax
    if total >= MAX_AMOUNT:
        raise InvalidInputError(
            f"invoice_amount must be below {MAX_AMOUNT}, got {total}", "invoice_amount",
        )
    return total


def compute_charges(
    payment_amount: Decimal, fee_rate: Decimal, tax_rate: Decimal,
) -> InvoiceCharges:
    """Fee, tax and total for a payment amount at the given rates. Pure, no IO."""
    fee_rate = normalize_rate(fee_rate)
    tax_rate = normalize_rate(tax_rate)
    fee = compute_fee(payment_amount, fee_rate)
    payment_amount = _require_amount(payment_amount, "payment_amount")
    tax = compute_tax(fee, tax_rate)
    return InvoiceCharges(
        payment_amount=payment_amount,
        fee=fee,
        fee_rate=fee_rate,
        tax=tax,
        tax_rate=tax_rate,
        invoice_amount=compute_invoice_amount(payment_amount, fee, tax),
    )
