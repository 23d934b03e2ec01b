"""Request Context - the transaction handle and authenticated identity of one request.

Invariants:
    - Immutable: with_* returns a new RequestContext, the original is untouched
    - get_transaction()/get_identity() raise MissingContextError when unset,
      never return None or an empty string
    - The transaction handle is opaque here; whoever set it owns commit and close

Design Decisions:
    - Explicit object passed as the first argument of every service call instead
      of a string-keyed ambient lookup: a route that skipped authentication fails
      loudly at the first get_identity() rather than acting as nobody
    - Generic over the handle type so tests can pass a mock without casting
"""

from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from billing.core.domain_types import UserId
from billing.core.errors import MissingContextError

TransactionT = TypeVar("TransactionT")


@dataclass(frozen=True)
class RequestContext(Generic[TransactionT]):
    """Request-scoped state carried from the boundary into services."""
    _transaction: TransactionT | None = None
    _identity: UserId | None = None

    def with_transaction(self, transaction: TransactionT) -> "RequestContext[TransactionT]":
        if transaction is None:
            raise MissingContextError("transaction")
        return replace(self, _transaction=transaction)

    def get_transaction(self) -> TransactionT:
        if self._transaction is None:
            raise MissingContextError("transaction")
        return self._transaction

    def with_identity(self, user_id: str) -> "RequestContext[TransactionT]":
        if not user_id:
            raise MissingContextError("identity")
        return replace(self, _identity=UserId(user_id))

    def get_identity(self) -> UserId:
        if self._identity is None:
            raise MissingContextError("identity")
        return self._identity
