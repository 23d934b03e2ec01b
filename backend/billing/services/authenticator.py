"""Authenticator - credential verification and bearer token issuance.

Invariants:
    - Unknown email and wrong password raise the same InvalidCredentialsError
    - Store failures other than "not found" propagate unmodified (DependencyFailureError)
    - A successful login returns a non-empty token bound to the user's id
    - validate_token never touches the database

Design Decisions:
    - Password check runs even for unknown emails (dummy_verify) so response
      time does not reveal which half of the credential pair was wrong
"""

from billing.core.domain_types import UserId
from billing.core.errors import InvalidCredentialsError
from billing.core.repository_protocols import UserRepository
from billing.core.request_context import RequestContext
from billing.infrastructure.security import PasswordHasher, TokenSigner


class Authenticator:
    """Login and token validation."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_signer: TokenSigner,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_signer = token_signer

    async def login(self, ctx: RequestContext, email: str, password: str) -> str:
        db = ctx.get_transaction()
        user = await self.user_repository.find_by_email(db, email)
        if user is None:
            self.password_hasher.dummy_verify()
            raise InvalidCredentialsError()

        if not self.password_hasher.verify(password, user.password):
            raise InvalidCredentialsError()

        return self.token_signer.issue(user.id)

    def validate_token(self, token: str) -> UserId:
        """Return the user id a token was issued for."""
        return self.token_signer.validate(token)
