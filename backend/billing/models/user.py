"""User ORM - a company member who can log in and issue invoices.

Invariants:
    - email is unique across all companies (uq_users_email)
    - password holds a bcrypt hash
"""

from datetime import datetime

from sqlalchemy import CHAR, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from billing.core.domain_types import CompanyId, UserId
from billing.core.entities import User
from billing.db.base import Base
from billing.models._columns import (
    ULID_LENGTH, as_utc, created_at_column, ulid_primary_key, updated_at_column,
)


class UserRow(Base):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[str] = ulid_primary_key()
    company_id: Mapped[str] = mapped_column(
        CHAR(ULID_LENGTH), ForeignKey("companies.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    @classmethod
    def from_entity(cls, user: User) -> "UserRow":
        row = cls(
            company_id=user.company_id,
            name=user.name,
            email=user.email,
            password=user.password,
        )
        if user.id:
            row.id = user.id
        return row

    def to_entity(self) -> User:
        return User(
            id=UserId(self.id),
            company_id=CompanyId(self.company_id),
            name=self.name,
            email=self.email,
            password=self.password,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
