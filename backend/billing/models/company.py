"""Company ORM - the corporation that issues invoices and employs users.

Invariants:
    - id is a ULID assigned on insert when the entity carries none
    - created_at/updated_at come from column defaults, never from the entity
"""

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from billing.core.domain_types import CompanyId
from billing.core.entities import Company
from billing.db.base import Base
from billing.models._columns import (
    as_utc, created_at_column, ulid_primary_key, updated_at_column,
)


class CompanyRow(Base):
    __tablename__ = "companies"

    id: Mapped[str] = ulid_primary_key()
    corporate_name: Mapped[str] = mapped_column(String(255), nullable=False)
    representative_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyRow":
        row = cls(
            corporate_name=company.corporate_name,
            representative_name=company.representative_name,
            phone_number=company.phone_number,
            postal_code=company.postal_code,
            address=company.address,
        )
        if company.id:
            row.id = company.id
        return row

    def to_entity(self) -> Company:
        return Company(
            id=CompanyId(self.id),
            corporate_name=self.corporate_name,
            representative_name=self.representative_name,
            phone_number=self.phone_number,
            postal_code=self.postal_code,
            address=self.address,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
