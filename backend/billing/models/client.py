"""Client ORM - a billed party, owned by a company."""

from datetime import datetime

from sqlalchemy import CHAR, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from billing.core.domain_types import ClientId, CompanyId
from billing.core.entities import Client
from billing.db.base import Base
from billing.models._columns import (
    ULID_LENGTH, as_utc, created_at_column, ulid_primary_key, updated_at_column,
)


class ClientRow(Base):
    __tablename__ = "clients"

    id: Mapped[str] = ulid_primary_key()
    company_id: Mapped[str] = mapped_column(
        CHAR(ULID_LENGTH), ForeignKey("companies.id"), nullable=False, index=True,
    )
    corporate_name: Mapped[str] = mapped_column(String(255), nullable=False)
    representative_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    @classmethod
    def from_entity(cls, client: Client) -> "ClientRow":
        row = cls(
            company_id=client.company_id,
            corporate_name=client.corporate_name,
            representative_name=client.representative_name,
            phone_number=client.phone_number,
            postal_code=client.postal_code,
            address=client.address,
        )
        if client.id:
            row.id = client.id
        return row

    def to_entity(self) -> Client:
        return Client(
            id=ClientId(self.id),
            company_id=CompanyId(self.company_id),
            corporate_name=self.corporate_name,
            representative_name=self.representative_name,
            phone_number=self.phone_number,
            postal_code=self.postal_code,
            address=self.address,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
