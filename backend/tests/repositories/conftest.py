"""Repository test fixtures - a company, a user and a client already stored."""

import pytest

from billing.core.entities import Client, Company, User
from billing.repositories.client_repository import SqlClientRepository
from billing.repositories.company_repository import SqlCompanyRepository
from billing.repositories.user_repository import SqlUserRepository


@pytest.fixture
async def company(test_db):
    return await SqlCompanyRepository().create(test_db, Company(
        corporate_name="Acme Corp", representative_name="Taro Yamada",
        phone_number="03-0000-0000", postal_code="100-0001", address="Tokyo",
    ))


@pytest.fixture
async def user(test_db, company):
    return await SqlUserRepository().create(test_db, User(
        company_id=company.id, name="Admin",
        email="admin@localhost.ai", password="$2b$04$hash",
    ))


@pytest.fixture
async def client_entity(test_db, company):
    return await SqlClientRepository().create(test_db, Client(
        company_id=company.id, corporate_name="Client LLC",
        representative_name="Hanako Suzuki", phone_number="06-0000-0000",
        postal_code="530-0001", address="Osaka",
    ))
