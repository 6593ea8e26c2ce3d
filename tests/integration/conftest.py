import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from relocation.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from relocation.api.utils.jwt import create_access_token
from relocation.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from relocation.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(identity_reference, role, email=None, name=None):
    token = create_access_token(identity_reference, role, email=email, name=name)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.fixture
def agent_headers():
    return bearer("idp|agent-a1", "agent", email="a1@agents.example.com", name="Agent One")


@pytest.fixture
def client_headers():
    return bearer("idp|client-c1", "client", email="c1@example.com", name="Client One")


@pytest.fixture
def make_headers():
    return bearer


@pytest_asyncio.fixture
async def approved_agent(client, agent_headers, admin_headers):
    """Signs the default agent in, approves it and returns its id"""
    response = await client.post("/agents/me", headers=agent_headers)
    assert response.status_code == 200
    agent_id = response.json()["agent"]["id"]

    approve = await client.post(
        f"/admin/agents/{agent_id}/approve", json={}, headers=admin_headers
    )
    assert approve.status_code == 200
    return agent_id
