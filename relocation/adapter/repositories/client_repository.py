from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from relocation.app.repositories.client_repository import IClientRepository
from relocation.domain.entities import Client


class ClientRepository(IClientRepository):
    """Client repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID"""
        stmt = select(Client).where(Client.id == client_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_identity(self, identity_reference: str) -> Optional[Client]:
        """Get client by identity provider reference"""
        stmt = select(Client).where(Client.identity_reference == identity_reference)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, client: Client) -> Client:
        """Create a new client"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def assign_agent(
        self, client: Client, agent_id: UUID, invitation_token: str
    ) -> bool:
        """Set owning_agent_id only while it is still NULL"""
        stmt = (
            update(Client)
            .where(col(Client.id) == client.id, col(Client.owning_agent_id).is_(None))
            .values(owning_agent_id=agent_id, invitation_token=invitation_token)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self.session.refresh(client)
        return True

    async def list_by_agent(
        self, agent_id: UUID, limit: Optional[int] = None
    ) -> List[Client]:
        """Get clients assigned to an agent, newest first"""
        stmt = (
            select(Client)
            .where(Client.owning_agent_id == agent_id)
            .order_by(col(Client.created_at).desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_clients(
        self, agent_id: Optional[UUID] = None, search: Optional[str] = None
    ) -> List[Client]:
        """Get all clients, newest first, optionally filtered"""
        stmt = select(Client)
        if agent_id is not None:
            stmt = stmt.where(Client.owning_agent_id == agent_id)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(col(Client.name).ilike(pattern), col(Client.email).ilike(pattern))
            )
        stmt = stmt.order_by(col(Client.created_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(
        self, assigned: Optional[bool] = None, agent_id: Optional[UUID] = None
    ) -> int:
        """Count clients, optionally filtered by assignment state or agent"""
        stmt = select(func.count()).select_from(Client)
        if assigned is True:
            stmt = stmt.where(col(Client.owning_agent_id).is_not(None))
        elif assigned is False:
            stmt = stmt.where(col(Client.owning_agent_id).is_(None))
        if agent_id is not None:
            stmt = stmt.where(Client.owning_agent_id == agent_id)
        result = await self.session.exec(stmt)
        return result.one()

    async def list_created_since(self, since: datetime, limit: int) -> List[Client]:
        """Get clients created after a point in time, newest first"""
        stmt = (
            select(Client)
            .where(col(Client.created_at) >= since)
            .order_by(col(Client.created_at).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
