from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from relocation.app.repositories.agent_repository import IAgentRepository
from relocation.domain.entities import Agent


class AgentRepository(IAgentRepository):
    """Agent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, agent_id: UUID) -> Optional[Agent]:
        """Get agent by ID"""
        stmt = select(Agent).where(Agent.id == agent_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_identity(self, identity_reference: str) -> Optional[Agent]:
        """Get agent by identity provider reference"""
        stmt = select(Agent).where(Agent.identity_reference == identity_reference)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_dre_number(self, dre_number: str) -> Optional[Agent]:
        """Get agent by DRE license number"""
        stmt = select(Agent).where(Agent.dre_number == dre_number)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_ids(self, agent_ids: List[UUID]) -> List[Agent]:
        """Get the agents with the given IDs"""
        if not agent_ids:
            return []
        stmt = select(Agent).where(col(Agent.id).in_(agent_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_agents(self, approved: Optional[bool] = None) -> List[Agent]:
        """Get agents, newest first, optionally filtered by approval"""
        stmt = select(Agent)
        if approved is not None:
            stmt = stmt.where(Agent.is_approved == approved)
        stmt = stmt.order_by(col(Agent.created_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, agent: Agent) -> Agent:
        """Create a new agent"""
        self.session.add(agent)
        await self.session.flush()
        await self.session.refresh(agent)
        return agent

    async def update(self, agent: Agent) -> Agent:
        """Update existing agent"""
        self.session.add(agent)
        await self.session.flush()
        await self.session.refresh(agent)
        return agent

    async def approve(self, agent: Agent, approved_at: datetime, approved_by: str) -> bool:
        """Set is_approved only while it is still False"""
        stmt = (
            update(Agent)
            .where(col(Agent.id) == agent.id, col(Agent.is_approved).is_(False))
            .values(is_approved=True, approved_at=approved_at, approved_by=approved_by)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self.session.refresh(agent)
        return True

    async def count(self, approved: Optional[bool] = None) -> int:
        """Count agents, optionally filtered by approval"""
        stmt = select(func.count()).select_from(Agent)
        if approved is not None:
            stmt = stmt.where(Agent.is_approved == approved)
        result = await self.session.exec(stmt)
        return result.one()

    async def list_created_since(self, since: datetime, limit: int) -> List[Agent]:
        """Get agents created after a point in time, newest first"""
        stmt = (
            select(Agent)
            .where(col(Agent.created_at) >= since)
            .order_by(col(Agent.created_at).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
