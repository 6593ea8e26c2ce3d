from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from relocation.domain.entities import Agent


class IAgentRepository(ABC):
    """Agent repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, agent_id: UUID) -> Optional[Agent]:
        """Get agent by ID"""
        pass

    @abstractmethod
    async def get_by_identity(self, identity_reference: str) -> Optional[Agent]:
        """Get agent by identity provider reference"""
        pass

    @abstractmethod
    async def get_by_dre_number(self, dre_number: str) -> Optional[Agent]:
        """Get agent by DRE license number"""
        pass

    @abstractmethod
    async def list_by_ids(self, agent_ids: List[UUID]) -> List[Agent]:
        """Get the agents with the given IDs, in no particular order"""
        pass

    @abstractmethod
    async def list_agents(self, approved: Optional[bool] = None) -> List[Agent]:
        """Get agents, newest first, optionally filtered by approval"""
        pass

    @abstractmethod
    async def create(self, agent: Agent) -> Agent:
        """Create a new agent"""
        pass

    @abstractmethod
    async def update(self, agent: Agent) -> Agent:
        """Update existing agent"""
        pass

    @abstractmethod
    async def approve(self, agent: Agent, approved_at: datetime, approved_by: str) -> bool:
        """
        Approve the agent only if it is not approved yet.

        Returns False when it was already approved.
        """
        pass

    @abstractmethod
    async def count(self, approved: Optional[bool] = None) -> int:
        """Count agents, optionally filtered by approval"""
        pass

    @abstractmethod
    async def list_created_since(self, since: datetime, limit: int) -> List[Agent]:
        """Get agents created after a point in time, newest first"""
        pass
