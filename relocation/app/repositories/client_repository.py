from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from relocation.domain.entities import Client


class IClientRepository(ABC):
    """Client repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID"""
        pass

    @abstractmethod
    async def get_by_identity(self, identity_reference: str) -> Optional[Client]:
        """Get client by identity provider reference"""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client"""
        pass

    @abstractmethod
    async def assign_agent(
        self, client: Client, agent_id: UUID, invitation_token: str
    ) -> bool:
        """
        Link the client to an agent only if it is still unassigned.

        Returns False when the client already had an owning agent.
        """
        pass

    @abstractmethod
    async def list_by_agent(
        self, agent_id: UUID, limit: Optional[int] = None
    ) -> List[Client]:
        """Get clients assigned to an agent, newest first"""
        pass

    @abstractmethod
    async def list_clients(
        self, agent_id: Optional[UUID] = None, search: Optional[str] = None
    ) -> List[Client]:
        """
        Get all clients, newest first.

        Optionally narrowed to one agent, and to names or emails containing
        ``search`` (case-insensitive).
        """
        pass

    @abstractmethod
    async def count(
        self, assigned: Optional[bool] = None, agent_id: Optional[UUID] = None
    ) -> int:
        """Count clients, optionally filtered by assignment state or agent"""
        pass

    @abstractmethod
    async def list_created_since(self, since: datetime, limit: int) -> List[Client]:
        """Get clients created after a point in time, newest first"""
        pass
