from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from relocation.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Invitation]:
        """Get invitation by code, case-insensitive"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def code_exists(self, code: str) -> bool:
        """Check whether any invitation already uses this code"""
        pass

    @abstractmethod
    async def list_by_agent(self, agent_id: UUID) -> List[Invitation]:
        """Get all invitations created by an agent, newest first"""
        pass

    @abstractmethod
    async def count_active(self, now: datetime) -> int:
        """Count unused, unexpired invitations"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_used(self, invitation: Invitation, used_at: datetime) -> bool:
        """
        Set used_at only if the invitation is still unused.

        Returns False when another writer consumed it first.
        """
        pass
