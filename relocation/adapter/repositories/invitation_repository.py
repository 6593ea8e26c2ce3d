from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from relocation.app.repositories.invitation_repository import IInvitationRepository
from relocation.domain.entities import Invitation
from relocation.domain.invitation_policy import canonicalize_code


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_code(self, code: str) -> Optional[Invitation]:
        """Get invitation by code, case-insensitive"""
        stmt = select(Invitation).where(Invitation.code == canonicalize_code(code))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def code_exists(self, code: str) -> bool:
        """Check whether any invitation already uses this code"""
        stmt = select(Invitation.id).where(Invitation.code == canonicalize_code(code))
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def list_by_agent(self, agent_id: UUID) -> List[Invitation]:
        """Get all invitations created by an agent, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.owning_agent_id == agent_id)
            .order_by(col(Invitation.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_active(self, now: datetime) -> int:
        """Count unused, unexpired invitations"""
        stmt = (
            select(func.count())
            .select_from(Invitation)
            .where(col(Invitation.used_at).is_(None), col(Invitation.expires_at) >= now)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        invitation.code = canonicalize_code(invitation.code)
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_used(self, invitation: Invitation, used_at: datetime) -> bool:
        """Set used_at only while it is still NULL"""
        stmt = (
            update(Invitation)
            .where(col(Invitation.id) == invitation.id, col(Invitation.used_at).is_(None))
            .values(used_at=used_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self.session.refresh(invitation)
        return True
