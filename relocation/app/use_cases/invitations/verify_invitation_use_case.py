"""
Verify Invitation Use Case

Read-only preview of an invitation for the client sign-up page.
"""

from datetime import datetime
from typing import Callable, Optional

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.base import utc_now
from relocation.domain.entities import Invitation, InvitationCheck
from relocation.domain.invitation_policy import classify
from relocation.libs.result import Result, Return

from .dtos import InvitationPreview, VerifyInvitationResponse
from .errors import INVITATION_NOT_FOUND


class VerifyInvitationUseCase:
    """
    Use case for previewing an invitation by code or by token.

    Business Rules:
    - Never consumes the invitation
    - Uses the same classification as redemption (used before expired)
    - Lookup by code also returns the token so sign-up can carry it forward
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute_by_code(self, code: str) -> Result[VerifyInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_code(code)
            return await self._preview(invitation, include_token=True)

    async def execute_by_token(self, token: str) -> Result[VerifyInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            return await self._preview(invitation, include_token=False)

    async def _preview(
        self, invitation: Optional[Invitation], include_token: bool
    ) -> Result[VerifyInvitationResponse]:
        check = classify(invitation, self.clock())
        if check == InvitationCheck.not_found:
            return Return.err(INVITATION_NOT_FOUND)

        agent = await self.uow.agents.get_by_id(invitation.owning_agent_id)

        return Return.ok(
            VerifyInvitationResponse(
                valid=check == InvitationCheck.valid,
                reason=None if check == InvitationCheck.valid else check.value,
                invitation=InvitationPreview(
                    id=invitation.id,
                    agent_id=invitation.owning_agent_id,
                    agent_name=agent.name if agent else None,
                    agent_email=agent.email if agent else None,
                    agent_approved=bool(agent and agent.is_approved),
                    email=invitation.target_email,
                    token=invitation.token if include_token else None,
                    expires_at=invitation.expires_at,
                    created_at=invitation.created_at,
                    used_at=invitation.used_at,
                ),
            )
        )
