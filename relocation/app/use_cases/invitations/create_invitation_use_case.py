"""
Create Invitation Use Case

Agents create single-use invitations for prospective clients.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from relocation.app.services.accounts import get_or_create_agent
from relocation.app.services.invitation_code_generator import (
    DEFAULT_MAX_ATTEMPTS,
    CodeGenerationExhausted,
    InvitationCodeGenerator,
)
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.base import generate_uuid, utc_now
from relocation.domain.entities import AuditEvent, Invitation
from relocation.domain.identity import CallerIdentity
from relocation.domain.invitation_policy import (
    DEFAULT_VALIDITY_DAYS,
    MAX_VALIDITY_DAYS,
    MIN_VALIDITY_DAYS,
)
from relocation.libs.result import Result, Return

from .dtos import InvitationResponse
from .errors import CODE_GENERATION_EXHAUSTED, INVALID_VALIDITY_DAYS

logger = logging.getLogger(__name__)


def to_invitation_response(
    invitation: Invitation, base_url: str, now: datetime
) -> InvitationResponse:
    base_url = base_url.rstrip("/")
    return InvitationResponse(
        id=invitation.id,
        code=invitation.code,
        token=invitation.token,
        link=f"{base_url}/sign-up/client?token={invitation.token}",
        code_link=f"{base_url}/sign-up/client?code={invitation.code}",
        email=invitation.target_email,
        expires_at=invitation.expires_at,
        created_at=invitation.created_at,
        used_at=invitation.used_at,
        is_expired=now > invitation.expires_at,
        is_used=invitation.used_at is not None,
    )


class CreateInvitationUseCase:
    """
    Use case for creating a client invitation.

    Business Rules:
    - Any signed-in agent may create invitations; approval is checked on redemption
    - Validity window is 1-90 days, default 30
    - Code is 6 characters and unique; token is a fresh UUID
    - target_email is stored as a hint only
    - Creates audit event for traceability
    """

    def __init__(
        self,
        uow: UnitOfWork,
        base_url: str,
        max_code_attempts: int = DEFAULT_MAX_ATTEMPTS,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.base_url = base_url
        self.max_code_attempts = max_code_attempts
        self.clock = clock

    async def execute(
        self,
        caller: CallerIdentity,
        email: Optional[str] = None,
        expires_in_days: int = DEFAULT_VALIDITY_DAYS,
    ) -> Result[InvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            caller: Authenticated agent
            email: Optional email of the intended client
            expires_in_days: Validity window in days

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        if not MIN_VALIDITY_DAYS <= expires_in_days <= MAX_VALIDITY_DAYS:
            return Return.err(INVALID_VALIDITY_DAYS)

        async with self.uow:
            agent, _ = await get_or_create_agent(self.uow, caller)

            generator = InvitationCodeGenerator(
                self.uow.invitations, max_attempts=self.max_code_attempts
            )
            try:
                code = await generator.generate()
            except CodeGenerationExhausted as exc:
                logger.error(f"Invitation creation aborted for agent {agent.id}: {exc}")
                return Return.err(CODE_GENERATION_EXHAUSTED)

            now = self.clock()
            invitation = Invitation(
                code=code,
                token=generate_uuid(),
                owning_agent_id=agent.id,
                target_email=email,
                created_at=now,
                expires_at=now + timedelta(days=expires_in_days),
            )
            invitation = await self.uow.invitations.create(invitation)

            audit = AuditEvent(
                actor_identity=caller.identity_reference,
                action="invitation_created",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "agent_id": str(agent.id),
                    "expires_in_days": expires_in_days,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} created by agent {agent.id}")

            return Return.ok(to_invitation_response(invitation, self.base_url, now))
