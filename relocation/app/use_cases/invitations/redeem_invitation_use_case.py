"""
Redeem Invitation Use Case

A client presents an invitation code (or link token) and is assigned to the
agent who issued it.
"""

import logging
from datetime import datetime
from typing import Awaitable, Callable, Optional

from relocation.app.services.agent_gate import AgentGate
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.base import utc_now
from relocation.domain.entities import AuditEvent, Invitation, InvitationCheck
from relocation.domain.identity import CallerIdentity
from relocation.domain.invitation_policy import classify
from relocation.libs.result import Result, Return

from .dtos import AgentSummary, ClientSummary, RedeemInvitationResponse
from .errors import (
    AGENT_NOT_APPROVED,
    ALREADY_ASSIGNED,
    CHECK_ERRORS,
    CLIENT_NOT_FOUND,
    INVITATION_ALREADY_USED,
)

logger = logging.getLogger(__name__)


class RedeemInvitationUseCase:
    """
    Use case for assigning a client to an agent through an invitation.

    Business Rules (checked in this order, first failure wins):
    1. The caller must have a client record (CLIENT_NOT_FOUND)
    2. The client must not have an agent yet (ALREADY_ASSIGNED)
    3. The invitation must exist, be unused and unexpired
       (INVITATION_NOT_FOUND, INVITATION_ALREADY_USED, INVITATION_EXPIRED)
    4. The issuing agent must be approved (AGENT_NOT_APPROVED)

    The client update and the invitation consumption are conditional writes
    committed together. Losing either race rolls back both.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, caller: CallerIdentity, code: str
    ) -> Result[RedeemInvitationResponse]:
        """
        Redeem an invitation code.

        Args:
            caller: Authenticated client
            code: Invitation code, any case

        Returns:
            Result with RedeemInvitationResponse DTO, or Error
        """
        return await self._redeem(
            caller, lambda: self.uow.invitations.get_by_code(code), via="code"
        )

    async def execute_by_token(
        self, caller: CallerIdentity, token: str
    ) -> Result[RedeemInvitationResponse]:
        """Redeem an invitation through its link token."""
        return await self._redeem(
            caller, lambda: self.uow.invitations.get_by_token(token), via="token"
        )

    async def _redeem(
        self,
        caller: CallerIdentity,
        lookup: Callable[[], Awaitable[Optional[Invitation]]],
        via: str,
    ) -> Result[RedeemInvitationResponse]:
        async with self.uow:
            client = await self.uow.clients.get_by_identity(caller.identity_reference)
            if client is None:
                return Return.err(CLIENT_NOT_FOUND)

            if client.owning_agent_id is not None:
                return Return.err(ALREADY_ASSIGNED)

            invitation = await lookup()
            now = self.clock()
            check = classify(invitation, now)
            if check != InvitationCheck.valid:
                logger.warning(
                    f"Redeem by {via} rejected for client {client.id}: {check.value}"
                )
                return Return.err(CHECK_ERRORS[check])

            client_id, invitation_id = client.id, invitation.id
            agent_id = invitation.owning_agent_id
            if not await AgentGate(self.uow.agents).is_approved(agent_id):
                logger.warning(
                    f"Redeem rejected for client {client.id}: agent {agent_id} not approved"
                )
                return Return.err(AGENT_NOT_APPROVED)

            # Conditional writes: zero affected rows means a concurrent request won.
            # Rollback expires loaded instances, so only plain ids are used after it.
            assigned = await self.uow.clients.assign_agent(
                client, agent_id, invitation.token
            )
            if not assigned:
                await self.uow.rollback()
                logger.warning(f"Client {client_id} was assigned concurrently")
                return Return.err(ALREADY_ASSIGNED)

            consumed = await self.uow.invitations.mark_used(invitation, now)
            if not consumed:
                await self.uow.rollback()
                logger.warning(f"Invitation {invitation_id} was consumed concurrently")
                return Return.err(INVITATION_ALREADY_USED)

            audit = AuditEvent(
                actor_identity=caller.identity_reference,
                action="invitation_redeemed",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "client_id": str(client.id),
                    "agent_id": str(agent_id),
                    "via": via,
                },
            )
            await self.uow.audit_events.create(audit)

            agent = await self.uow.agents.get_by_id(agent_id)

            await self.uow.commit()

            logger.info(f"Client {client.id} assigned to agent {agent_id}")

            return Return.ok(
                RedeemInvitationResponse(
                    client=ClientSummary(
                        id=client.id,
                        name=client.name,
                        email=client.email,
                        owning_agent_id=agent_id,
                        invitation_token=invitation.token,
                    ),
                    agent=AgentSummary(id=agent.id, name=agent.name, email=agent.email),
                )
            )
