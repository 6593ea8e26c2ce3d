"""
Approve Agent Use Case

Administrators approve agents so their invitations become redeemable.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.agents.dtos import AgentProfileResponse
from relocation.domain.base import utc_now
from relocation.domain.entities import AuditEvent, Notification, NotificationType
from relocation.libs.result import Error, Result, Return

from .dtos import ApproveAgentResponse

logger = logging.getLogger(__name__)


class ApproveAgentUseCase:
    """
    Approve an agent.

    Business Logic:
    1. Validate agent exists
    2. Flip is_approved from False to True with a conditional write
    3. Notify the agent
    4. Create audit event

    Approval happens once; approving an approved agent fails.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, agent_id: UUID, approved_by: str = "admin"
    ) -> Result[ApproveAgentResponse]:
        async with self.uow:
            # 1. Get agent
            agent = await self.uow.agents.get_by_id(agent_id)
            if agent is None:
                return Return.err(Error("AGENT_NOT_FOUND", "Agent not found"))

            # 2. Approve, only if still pending
            approved = await self.uow.agents.approve(agent, self.clock(), approved_by)
            if not approved:
                return Return.err(
                    Error("AGENT_ALREADY_APPROVED", "Agent is already approved")
                )

            # 3. Notify the agent
            notification = Notification(
                recipient_identity=agent.identity_reference,
                type=NotificationType.agent_approved,
                title="Agent approval complete",
                message="Your agent account has been approved. You can now serve clients.",
                event_metadata={"agent_id": str(agent.id), "approved_by": approved_by},
            )
            await self.uow.notifications.create(notification)

            # 4. Create audit event
            audit_event = AuditEvent(
                actor_identity=None,
                action="agent_approved",
                event_metadata={"agent_id": str(agent.id), "approved_by": approved_by},
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

            logger.info(f"Agent {agent.id} approved by {approved_by}")

            return Return.ok(
                ApproveAgentResponse(agent=AgentProfileResponse.from_agent(agent))
            )
