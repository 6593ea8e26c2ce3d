"""
Reject Agent Use Case

Administrators turn down a pending agent. The account stays unapproved.
"""

import logging
from typing import Optional
from uuid import UUID

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.entities import AuditEvent, Notification, NotificationType
from relocation.libs.result import Error, Result, Return

from .dtos import RejectAgentResponse

logger = logging.getLogger(__name__)


class RejectAgentUseCase:
    """
    Reject a pending agent.

    Business Logic:
    1. Validate agent exists and is still pending
    2. Notify the agent, with the reason when given
    3. Create audit event

    No agent state changes; rejection is a message, not a status.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, agent_id: UUID, reason: Optional[str] = None, rejected_by: str = "admin"
    ) -> Result[RejectAgentResponse]:
        async with self.uow:
            agent = await self.uow.agents.get_by_id(agent_id)
            if agent is None:
                return Return.err(Error("AGENT_NOT_FOUND", "Agent not found"))

            if agent.is_approved:
                return Return.err(
                    Error("AGENT_ALREADY_APPROVED", "Agent is already approved")
                )

            if reason:
                message = f"Your agent application was rejected. Reason: {reason}"
            else:
                message = (
                    "Your agent application was rejected. "
                    "Please contact the administrator for details."
                )

            notification = Notification(
                recipient_identity=agent.identity_reference,
                type=NotificationType.agent_rejected,
                title="Agent approval rejected",
                message=message,
                event_metadata={
                    "agent_id": str(agent.id),
                    "rejected_by": rejected_by,
                    "reason": reason,
                },
            )
            await self.uow.notifications.create(notification)

            audit_event = AuditEvent(
                actor_identity=None,
                action="agent_rejected",
                event_metadata={"agent_id": str(agent.id), "reason": reason},
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()

            logger.info(f"Agent {agent.id} rejected by {rejected_by}")

            return Return.ok(RejectAgentResponse(status="rejected"))
