"""
Agent Gate

Decides whether an agent's invitations may be redeemed.
"""

import logging
from uuid import UUID

from relocation.app.repositories.agent_repository import IAgentRepository

logger = logging.getLogger(__name__)


class AgentGate:
    """Reads approval state on every call; unknown agents are not approved."""

    def __init__(self, agents: IAgentRepository):
        self.agents = agents

    async def is_approved(self, agent_id: UUID) -> bool:
        agent = await self.agents.get_by_id(agent_id)
        if agent is None:
            logger.warning(f"Approval check for unknown agent {agent_id}")
            return False
        return agent.is_approved is True
