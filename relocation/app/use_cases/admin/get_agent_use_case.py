"""
Get Agent Use Case

Agent profile for the administrator, with a view of the agent's clients.
"""

from uuid import UUID

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.agents.dtos import AgentProfileResponse
from relocation.app.use_cases.clients.dtos import ClientRecord
from relocation.libs.result import Error, Result, Return

from .dtos import AgentDetailResponse

RECENT_CLIENTS_LIMIT = 5


class GetAgentUseCase:
    """
    Get one agent.

    Returns the profile, the number of assigned clients and the most
    recently created of them.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, agent_id: UUID) -> Result[AgentDetailResponse]:
        async with self.uow:
            agent = await self.uow.agents.get_by_id(agent_id)
            if agent is None:
                return Return.err(Error("AGENT_NOT_FOUND", "Agent not found"))

            client_count = await self.uow.clients.count(agent_id=agent.id)
            recent = await self.uow.clients.list_by_agent(
                agent.id, limit=RECENT_CLIENTS_LIMIT
            )

            return Return.ok(
                AgentDetailResponse(
                    agent=AgentProfileResponse.from_agent(agent),
                    client_count=client_count,
                    recent_clients=[ClientRecord.from_client(c) for c in recent],
                )
            )
