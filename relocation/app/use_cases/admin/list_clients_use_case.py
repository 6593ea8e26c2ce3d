"""
List Clients Use Case
"""

from typing import List, Optional
from uuid import UUID

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.clients.dtos import ClientRecord
from relocation.app.use_cases.invitations.dtos import AgentSummary
from relocation.domain.entities import Agent, Client
from relocation.libs.result import Result, Return

from .dtos import AdminClientResponse, ListClientsResponse


def to_admin_client(client: Client, agent: Optional[Agent]) -> AdminClientResponse:
    record = ClientRecord.from_client(client)
    summary = None
    if agent is not None:
        summary = AgentSummary(id=agent.id, name=agent.name, email=agent.email)
    return AdminClientResponse(**record.model_dump(), agent=summary)


class ListClientsUseCase:
    """
    Administrators list every client, newest first, with the owning agent's
    name and email.

    Filters: one agent's clients, and a case-insensitive search on name or email.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, agent_id: Optional[UUID] = None, search: Optional[str] = None
    ) -> Result[ListClientsResponse]:
        async with self.uow:
            clients = await self.uow.clients.list_clients(
                agent_id=agent_id, search=search or None
            )

            agent_ids: List[UUID] = list(
                {c.owning_agent_id for c in clients if c.owning_agent_id is not None}
            )
            agents = {a.id: a for a in await self.uow.agents.list_by_ids(agent_ids)}

            return Return.ok(
                ListClientsResponse(
                    clients=[
                        to_admin_client(client, agents.get(client.owning_agent_id))
                        for client in clients
                    ]
                )
            )
