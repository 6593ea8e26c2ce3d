"""
List Agent Clients Use Case

Agents review the clients assigned to them.
"""

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Result, Return

from .dtos import ClientRecord, ListAgentClientsResponse


class ListAgentClientsUseCase:
    """
    Use case for listing the caller's clients, newest first.

    An agent without an account yet has no clients.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[ListAgentClientsResponse]:
        async with self.uow:
            agent = await self.uow.agents.get_by_identity(caller.identity_reference)
            if agent is None:
                return Return.ok(ListAgentClientsResponse(clients=[]))

            clients = await self.uow.clients.list_by_agent(agent.id)

            return Return.ok(
                ListAgentClientsResponse(
                    clients=[ClientRecord.from_client(client) for client in clients]
                )
            )
