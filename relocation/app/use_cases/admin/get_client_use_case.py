"""
Get Client Use Case
"""

from uuid import UUID

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.libs.result import Error, Result, Return

from .dtos import AdminClientResponse
from .list_clients_use_case import to_admin_client


class GetClientUseCase:
    """Administrators look up one client and its owning agent"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID) -> Result[AdminClientResponse]:
        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id)
            if client is None:
                return Return.err(Error("CLIENT_NOT_FOUND", "Client not found"))

            agent = None
            if client.owning_agent_id is not None:
                agent = await self.uow.agents.get_by_id(client.owning_agent_id)

            return Return.ok(to_admin_client(client, agent))
