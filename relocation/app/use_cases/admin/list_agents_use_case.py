"""
List Agents Use Case
"""

from typing import Optional

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.agents.dtos import AgentProfileResponse
from relocation.libs.result import Result, Return

from .dtos import ListAgentsResponse


class ListAgentsUseCase:
    """Administrators list agents, optionally only approved or only pending"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, approved: Optional[bool] = None) -> Result[ListAgentsResponse]:
        async with self.uow:
            agents = await self.uow.agents.list_agents(approved=approved)
            return Return.ok(
                ListAgentsResponse(
                    agents=[AgentProfileResponse.from_agent(agent) for agent in agents]
                )
            )
