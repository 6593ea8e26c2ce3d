"""
Get Agent Status Use Case
"""

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Error, Result, Return

from .dtos import AgentStatusResponse


class GetAgentStatusUseCase:
    """Use case for an agent checking its approval state"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[AgentStatusResponse]:
        async with self.uow:
            agent = await self.uow.agents.get_by_identity(caller.identity_reference)
            if agent is None:
                return Return.err(Error("AGENT_NOT_FOUND", "Agent account not found"))

            return Return.ok(
                AgentStatusResponse(
                    is_approved=agent.is_approved,
                    dre_number=agent.dre_number,
                    brokerage_name=agent.brokerage_name,
                    approved_at=agent.approved_at,
                )
            )
