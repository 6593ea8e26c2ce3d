"""
Complete Agent Profile Use Case

Agents record their DRE license number and brokerage after sign-up.
"""

import re

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Error, Result, Return

from .dtos import AgentProfileResponse

DRE_NUMBER_PATTERN = re.compile(r"^\d{6,8}$")


class CompleteAgentProfileUseCase:
    """
    Use case for completing the agent licensing profile.

    Business Rules:
    - DRE number is 6-8 digits
    - DRE number cannot belong to another agent
    - Brokerage name is required
    - Does not change approval state
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, caller: CallerIdentity, dre_number: str, brokerage_name: str
    ) -> Result[AgentProfileResponse]:
        dre_number = dre_number.strip()
        brokerage_name = brokerage_name.strip()

        if not DRE_NUMBER_PATTERN.match(dre_number):
            return Return.err(
                Error("INVALID_DRE_NUMBER", "DRE number must be 6 to 8 digits")
            )
        if not brokerage_name:
            return Return.err(
                Error("INVALID_BROKERAGE_NAME", "Brokerage name is required")
            )

        async with self.uow:
            agent = await self.uow.agents.get_by_identity(caller.identity_reference)
            if agent is None:
                return Return.err(Error("AGENT_NOT_FOUND", "Agent account not found"))

            owner = await self.uow.agents.get_by_dre_number(dre_number)
            if owner is not None and owner.id != agent.id:
                return Return.err(
                    Error("DRE_NUMBER_TAKEN", "This DRE number is already registered")
                )

            agent.dre_number = dre_number
            agent.brokerage_name = brokerage_name
            agent = await self.uow.agents.update(agent)

            await self.uow.commit()

            return Return.ok(AgentProfileResponse.from_agent(agent))
