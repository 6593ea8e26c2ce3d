"""
Sign In Agent Use Case

Ensures an agent account exists for the caller.
"""

from relocation.app.services.accounts import get_or_create_agent
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Result, Return

from .dtos import AgentProfileResponse, SignInAgentResponse


class SignInAgentUseCase:
    """
    Use case for an agent's first (or any) sign-in.

    Idempotent: repeated calls return the same account with created=False.
    New accounts start unapproved.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, caller: CallerIdentity) -> Result[SignInAgentResponse]:
        async with self.uow:
            agent, created = await get_or_create_agent(self.uow, caller)
            if created:
                await self.uow.commit()

            return Return.ok(
                SignInAgentResponse(
                    agent=AgentProfileResponse.from_agent(agent), created=created
                )
            )
