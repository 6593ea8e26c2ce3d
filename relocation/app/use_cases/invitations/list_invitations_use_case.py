"""
List Invitations Use Case

Agents review the invitations they created.
"""

from datetime import datetime
from typing import Callable

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.base import utc_now
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Result, Return

from .create_invitation_use_case import to_invitation_response
from .dtos import ListInvitationsResponse


class ListInvitationsUseCase:
    """
    Use case for listing an agent's invitations, newest first.

    An agent without an account yet simply has no invitations.
    """

    def __init__(
        self, uow: UnitOfWork, base_url: str, clock: Callable[[], datetime] = utc_now
    ):
        self.uow = uow
        self.base_url = base_url
        self.clock = clock

    async def execute(self, caller: CallerIdentity) -> Result[ListInvitationsResponse]:
        async with self.uow:
            agent = await self.uow.agents.get_by_identity(caller.identity_reference)
            if agent is None:
                return Return.ok(ListInvitationsResponse(invitations=[]))

            invitations = await self.uow.invitations.list_by_agent(agent.id)
            now = self.clock()

            return Return.ok(
                ListInvitationsResponse(
                    invitations=[
                        to_invitation_response(invitation, self.base_url, now)
                        for invitation in invitations
                    ]
                )
            )
