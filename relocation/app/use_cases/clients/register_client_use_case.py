"""
Register Client Use Case

Creates the caller's client record on sign-up and, when the caller arrived
through an invitation link, redeems that invitation.
"""

from datetime import datetime
from typing import Callable, Optional

from relocation.app.services.accounts import get_or_create_client
from relocation.app.services.unit_of_work import UnitOfWork
from relocation.app.use_cases.invitations import RedeemInvitationUseCase
from relocation.app.use_cases.invitations.dtos import ClientSummary
from relocation.domain.base import utc_now
from relocation.domain.identity import CallerIdentity
from relocation.libs.result import Result, Return

from .dtos import RegisterClientResponse


class RegisterClientUseCase:
    """
    Use case for client sign-up.

    Business Rules:
    - One client record per identity; repeated calls return the existing record
    - The invitation token is redeemed through the regular assignment
      transaction, so expiry, single use and agent approval all apply
    - A client that already has an agent ignores the token
    - The record is kept even when redeeming the token fails
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, caller: CallerIdentity, invitation_token: Optional[str] = None
    ) -> Result[RegisterClientResponse]:
        async with self.uow:
            client, created = await get_or_create_client(self.uow, caller)
            if created:
                await self.uow.commit()

            summary = ClientSummary(
                id=client.id,
                name=client.name,
                email=client.email,
                owning_agent_id=client.owning_agent_id,
                invitation_token=client.invitation_token,
            )

        if not invitation_token or summary.owning_agent_id is not None:
            return Return.ok(RegisterClientResponse(client=summary, created=created))

        redeemed = await RedeemInvitationUseCase(self.uow, self.clock).execute_by_token(
            caller, invitation_token
        )
        if redeemed.is_err():
            return Return.err(redeemed.error)

        return Return.ok(
            RegisterClientResponse(
                client=redeemed.value.client,
                created=created,
                agent=redeemed.value.agent,
            )
        )
