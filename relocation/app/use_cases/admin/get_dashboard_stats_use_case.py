"""
Get Dashboard Stats Use Case

Headline numbers for the administrator dashboard.
"""

from datetime import datetime, timedelta
from typing import Callable

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.base import utc_now
from relocation.libs.result import Result, Return

from .dtos import DashboardStatsResponse, RecentAgent, RecentClient

RECENT_LIMIT = 5


class GetDashboardStatsUseCase:
    """
    Counts come from local records only. Agents known to the identity
    provider but never signed in here are not counted.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        recent_days: int = 7,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.recent_days = recent_days
        self.clock = clock

    async def execute(self) -> Result[DashboardStatsResponse]:
        now = self.clock()
        since = now - timedelta(days=self.recent_days)

        async with self.uow:
            total_clients = await self.uow.clients.count()
            assigned_clients = await self.uow.clients.count(assigned=True)
            total_agents = await self.uow.agents.count()
            pending_agents = await self.uow.agents.count(approved=False)
            active_invitations = await self.uow.invitations.count_active(now)

            recent_clients = await self.uow.clients.list_created_since(since, RECENT_LIMIT)
            recent_agents = await self.uow.agents.list_created_since(since, RECENT_LIMIT)

            return Return.ok(
                DashboardStatsResponse(
                    total_clients=total_clients,
                    assigned_clients=assigned_clients,
                    unassigned_clients=total_clients - assigned_clients,
                    total_agents=total_agents,
                    pending_agents=pending_agents,
                    active_invitations=active_invitations,
                    recent_clients=[
                        RecentClient(id=c.id, name=c.name, created_at=c.created_at)
                        for c in recent_clients
                    ],
                    recent_agents=[
                        RecentAgent(
                            id=a.id, name=a.name, email=a.email, created_at=a.created_at
                        )
                        for a in recent_agents
                    ],
                )
            )
