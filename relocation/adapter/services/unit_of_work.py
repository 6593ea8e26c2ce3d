from sqlmodel.ext.asyncio.session import AsyncSession

from relocation.adapter.repositories.agent_repository import AgentRepository
from relocation.adapter.repositories.audit_event_repository import AuditEventRepository
from relocation.adapter.repositories.client_repository import ClientRepository
from relocation.adapter.repositories.invitation_repository import InvitationRepository
from relocation.adapter.repositories.notification_repository import NotificationRepository
from relocation.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.agents = AgentRepository(self.session)
        self.clients = ClientRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
