from abc import ABC, abstractmethod

from relocation.app.repositories.agent_repository import IAgentRepository
from relocation.app.repositories.audit_event_repository import IAuditEventRepository
from relocation.app.repositories.client_repository import IClientRepository
from relocation.app.repositories.invitation_repository import IInvitationRepository
from relocation.app.repositories.notification_repository import INotificationRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    agents: IAgentRepository
    clients: IClientRepository
    invitations: IInvitationRepository
    notifications: INotificationRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
