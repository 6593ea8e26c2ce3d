from unittest.mock import AsyncMock, MagicMock

import pytest

from relocation.domain.entities import CallerRole
from relocation.domain.identity import CallerIdentity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.agents = MagicMock()
    uow.agents.get_by_id = AsyncMock()
    uow.agents.get_by_identity = AsyncMock()
    uow.agents.get_by_dre_number = AsyncMock(return_value=None)
    uow.agents.create = AsyncMock(side_effect=lambda agent: agent)
    uow.agents.update = AsyncMock(side_effect=lambda agent: agent)
    uow.agents.approve = AsyncMock()
    uow.agents.list_by_ids = AsyncMock(return_value=[])

    uow.clients = MagicMock()
    uow.clients.get_by_identity = AsyncMock()
    uow.clients.create = AsyncMock(side_effect=lambda client: client)
    uow.clients.assign_agent = AsyncMock(return_value=True)
    uow.clients.get_by_id = AsyncMock()
    uow.clients.list_by_agent = AsyncMock(return_value=[])
    uow.clients.list_clients = AsyncMock(return_value=[])
    uow.clients.count = AsyncMock(return_value=0)

    uow.invitations = MagicMock()
    uow.invitations.get_by_code = AsyncMock()
    uow.invitations.get_by_token = AsyncMock()
    uow.invitations.code_exists = AsyncMock(return_value=False)
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.mark_used = AsyncMock(return_value=True)

    uow.notifications = MagicMock()
    uow.notifications.create = AsyncMock()
    uow.notifications.update = AsyncMock()
    uow.notifications.get_for_recipient = AsyncMock()
    uow.notifications.mark_all_read = AsyncMock()

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()

    return uow


@pytest.fixture
def agent_caller():
    return CallerIdentity(
        identity_reference="idp|agent-1",
        role=CallerRole.agent,
        email="agent@example.com",
        name="Alice Agent",
    )


@pytest.fixture
def client_caller():
    return CallerIdentity(
        identity_reference="idp|client-1",
        role=CallerRole.client,
        email="client@example.com",
        name="Carl Client",
    )
