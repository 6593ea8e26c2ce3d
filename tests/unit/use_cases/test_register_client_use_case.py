from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from relocation.app.use_cases.clients import RegisterClientUseCase
from relocation.domain.entities import Agent, Client, Invitation

T0 = datetime(2026, 3, 1, 12, 0, 0)


@pytest.mark.asyncio
async def test_first_call_creates_client(mock_uow, client_caller):
    # Arrange
    mock_uow.clients.get_by_identity.return_value = None
    use_case = RegisterClientUseCase(mock_uow)

    # Act
    result = await use_case.execute(client_caller)

    # Assert
    assert result.is_ok()
    assert result.value.created is True
    assert result.value.client.name == "Carl Client"
    assert result.value.client.owning_agent_id is None
    assert result.value.agent is None
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_repeat_call_returns_existing_client(mock_uow, client_caller):
    existing = Client(
        id=uuid4(), identity_reference=client_caller.identity_reference, name="Carl"
    )
    mock_uow.clients.get_by_identity.return_value = existing
    use_case = RegisterClientUseCase(mock_uow)

    result = await use_case.execute(client_caller)

    assert result.value.created is False
    assert result.value.client.id == existing.id
    mock_uow.clients.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_sign_up_with_invitation_token_assigns_agent(mock_uow, client_caller):
    # Arrange
    agent = Agent(id=uuid4(), identity_reference="idp|agent", name="Alice", is_approved=True)
    invitation = Invitation(
        id=uuid4(), code="XK7P2M", token=str(uuid4()), owning_agent_id=agent.id,
        created_at=T0, expires_at=T0 + timedelta(days=30),
    )
    client = Client(id=uuid4(), identity_reference=client_caller.identity_reference)
    mock_uow.clients.get_by_identity.return_value = client
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.agents.get_by_id.return_value = agent
    use_case = RegisterClientUseCase(mock_uow, clock=lambda: T0)

    # Act
    result = await use_case.execute(client_caller, invitation.token)

    # Assert
    assert result.is_ok()
    assert result.value.client.owning_agent_id == agent.id
    assert result.value.agent.id == agent.id
    mock_uow.invitations.get_by_token.assert_awaited_once_with(invitation.token)
    mock_uow.invitations.mark_used.assert_awaited_once_with(invitation, T0)


@pytest.mark.asyncio
async def test_sign_up_with_bad_token_propagates_error(mock_uow, client_caller):
    client = Client(id=uuid4(), identity_reference=client_caller.identity_reference)
    mock_uow.clients.get_by_identity.return_value = client
    mock_uow.invitations.get_by_token.return_value = None
    use_case = RegisterClientUseCase(mock_uow)

    result = await use_case.execute(client_caller, str(uuid4()))

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_token_is_ignored_for_assigned_client(mock_uow, client_caller):
    client = Client(
        id=uuid4(),
        identity_reference=client_caller.identity_reference,
        owning_agent_id=uuid4(),
    )
    mock_uow.clients.get_by_identity.return_value = client
    use_case = RegisterClientUseCase(mock_uow)

    result = await use_case.execute(client_caller, str(uuid4()))

    assert result.is_ok()
    assert result.value.client.owning_agent_id == client.owning_agent_id
    mock_uow.invitations.get_by_token.assert_not_awaited()


@pytest.mark.asyncio
async def test_new_client_is_committed_before_token_redemption_fails(mock_uow, client_caller):
    """
    Given a first-time client signs up with an unknown invitation token
    When the redemption fails
    Then the error is returned
    And the client record was already committed
    """
    created = []

    async def create(client):
        created.append(client)
        return client

    async def get_by_identity(identity_reference):
        return created[0] if created else None

    mock_uow.clients.create.side_effect = create
    mock_uow.clients.get_by_identity.side_effect = get_by_identity
    mock_uow.invitations.get_by_token.return_value = None
    use_case = RegisterClientUseCase(mock_uow)

    result = await use_case.execute(client_caller, str(uuid4()))

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
    assert len(created) == 1
    mock_uow.commit.assert_awaited_once()
