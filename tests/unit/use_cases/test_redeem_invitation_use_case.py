from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from relocation.app.use_cases.invitations import RedeemInvitationUseCase
from relocation.domain.entities import Agent, Client, Invitation

T0 = datetime(2026, 3, 1, 12, 0, 0)


def fixed_clock(now):
    return lambda: now


@pytest.fixture
def agent():
    return Agent(
        id=uuid4(),
        identity_reference="idp|agent-1",
        name="Alice Agent",
        email="agent@example.com",
        is_approved=True,
    )


@pytest.fixture
def client(client_caller):
    return Client(
        id=uuid4(),
        identity_reference=client_caller.identity_reference,
        name="Carl Client",
        email="client@example.com",
    )


@pytest.fixture
def invitation(agent):
    return Invitation(
        id=uuid4(),
        code="XK7P2M",
        token=str(uuid4()),
        owning_agent_id=agent.id,
        created_at=T0,
        expires_at=T0 + timedelta(days=30),
    )


@pytest.fixture
def ready_uow(mock_uow, agent, client, invitation):
    mock_uow.clients.get_by_identity.return_value = client
    mock_uow.invitations.get_by_code.return_value = invitation
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.agents.get_by_id.return_value = agent
    return mock_uow


@pytest.mark.asyncio
async def test_successful_redeem(ready_uow, client_caller, agent, client, invitation):
    """Client is assigned to the issuing agent and the invitation is consumed"""
    # Arrange
    now = T0 + timedelta(seconds=1)
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(now))

    # Act
    result = await use_case.execute(client_caller, "xk7p2m")

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.client.id == client.id
    assert response.client.owning_agent_id == agent.id
    assert response.client.invitation_token == invitation.token
    assert response.agent.id == agent.id
    assert response.agent.name == "Alice Agent"
    assert response.agent.email == "agent@example.com"

    ready_uow.invitations.get_by_code.assert_awaited_once_with("xk7p2m")
    ready_uow.clients.assign_agent.assert_awaited_once_with(
        client, agent.id, invitation.token
    )
    ready_uow.invitations.mark_used.assert_awaited_once_with(invitation, now)
    ready_uow.commit.assert_awaited_once()
    ready_uow.rollback.assert_not_awaited()

    audit_call = ready_uow.audit_events.create.call_args[0][0]
    assert audit_call.action == "invitation_redeemed"
    assert audit_call.actor_identity == client_caller.identity_reference
    assert audit_call.event_metadata["via"] == "code"


@pytest.mark.asyncio
async def test_redeem_by_token(ready_uow, client_caller, invitation):
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute_by_token(client_caller, invitation.token)

    assert result.is_ok()
    ready_uow.invitations.get_by_token.assert_awaited_once_with(invitation.token)
    ready_uow.invitations.get_by_code.assert_not_awaited()
    audit_call = ready_uow.audit_events.create.call_args[0][0]
    assert audit_call.event_metadata["via"] == "token"


@pytest.mark.asyncio
async def test_client_not_found(ready_uow, client_caller):
    ready_uow.clients.get_by_identity.return_value = None
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute(client_caller, "XK7P2M")

    assert result.is_err()
    assert result.error.code == "CLIENT_NOT_FOUND"
    ready_uow.invitations.get_by_code.assert_not_awaited()
    ready_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_already_assigned_is_checked_before_the_code(ready_uow, client_caller, client):
    """An assigned client gets ALREADY_ASSIGNED even for an unknown code"""
    client.owning_agent_id = uuid4()
    ready_uow.invitations.get_by_code.return_value = None
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute(client_caller, "ZZZZZZ")

    assert result.is_err()
    assert result.error.code == "ALREADY_ASSIGNED"
    ready_uow.invitations.get_by_code.assert_not_awaited()
    ready_uow.invitations.mark_used.assert_not_awaited()


@pytest.mark.asyncio
async def test_invitation_not_found(ready_uow, client_caller):
    ready_uow.invitations.get_by_code.return_value = None
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute(client_caller, "ZZZZZZ")

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
    assert result.error.message == "Invalid invitation code"


@pytest.mark.asyncio
async def test_invitation_expired(ready_uow, client_caller, invitation):
    use_case = RedeemInvitationUseCase(
        ready_uow, clock=fixed_clock(invitation.expires_at + timedelta(seconds=1))
    )

    result = await use_case.execute(client_caller, invitation.code)

    assert result.is_err()
    assert result.error.code == "INVITATION_EXPIRED"
    ready_uow.clients.assign_agent.assert_not_awaited()


@pytest.mark.asyncio
async def test_invitation_already_used(ready_uow, client_caller, invitation):
    invitation.used_at = T0 + timedelta(hours=1)
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0 + timedelta(days=1)))

    result = await use_case.execute(client_caller, invitation.code)

    assert result.is_err()
    assert result.error.code == "INVITATION_ALREADY_USED"


@pytest.mark.asyncio
async def test_used_and_expired_reports_already_used(ready_uow, client_caller, invitation):
    invitation.used_at = T0 + timedelta(hours=1)
    use_case = RedeemInvitationUseCase(
        ready_uow, clock=fixed_clock(invitation.expires_at + timedelta(days=1))
    )

    result = await use_case.execute(client_caller, invitation.code)

    assert result.error.code == "INVITATION_ALREADY_USED"


@pytest.mark.asyncio
async def test_expired_and_used_messages_differ(ready_uow, client_caller, invitation):
    expired = await RedeemInvitationUseCase(
        ready_uow, clock=fixed_clock(invitation.expires_at + timedelta(days=1))
    ).execute(client_caller, invitation.code)

    invitation.used_at = T0
    used = await RedeemInvitationUseCase(
        ready_uow, clock=fixed_clock(T0)
    ).execute(client_caller, invitation.code)

    assert expired.error.message != used.error.message


@pytest.mark.asyncio
async def test_unapproved_agent_blocks_valid_invitation(
    ready_uow, client_caller, agent, invitation
):
    agent.is_approved = False
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute(client_caller, invitation.code)

    assert result.is_err()
    assert result.error.code == "AGENT_NOT_APPROVED"
    ready_uow.clients.assign_agent.assert_not_awaited()
    ready_uow.invitations.mark_used.assert_not_awaited()
    ready_uow.commit.assert_not_awaited()
    assert invitation.used_at is None


@pytest.mark.asyncio
async def test_expiry_is_checked_before_agent_approval(
    ready_uow, client_caller, agent, invitation
):
    agent.is_approved = False
    use_case = RedeemInvitationUseCase(
        ready_uow, clock=fixed_clock(invitation.expires_at + timedelta(days=1))
    )

    result = await use_case.execute(client_caller, invitation.code)

    assert result.error.code == "INVITATION_EXPIRED"
    ready_uow.agents.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_lost_client_race_rolls_back(ready_uow, client_caller, invitation):
    """Zero rows updated on the client means another request assigned it first"""
    ready_uow.clients.assign_agent.return_value = False
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute(client_caller, invitation.code)

    assert result.is_err()
    assert result.error.code == "ALREADY_ASSIGNED"
    ready_uow.rollback.assert_awaited_once()
    ready_uow.invitations.mark_used.assert_not_awaited()
    ready_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_lost_invitation_race_rolls_back_assignment(
    ready_uow, client_caller, invitation
):
    """Zero rows updated on the invitation undoes the client assignment too"""
    ready_uow.invitations.mark_used.return_value = False
    use_case = RedeemInvitationUseCase(ready_uow, clock=fixed_clock(T0))

    result = await use_case.execute(client_caller, invitation.code)

    assert result.is_err()
    assert result.error.code == "INVITATION_ALREADY_USED"
    ready_uow.clients.assign_agent.assert_awaited_once()
    ready_uow.rollback.assert_awaited_once()
    ready_uow.audit_events.create.assert_not_awaited()
    ready_uow.commit.assert_not_awaited()
