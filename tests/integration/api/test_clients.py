from uuid import uuid4

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_client_is_idempotent(client: AsyncClient, client_headers):
    first = await client.post("/clients/me", json={}, headers=client_headers)
    second = await client.post("/clients/me", json={}, headers=client_headers)

    assert first.status_code == 200
    assert first.json()["created"] is True
    assert first.json()["client"]["name"] == "Client One"
    assert first.json()["client"]["email"] == "c1@example.com"
    assert first.json()["client"]["owning_agent_id"] is None
    assert second.json()["created"] is False
    assert second.json()["client"]["id"] == first.json()["client"]["id"]


@pytest.mark.asyncio
async def test_register_with_invitation_link(
    client: AsyncClient, approved_agent, agent_headers, client_headers
):
    """
    Given a client follows an invitation link from an approved agent
    When they sign up with the link token
    Then they are assigned to the agent in the same request
    """
    created = (await client.post("/invitations", json={}, headers=agent_headers)).json()

    response = await client.post(
        "/clients/me", json={"invitation_token": created["token"]}, headers=client_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["created"] is True
    assert data["client"]["owning_agent_id"] == approved_agent
    assert data["agent"]["id"] == approved_agent

    preview = await client.get("/invitations/verify", params={"token": created["token"]})
    assert preview.json()["reason"] == "already_used"


@pytest.mark.asyncio
async def test_register_with_unknown_token_keeps_client(client: AsyncClient, client_headers):
    response = await client.post(
        "/clients/me", json={"invitation_token": str(uuid4())}, headers=client_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITATION_NOT_FOUND"

    again = await client.post("/clients/me", json={}, headers=client_headers)
    assert again.json()["created"] is False


@pytest.mark.asyncio
async def test_register_with_unapproved_agent_link(
    client: AsyncClient, agent_headers, client_headers
):
    created = (await client.post("/invitations", json={}, headers=agent_headers)).json()

    response = await client.post(
        "/clients/me", json={"invitation_token": created["token"]}, headers=client_headers
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AGENT_NOT_APPROVED"


async def assign_new_client(client: AsyncClient, agent_headers, client_headers):
    invitation = (await client.post("/invitations", json={}, headers=agent_headers)).json()
    await client.post("/clients/me", json={}, headers=client_headers)
    response = await client.post(
        "/clients/me/assign-by-code", json={"code": invitation["code"]}, headers=client_headers
    )
    assert response.status_code == 200
    return response.json()["client"]


@pytest.mark.asyncio
async def test_agent_lists_assigned_clients_newest_first(
    client: AsyncClient, approved_agent, agent_headers, client_headers, make_headers
):
    # Arrange
    first = await assign_new_client(client, agent_headers, client_headers)
    second = await assign_new_client(
        client, agent_headers, make_headers("idp|client-c2", "client", name="Client Two")
    )
    await client.post(
        "/clients/me", json={}, headers=make_headers("idp|client-c3", "client")
    )

    # Act
    response = await client.get("/clients", headers=agent_headers)

    # Assert
    assert response.status_code == 200
    clients = response.json()["clients"]
    assert [c["id"] for c in clients] == [second["id"], first["id"]]
    assert clients[0]["name"] == "Client Two"
    assert all(c["owning_agent_id"] == approved_agent for c in clients)


@pytest.mark.asyncio
async def test_agent_without_account_lists_no_clients(client: AsyncClient, agent_headers):
    response = await client.get("/clients", headers=agent_headers)

    assert response.status_code == 200
    assert response.json() == {"clients": []}


@pytest.mark.asyncio
async def test_clients_cannot_list_clients(client: AsyncClient, client_headers):
    response = await client.get("/clients", headers=client_headers)

    assert response.status_code == 403
