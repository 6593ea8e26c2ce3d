from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from relocation.app.services.agent_gate import AgentGate
from relocation.domain.entities import Agent


def make_agents(agent):
    agents = MagicMock()
    agents.get_by_id = AsyncMock(return_value=agent)
    return agents


@pytest.mark.asyncio
async def test_approved_agent_passes():
    agent = Agent(id=uuid4(), identity_reference="idp|a", is_approved=True)

    assert await AgentGate(make_agents(agent)).is_approved(agent.id) is True


@pytest.mark.asyncio
async def test_pending_agent_is_blocked():
    agent = Agent(id=uuid4(), identity_reference="idp|a", is_approved=False)

    assert await AgentGate(make_agents(agent)).is_approved(agent.id) is False


@pytest.mark.asyncio
async def test_unknown_agent_is_blocked():
    assert await AgentGate(make_agents(None)).is_approved(uuid4()) is False


@pytest.mark.asyncio
async def test_reads_approval_on_every_call():
    agent = Agent(id=uuid4(), identity_reference="idp|a", is_approved=False)
    agents = make_agents(agent)
    gate = AgentGate(agents)

    assert await gate.is_approved(agent.id) is False
    agent.is_approved = True
    assert await gate.is_approved(agent.id) is True
    assert agents.get_by_id.await_count == 2
