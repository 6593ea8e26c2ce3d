"""
Account resolution

Maps an authenticated caller onto its local Agent or Client record.
"""

import logging
from typing import Tuple

from relocation.app.services.unit_of_work import UnitOfWork
from relocation.domain.entities import Agent, Client
from relocation.domain.identity import CallerIdentity

logger = logging.getLogger(__name__)


async def get_or_create_agent(uow: UnitOfWork, caller: CallerIdentity) -> Tuple[Agent, bool]:
    """
    Return the caller's agent account, creating it on first use.

    The second element is True when the account was created by this call.
    Does not commit.
    """
    agent = await uow.agents.get_by_identity(caller.identity_reference)
    if agent is not None:
        return agent, False

    agent = Agent(
        identity_reference=caller.identity_reference,
        name=caller.display_name,
        email=caller.email or "",
        is_approved=False,
    )
    agent = await uow.agents.create(agent)
    logger.info(f"Created agent account {agent.id} for {caller.identity_reference}")
    return agent, True


async def get_or_create_client(
    uow: UnitOfWork, caller: CallerIdentity
) -> Tuple[Client, bool]:
    """Same as get_or_create_agent, for client records. Does not commit."""
    client = await uow.clients.get_by_identity(caller.identity_reference)
    if client is not None:
        return client, False

    client = Client(
        identity_reference=caller.identity_reference,
        name=caller.display_name,
        email=caller.email or "",
    )
    client = await uow.clients.create(client)
    logger.info(f"Created client record {client.id} for {caller.identity_reference}")
    return client, True
