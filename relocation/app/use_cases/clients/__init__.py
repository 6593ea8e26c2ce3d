"""
Client Use Cases
"""

from .dtos import ClientRecord, ListAgentClientsResponse, RegisterClientResponse
from .list_agent_clients_use_case import ListAgentClientsUseCase
from .register_client_use_case import RegisterClientUseCase

__all__ = [
    "RegisterClientUseCase",
    "RegisterClientResponse",
    "ListAgentClientsUseCase",
    "ListAgentClientsResponse",
    "ClientRecord",
]
