"""Admin use cases for the agent approval workflow, client oversight and dashboard."""

from .approve_agent_use_case import ApproveAgentUseCase
from .dtos import (
    AdminClientResponse,
    AgentDetailResponse,
    ApproveAgentResponse,
    DashboardStatsResponse,
    ListAgentsResponse,
    ListClientsResponse,
    RejectAgentResponse,
)
from .get_agent_use_case import GetAgentUseCase
from .get_client_use_case import GetClientUseCase
from .get_dashboard_stats_use_case import GetDashboardStatsUseCase
from .list_agents_use_case import ListAgentsUseCase
from .list_clients_use_case import ListClientsUseCase
from .reject_agent_use_case import RejectAgentUseCase

__all__ = [
    "ApproveAgentUseCase",
    "ApproveAgentResponse",
    "RejectAgentUseCase",
    "RejectAgentResponse",
    "ListAgentsUseCase",
    "ListAgentsResponse",
    "GetAgentUseCase",
    "AgentDetailResponse",
    "ListClientsUseCase",
    "ListClientsResponse",
    "GetClientUseCase",
    "AdminClientResponse",
    "GetDashboardStatsUseCase",
    "DashboardStatsResponse",
]
