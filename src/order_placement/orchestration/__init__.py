"""
Orchestration Layer - Application coordination and workflow management.

This layer coordinates all other layers to provide the complete
order placement workflow.
"""

from .config import ApplicationConfig
from .orchestrator import (
    ApplicationOrchestrator,
    create_orchestrator,
    create_order_service,
    load_order,
)

__all__ = [
    "ApplicationConfig",
    "ApplicationOrchestrator",
    "create_orchestrator",
    "create_order_service",
    "load_order",
]
