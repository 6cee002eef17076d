"""
Gateways - Local stand-ins for the fulfillment and email systems.
"""

from .email_service import LoggingEmailService
from .fulfillment_service import LocalFulfillmentService

__all__ = [
    "LocalFulfillmentService",
    "LoggingEmailService",
]
