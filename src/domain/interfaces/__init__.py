"""
Domain Interfaces (Ports)
"""

from .clients import PaymentGatewayClient

__all__ = [
    "PaymentGatewayClient",
]
