"""
Error classification for the proposal generator.

Contract data is built in and always well-formed, so the hierarchy only
covers the runtime layers around the renderer: configuration loading and
document delivery.
"""

from .failures import (
    ProposalError,
    ConfigurationError,
    DeliveryError,
)

__all__ = [
    "ProposalError",
    "ConfigurationError",
    "DeliveryError",
]
