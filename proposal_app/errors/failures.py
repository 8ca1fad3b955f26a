"""
Failure classifications for the runtime layers.

These exceptions stop the run; the process boundary reports them and exits
with a non-zero status.
"""

from typing import Optional, Dict, Any


class ProposalError(Exception):
    """Base class for proposal generator failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(ProposalError):
    """Runtime configuration could not be loaded or failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source


class DeliveryError(ProposalError):
    """Writing the rendered document to its destination failed."""

    def __init__(self, message: str, delivery_method: Optional[str] = None,
                 destination: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method
        self.destination = destination
