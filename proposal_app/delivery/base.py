"""Base classes for document delivery mechanisms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..logging.config import get_delivery_logger


class DeliveryStatus(Enum):
    """Document delivery status."""
    SUCCESS = "success"


@dataclass
class DeliveryResult:
    """Result of a document delivery attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    bytes_written: int = 0


class BaseDocumentDelivery(ABC):
    """Base class for document delivery mechanisms."""

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = get_delivery_logger(f"proposal.delivery.{name}")
        self._delivery_count = 0
        self._error_count = 0

    @abstractmethod
    def deliver(self, document: str) -> DeliveryResult:
        """
        Deliver a rendered document to the configured destination.

        Args:
            document: Rendered proposal text

        Returns:
            Result of the delivery
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if delivery mechanism is healthy."""
        pass

    def get_stats(self) -> dict[str, Any]:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
            "error_count": self._error_count,
            "success_rate": (
                self._delivery_count / (self._delivery_count + self._error_count)
                if (self._delivery_count + self._error_count) > 0 else 0.0
            )
        }

    def reset_stats(self):
        """Reset delivery statistics."""
        self._delivery_count = 0
        self._error_count = 0
