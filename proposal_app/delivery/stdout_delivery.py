"""Standard output document delivery mechanism."""

import sys
from typing import Optional, TextIO

from ..config.defaults import OutputParams
from ..errors import DeliveryError
from .base import BaseDocumentDelivery, DeliveryResult, DeliveryStatus


class StdoutDocumentDelivery(BaseDocumentDelivery):
    """Standard output document delivery implementation."""

    def __init__(self, name: str, config: OutputParams, stream: Optional[TextIO] = None):
        super().__init__(name, config)
        self.config: OutputParams = config
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected stdout (e.g. pytest capture) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def deliver(self, document: str) -> DeliveryResult:
        """Write the document to stdout, failing fast if the write fails."""
        output = document + "\n" if self.config.trailing_newline else document

        try:
            self.stream.write(output)
            if self.config.flush:
                self.stream.flush()
        except (OSError, ValueError) as e:
            self._error_count += 1
            self.logger.error(
                "Failed to write document to stdout",
                delivery_name=self.name,
                error=str(e)
            )
            raise DeliveryError(
                f"Stdout error: {e}",
                delivery_method="stdout",
                destination=self.name
            ) from e

        self._delivery_count += 1
        self.logger.info(
            "Document written to stdout",
            delivery_name=self.name,
            characters=len(output)
        )

        return DeliveryResult(
            status=DeliveryStatus.SUCCESS,
            message="Printed to stdout",
            bytes_written=len(output.encode("utf-8"))
        )

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return self.stream.writable()
        except (OSError, ValueError):
            return False
