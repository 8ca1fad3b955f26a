"""
Process entry point.

Loads runtime settings, renders the built-in contract proposal once and
writes it to standard output.
"""

import sys
from pathlib import Path
from typing import Optional

import structlog

from .config.defaults import CONTRACT_TERMS
from .config.loader import ConfigLoader
from .delivery.stdout_delivery import StdoutDocumentDelivery
from .errors import ConfigurationError, DeliveryError
from .logging.config import configure_logging
from .proposal import generate_contract_proposal

logger = structlog.get_logger(__name__)


def main(config_dir: Optional[Path] = None) -> int:
    """
    Generate the contract proposal and print it to stdout.

    Args:
        config_dir: Directory holding proposal.yaml, defaults to <repo>/config

    Returns:
        Process exit code
    """
    try:
        app_config = ConfigLoader.create(config_dir).load_app_config()
    except ConfigurationError as e:
        configure_logging()
        logger.error("Configuration rejected", error=str(e), source=e.source)
        return 1

    configure_logging(
        level=app_config.logging.level,
        format_json=app_config.logging.format_json,
        include_timestamp=app_config.logging.include_timestamp,
        include_caller=app_config.logging.include_caller,
    )

    document = generate_contract_proposal()
    logger.debug(
        "Contract terms rendered",
        payment_steps=len(CONTRACT_TERMS.payment_steps),
        grievance_clauses=len(CONTRACT_TERMS.grievance_clauses),
    )
    delivery = StdoutDocumentDelivery("stdout", app_config.output)

    try:
        delivery.deliver(document)
    except DeliveryError as e:
        logger.error("Proposal delivery failed", error=str(e), delivery_method=e.delivery_method)
        return 1

    logger.info("Contract proposal generated", stats=delivery.get_stats())
    return 0


if __name__ == "__main__":
    sys.exit(main())
