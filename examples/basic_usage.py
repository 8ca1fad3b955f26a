#!/usr/bin/env python3
"""
Basic Usage Example - Contract Proposal Generator

This script demonstrates the basic usage of the proposal generator. It shows
how to:
- Render the built-in contract proposal
- Build custom contract terms from a plain mapping
- Deliver a rendered document to stdout

Run: python examples/basic_usage.py
"""

from typing import Any, Dict

from proposal_app.config.defaults import OutputParams
from proposal_app.delivery.stdout_delivery import StdoutDocumentDelivery
from proposal_app.logging.config import configure_logging
from proposal_app.models.contract import ContractTerms
from proposal_app.proposal import generate_contract_proposal
from proposal_app.rendering.renderer import render_contract_terms


def create_sample_terms() -> Dict[str, Any]:
    """Create sample terms for a four-installment bonus."""
    return {
        "net_bonus": 48000,
        "annual_salary": 90000,
        "calculation_period": "1° gennaio 2025 - 31 dicembre 2025",
        "previous_salary": 72000,
        "payment_steps": [
            {"step": 1, "description": "Firma del contratto", "amount": 12000},
            {"step": 2, "description": "Fine del terzo mese di lavoro", "amount": 12000},
            {"step": 3, "description": "Fine del sesto mese di lavoro", "amount": 12000},
            {"step": 4, "description": "Fine del primo anno di lavoro", "amount": 12000},
        ],
        "contract_conditions": {
            "waive_naspi_notice": False,
            "no_probation_period": True,
            "legal_notice_period": True,
        },
        "grievance_clauses": [
            "Ferie non godute mai liquidate",
        ],
    }


def main():
    """Run the basic usage example."""
    configure_logging(level="WARNING")
    delivery = StdoutDocumentDelivery("stdout", OutputParams())

    print("📄 Built-in contract proposal")
    print("=" * 60)
    delivery.deliver(generate_contract_proposal())

    terms = ContractTerms.from_dict(create_sample_terms())

    print("\n📄 Custom contract proposal")
    print("=" * 60)
    delivery.deliver(render_contract_terms(terms))

    print("\n📊 Summary")
    print("=" * 60)
    print(f"Installments total: € {terms.installments_total:,} (net bonus € {terms.net_bonus:,})")
    print(f"Delivery stats: {delivery.get_stats()}")


if __name__ == "__main__":
    main()
