"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from proposal_app.logging.config import configure_logging
from proposal_app.models.contract import ContractTerms


REFERENCE_PROPOSAL = "\n".join([
    "PROPOSTA CONTRATTUALE – SENIOR SOFTWARE ENGINEER",
    "",
    "Bonus di ingresso: € 36,000 netti (pagato in 3 rate da € 12.000) - Calcolo: 3 × € 12.000 = € 36.000.",
    "Retribuzione annua lorda (RAL): € 80,000.",
    "Calcolo basato su periodo 1° ottobre 2024 - 1° settembre 2025 (da RAL € 60,000 + regalo Natale 2024).",
    "",
    "Rate bonus di ingresso:",
    "  - Step 1: Firma del contratto → € 12,000",
    "  - Step 2: Fine del terzo mese di lavoro → € 12,000",
    "  - Step 3: Fine del sesto mese di lavoro → € 12,000",
    "",
    "Condizioni contrattuali richieste:",
    "  - Nessun periodo di prova: sì",
    "  - Preavviso secondo legge (min. 2 mesi): sì",
    "  - Rinuncia a NASpI e preavviso arretrati: sì (tramite Avvocati + rinuncia a sputtanamento planetario)",
    "",
    "Motivazioni alla base delle richieste:",
    "  - Contratti precedenti interrotti ingiustamente dopo 2 mesi",
    "  - Mancata corresponsione di NASpI e indennità di preavviso",
    "  - Danni economici e professionali documentati",
])


@pytest.fixture
def reference_proposal() -> str:
    """Expected rendering of the built-in contract terms."""
    return REFERENCE_PROPOSAL


@pytest.fixture
def sample_terms_data() -> Dict[str, Any]:
    """Contract terms as a plain mapping, different from the built-in ones."""
    return {
        "net_bonus": 1500000,
        "annual_salary": 95000,
        "calculation_period": "1° gennaio 2025 - 31 dicembre 2025",
        "previous_salary": 999,
        "payment_steps": [
            {"step": 1, "description": "Firma del contratto", "amount": 1000000},
            {"step": 2, "description": "Fine del periodo di inserimento", "amount": 500000},
        ],
        "contract_conditions": {
            "waive_naspi_notice": False,
            "no_probation_period": False,
            "legal_notice_period": True,
        },
        "grievance_clauses": [
            "Straordinari non retribuiti",
        ],
    }


@pytest.fixture
def sample_terms(sample_terms_data: Dict[str, Any]) -> ContractTerms:
    """Sample contract terms built from the mapping fixture."""
    return ContractTerms.from_dict(sample_terms_data)


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Route structlog output to stderr at WARNING so stdout only carries documents."""
    configure_logging(level="WARNING", include_timestamp=False)
