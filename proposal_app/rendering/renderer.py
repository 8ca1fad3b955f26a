"""
Contract proposal renderer.

Produces the multi-section Italian proposal text from a ContractTerms record.
The renderer is a pure function: the same terms always yield the same text.
"""

from ..models.contract import ContractTerms
from .formatting import format_amount, yes_no

TITLE = "PROPOSTA CONTRATTUALE – SENIOR SOFTWARE ENGINEER"
STEPS_HEADER = "Rate bonus di ingresso:"
CONDITIONS_HEADER = "Condizioni contrattuali richieste:"
GRIEVANCES_HEADER = "Motivazioni alla base delle richieste:"

# Fixed text, not derived from net_bonus
BONUS_INSTALLMENTS_NOTE = "(pagato in 3 rate da € 12.000) - Calcolo: 3 × € 12.000 = € 36.000."
NASPI_WAIVER_NOTE = "(tramite Avvocati + rinuncia a sputtanamento planetario)"


def render_contract_terms(terms: ContractTerms) -> str:
    """
    Render contract terms into the proposal document.

    Sections are joined with newlines in a fixed order: title, monetary
    summary, bonus installments, requested conditions and grievances. Item
    sections with no entries keep their header.

    Args:
        terms: Complete contract terms

    Returns:
        Proposal text without a trailing newline
    """
    conditions = terms.contract_conditions

    lines = [
        f"{TITLE}\n",
        f"Bonus di ingresso: € {format_amount(terms.net_bonus)} netti {BONUS_INSTALLMENTS_NOTE}",
        f"Retribuzione annua lorda (RAL): € {format_amount(terms.annual_salary)}.",
        f"Calcolo basato su periodo {terms.calculation_period} "
        f"(da RAL € {format_amount(terms.previous_salary)} + regalo Natale 2024).",
        f"\n{STEPS_HEADER}",
    ]

    lines.extend(
        f"  - Step {payment.step}: {payment.description} → € {format_amount(payment.amount)}"
        for payment in terms.payment_steps
    )

    lines.extend([
        f"\n{CONDITIONS_HEADER}",
        f"  - Nessun periodo di prova: {yes_no(conditions.no_probation_period)}",
        f"  - Preavviso secondo legge (min. 2 mesi): {yes_no(conditions.legal_notice_period)}",
        f"  - Rinuncia a NASpI e preavviso arretrati: "
        f"{yes_no(conditions.waive_naspi_notice)} {NASPI_WAIVER_NOTE}",
        f"\n{GRIEVANCES_HEADER}",
    ])

    lines.extend(f"  - {clause}" for clause in terms.grievance_clauses)

    return "\n".join(lines)
