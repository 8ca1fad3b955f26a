"""Public entry point for contract proposal generation."""

from .config.defaults import CONTRACT_TERMS
from .rendering.renderer import render_contract_terms


def generate_contract_proposal() -> str:
    """Render the built-in contract terms into the proposal document."""
    return render_contract_terms(CONTRACT_TERMS)
