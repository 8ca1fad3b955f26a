"""
Document rendering module.

Turns contract terms into the Italian proposal text.
"""
from .renderer import render_contract_terms

__all__ = ["render_contract_terms"]
