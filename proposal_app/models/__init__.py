"""
Data models and contracts module.

Immutable data structures for contract terms, payment steps and conditions.
Follows functional programming principles with frozen dataclasses.
"""
from .contract import ContractConditions, ContractTerms, PaymentStep

__all__ = ["ContractConditions", "ContractTerms", "PaymentStep"]
