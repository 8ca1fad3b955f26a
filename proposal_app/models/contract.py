"""
Canonical data models for employment contract terms.

This module defines immutable data structures that describe the monetary
terms, the entry bonus payment schedule, the requested contractual conditions
and the grievances that motivate the proposal.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PaymentStep:
    """Single installment of the entry bonus."""
    step: int              # 1-based sequence number
    description: str       # When the installment is due
    amount: int            # Installment amount in euros


@dataclass(frozen=True)
class ContractConditions:
    """Contractual conditions requested alongside the offer."""
    waive_naspi_notice: bool      # Waiver of NASpI and arrears notice
    no_probation_period: bool     # Skip the probationary period
    legal_notice_period: bool     # Notice period according to law


@dataclass(frozen=True)
class ContractTerms:
    """Complete set of terms rendered into a contract proposal."""
    net_bonus: int                              # Total net entry bonus
    annual_salary: int                          # Gross annual salary (RAL)
    calculation_period: str                     # Reference period for the bonus
    previous_salary: int                        # Baseline salary for the calculation
    payment_steps: tuple[PaymentStep, ...]      # Sorted by step ascending
    contract_conditions: ContractConditions
    grievance_clauses: tuple[str, ...]

    @property
    def installments_total(self) -> int:
        """Sum of all payment step amounts, conventionally equal to net_bonus."""
        return sum(payment.amount for payment in self.payment_steps)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContractTerms":
        """
        Build contract terms from a plain mapping.

        Nested payment steps and conditions may be given as mappings; lists
        are frozen into tuples. Values are taken as-is.

        Args:
            data: Mapping with the same keys as the dataclass fields

        Returns:
            Immutable ContractTerms instance
        """
        conditions = data["contract_conditions"]
        if not isinstance(conditions, ContractConditions):
            conditions = ContractConditions(
                waive_naspi_notice=conditions["waive_naspi_notice"],
                no_probation_period=conditions["no_probation_period"],
                legal_notice_period=conditions["legal_notice_period"],
            )

        steps = tuple(
            step if isinstance(step, PaymentStep) else PaymentStep(
                step=step["step"],
                description=step["description"],
                amount=step["amount"],
            )
            for step in data["payment_steps"]
        )

        return cls(
            net_bonus=data["net_bonus"],
            annual_salary=data["annual_salary"],
            calculation_period=data["calculation_period"],
            previous_salary=data["previous_salary"],
            payment_steps=steps,
            contract_conditions=conditions,
            grievance_clauses=tuple(data["grievance_clauses"]),
        )
