"""Built-in contract terms and default runtime parameters."""

from dataclasses import dataclass

from ..models.contract import ContractConditions, ContractTerms, PaymentStep


CONTRACT_TERMS = ContractTerms(
    net_bonus=36000,
    annual_salary=80000,
    calculation_period="1° ottobre 2024 - 1° settembre 2025",
    previous_salary=60000,
    payment_steps=(
        PaymentStep(step=1, description="Firma del contratto", amount=12000),
        PaymentStep(step=2, description="Fine del terzo mese di lavoro", amount=12000),
        PaymentStep(step=3, description="Fine del sesto mese di lavoro", amount=12000),
    ),
    contract_conditions=ContractConditions(
        waive_naspi_notice=True,
        no_probation_period=True,
        legal_notice_period=True,
    ),
    grievance_clauses=(
        "Contratti precedenti interrotti ingiustamente dopo 2 mesi",
        "Mancata corresponsione di NASpI e indennità di preavviso",
        "Danni economici e professionali documentati",
    ),
)


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"             # Quiet by default, stdout carries the document
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class OutputParams:
    """Document output parameters."""
    trailing_newline: bool = True      # Terminate the document with one newline
    flush: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Complete runtime configuration."""
    logging: LoggingParams
    output: OutputParams


def get_default_app_config() -> AppConfig:
    """Get the default runtime configuration instance."""
    return AppConfig(
        logging=LoggingParams(),
        output=OutputParams(),
    )
