"""Display helpers shared by the document renderer."""


def format_amount(amount: int) -> str:
    """Group an integer's digits in threes with commas, e.g. 80000 -> '80,000'."""
    return f"{amount:,d}"


def yes_no(flag: bool) -> str:
    """Render a boolean as the Italian 'sì'/'no' token."""
    return "sì" if flag else "no"
