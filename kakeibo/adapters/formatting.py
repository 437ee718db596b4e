"""Display helpers for yen amounts."""


def format_yen(amount: int) -> str:
    """Format an amount as ``¥1,234``."""
    return f"¥{amount:,}"


def format_yen_short(amount: int) -> str:
    """Format large amounts in units of 10,000 yen (``¥1.2万``)."""
    if amount >= 10000:
        return f"¥{amount / 10000:.1f}万"
    return format_yen(amount)


def format_signed_yen(amount: int) -> str:
    """Format an amount with an explicit sign for remaining budgets."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{format_yen(abs(amount))}"


__all__ = ["format_yen", "format_yen_short", "format_signed_yen"]
