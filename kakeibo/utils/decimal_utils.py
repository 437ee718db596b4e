"""Helpers for Decimal normalization and rounding."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value) -> int:
    """Round an amount to the nearest integer, halves away from zero.

    Every displayed amount and percentage goes through this helper, so
    1.5 and 2.5 become 2 and 3 (the built-in round gives 2 for both).
    Callers only pass non-negative amounts, where this matches the
    half-toward-positive-infinity rounding of the dashboard figures.
    The two differ on negative halves: -2.5 gives -3 here, not -2.

    Args:
        value: Numeric value to round.

    Returns:
        int: Rounded whole amount.
    """
    return int(
        coerce_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )


__all__ = ["coerce_decimal", "round_half_up"]
