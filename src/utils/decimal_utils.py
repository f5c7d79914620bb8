"""Helpers for Decimal normalization of monetary amounts."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal without binary float artifacts.

    Floats go through ``str`` so ``3500.1`` becomes ``Decimal("3500.1")``.

    Args:
        value: Raw numeric value from JSON documents or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is missing or not numeric.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Expected a numeric amount, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Expected a numeric amount, got {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Expected a finite amount, got {value!r}")
    return result


__all__ = ["coerce_decimal"]
