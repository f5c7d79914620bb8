"""Domain constants for general-ledger consolidation."""

DEFAULT_DESCRIPTION_SEPARATOR = ", "


__all__ = ["DEFAULT_DESCRIPTION_SEPARATOR"]
