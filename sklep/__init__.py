"""A shopping list with a grocery shop, basket totals and text receipts."""

__version__ = "0.1.0"
__all__ = ["__version__"]