"""Classic comparison sorts, elementary list operations and a greeting command."""

__version__ = "0.1.0"
__all__ = ["arrays", "basics", "sorting"]