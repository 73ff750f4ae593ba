"""Terminal chess against an alpha-beta search opponent."""

__version__ = "0.1.0"
__all__ = ["board", "movegen", "rules", "evaluation", "search", "cli"]