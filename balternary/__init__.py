"""Fixed-width balanced ternary integers and trit arithmetic."""

__version__ = "0.1.0"
__all__ = ["number", "trit"]