"""Console exercises with token-based input, and small language demonstrations."""

__version__ = "0.1.0"
__all__ = ["__version__"]