"""Image processing routines and dense neural-network building blocks on NumPy arrays."""

__version__ = "1.0.0"