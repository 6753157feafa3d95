"""Adapters for XML input, JSON and tabular output, and console logging."""
