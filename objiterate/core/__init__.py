"""
Core components of objiterate.

This package contains the method-name schema and registry, configuration
loading, and the iteration driver with its mode adapters.
"""

__all__ = []
