"""Classic algorithms on trees, arrays, sorting, dynamic programming, graphs, arithmetic and n-queens."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "arrays", "dynamic", "graphs", "queens", "sorting", "trees"]