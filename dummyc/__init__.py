"""Parser, syntax tree and symbol tables for DummyC, a tiny C-like language."""

__version__ = "0.1.0"

__all__ = ["ast", "parser", "symbols"]