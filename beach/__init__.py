"""Abstract syntax tree, fluent builders and tree-walking evaluator for the Beach language."""

__version__ = "0.1.0"