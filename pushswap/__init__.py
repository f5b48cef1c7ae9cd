"""Two-stack integer sorting with a limited instruction set: parsing, stacks, strategy and command line."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "sorting", "stack"]