"""Type system, standard types, errors, operator definitions and expression tree of the Lento language."""

__version__ = "0.1.0"
__all__ = ["ast", "errors", "operators", "stdtypes", "types"]