"""Token definitions, parser and interpreter for the Prawn scripting language."""

__version__ = "0.1.0"
__all__ = ["tokenspec", "review", "errors", "parser", "interpreter"]