"""Ending rules, an outcome-balancing action tree, prompt assembly, history and console input for text stories."""

__version__ = "0.1.0"
__all__ = ["rules", "tree", "prompt", "history", "interaction"]