"""Contract ABI types, tokens, selectors, specifications and log topic filters."""

__version__ = "0.1.0"

__all__ = [
    "filter",
    "function",
    "log",
    "param_type",
    "params",
    "signature",
    "state_mutability",
    "token",
    "util",
]