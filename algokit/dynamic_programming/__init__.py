"""Dynamic programming algorithms."""

from algokit.dynamic_programming.fibonacci import fibonacci

__all__ = ["fibonacci"]
