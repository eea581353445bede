"""
Core module: exceptions, logging and shared types.

Exceptions (exceptions.py):
    - AlgokitError: Base exception for all algokit errors
    - InvalidArgumentError: Argument outside an algorithm's domain
    - NodeNotFoundError: Requested node doesn't exist in a graph

Logging (logger.py):
    - setup_logger: Configure the ``algokit`` logger (rich handler)
    - get_logger: Child logger for a module

Types (types.py):
    - Less, Predicate, Visitor: Callable aliases
    - Addable: Protocol for values usable in a recurrence
"""

from algokit.core.exceptions import (
    AlgokitError,
    InvalidArgumentError,
    NodeNotFoundError,
)
from algokit.core.logger import get_logger, setup_logger
from algokit.core.types import Addable, Less, Predicate, Visitor

__all__ = [
    # Exceptions
    "AlgokitError",
    "InvalidArgumentError",
    "NodeNotFoundError",
    # Logging
    "get_logger",
    "setup_logger",
    # Types
    "Addable",
    "Less",
    "Predicate",
    "Visitor",
]
