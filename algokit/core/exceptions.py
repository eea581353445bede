"""Algokit custom exceptions."""


class AlgokitError(Exception):
    """Base exception for Algokit errors."""


class InvalidArgumentError(AlgokitError, ValueError):
    """An argument is outside the domain an algorithm accepts."""


class NodeNotFoundError(AlgokitError, KeyError):
    """Node not found in the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""
