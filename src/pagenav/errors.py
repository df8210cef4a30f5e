"""Exceptions raised by the navigation controller."""


class NavigationError(Exception):
    """Base class for navigation errors."""


class IndexOutOfRange(NavigationError, IndexError):
    """An index lies outside the valid bound for the operation."""

    def __init__(self, index: int, size: int, action: str) -> None:
        super().__init__(
            f"Index {index} used to {action} is out of range for {size} node(s)."
        )
        self.index = index
        self.size = size


class InvalidState(NavigationError, RuntimeError):
    """The controller is in a state that cannot serve the request."""
