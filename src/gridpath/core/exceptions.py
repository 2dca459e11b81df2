"""Exceptions raised by the grid path library."""


class GridPathError(Exception):
    """Base class for grid path errors."""
    pass


class NoPathFound(GridPathError):
    """Raised when the open set empties before any goal node is finalized."""

    def __init__(self, message: str = "No path found", nodes_expanded: int = 0):
        super().__init__(message)
        self.nodes_expanded = nodes_expanded


class MalformedNodeKey(GridPathError, ValueError):
    """Raised when a node key does not contain a decodable position."""
    pass


class MazeFormatError(GridPathError, ValueError):
    """Raised when maze text cannot be turned into a search problem."""
    pass
