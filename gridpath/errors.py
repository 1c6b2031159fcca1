"""
Exception types raised by the path-search engine.

Bad input subclasses ValueError and misuse subclasses RuntimeError, so
callers that already catch the builtin types keep working.
"""


class GridPathError(Exception):
    """Base class for all gridpath errors."""


class MapStructureError(GridPathError, ValueError):
    """The cost map is empty, non-rectangular or holds unknown codes."""


class SearchConfigurationError(GridPathError, ValueError):
    """Start/goal/graph/mode rejected by SearchEngine.init()."""


class SearchStateError(GridPathError, RuntimeError):
    """An operation was called in a state that does not allow it."""


class FrontierEmptyError(GridPathError, IndexError):
    """pop_min() was called on an empty frontier."""
