"""Permission action enum for handling access errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry below the root cannot be accessed.

    Values:
        IGNORE: Prune the inaccessible entry and its subtree, log it and continue (default behavior)
        RAISE: Raise a PermissionError immediately naming the inaccessible path
    """

    IGNORE = "ignore"
    RAISE = "raise"
