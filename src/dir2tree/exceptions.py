from typing import TYPE_CHECKING

from dir2tree.types import PathType

if TYPE_CHECKING:
    from dir2tree.exclusion_rules.base_rules import InclusionDecision


class PatternSourceError(Exception):
    """
    Exception raised when a pattern source file exists but cannot be read.

    Missing pattern sources are not an error, but a present source that fails to
    read would silently produce a tree filtered by partial rules, so the failure
    is surfaced to the caller instead.

    Attributes:
        file_path (str): Path to the pattern source that could not be read.

    Example:
        >>> error = PatternSourceError("/project/.gitignore")
        >>> str(error)
        'Cannot read pattern source: /project/.gitignore'
    """

    def __init__(self, file_path: PathType, reason: str = "") -> None:
        """
        Initialize the exception with the offending pattern source.

        Args:
            file_path: Path to the pattern source that could not be read.
            reason (str, optional): Underlying error description, appended to the message.
        """
        self.file_path = str(file_path)
        message = f"Cannot read pattern source: {self.file_path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class RootExcludedError(Exception):
    """
    Exception raised when the root directory itself is excluded by the inclusion policy.

    Attributes:
        root_path (str): The root directory that was excluded.
        decision (InclusionDecision): The policy decision that excluded it.
    """

    def __init__(self, root_path: PathType, decision: "InclusionDecision") -> None:
        self.root_path = str(root_path)
        self.decision = decision
        super().__init__(f"Root directory is excluded ({decision.value}): {self.root_path}")


class TreeFormatError(Exception):
    """
    Exception raised when a serialized tree cannot be parsed back into nodes.

    Example:
        >>> error = TreeFormatError("Unknown node type: 'Link'")
        >>> str(error)
        "Unknown node type: 'Link'"
    """

    pass
