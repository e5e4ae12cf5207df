from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeType(str, Enum):
    """Enumeration of node types in a built tree.

    The values double as the ``Type`` field of the serialized form.

    Attributes:
        FOLDER: Directory node, may carry children
        FILE: Leaf node
    """

    FOLDER = "Folder"
    FILE = "File"


@dataclass(frozen=True)
class Entry:
    """A single filesystem entry as seen by the inclusion policy.

    Attributes:
        name: Bare name of the entry (no directory components).
        path: Full path of the entry, as built during traversal.
        is_dir: True if the entry is a directory.

    Example:
        >>> entry = Entry("main.py", "/project/src/main.py", is_dir=False)
        >>> entry.name
        'main.py'
    """

    name: str
    path: str
    is_dir: bool
