"""Extension allow-list rule for files."""

import os
from typing import Iterable, Optional, Tuple

from dir2tree.types import Entry

from .base_rules import BaseExclusionRules, InclusionDecision


def normalize_extension(extension: str) -> str:
    """Return the extension with a leading period.

    The empty string is kept as is and stands for "files without an extension".

    Example:
        >>> normalize_extension("md")
        '.md'
        >>> normalize_extension(".txt")
        '.txt'
        >>> normalize_extension("")
        ''
    """
    extension = extension.strip()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


class ExtensionExclusionRules(BaseExclusionRules):
    """Exclusion of files whose extension is not on an allow-list.

    The extension is taken with its leading period and compared case-sensitively.
    An empty allow-list allows everything. Directories are never affected.

    Attributes:
        extensions (Tuple[str, ...]): The allowed extensions, in the order given.

    Example:
        >>> rules = ExtensionExclusionRules([".md", "txt"])
        >>> rules.exclude(Entry("b.py", "/p/b.py", is_dir=False))
        True
        >>> rules.exclude(Entry("c.txt", "/p/c.txt", is_dir=False))
        False
        >>> rules.exclude(Entry("docs.py", "/p/docs.py", is_dir=True))
        False
    """

    decision = InclusionDecision.EXCLUDE_EXTENSION

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        self.extensions: Tuple[str, ...] = tuple(normalize_extension(e) for e in extensions or ())

    def exclude(self, entry: Entry) -> bool:
        if entry.is_dir or not self.extensions:
            return False
        return os.path.splitext(entry.name)[1] not in self.extensions
