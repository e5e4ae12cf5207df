"""Default hygiene rules that apply without any explicit ignore configuration."""

import re

from dir2tree.types import Entry

from .base_rules import BaseExclusionRules, InclusionDecision

# Short all-lowercase directory names such as bin, obj, dist or build
BUILD_ARTIFACT_NAME = re.compile(r"[a-z]{1,6}")


class BuildArtifactExclusionRules(BaseExclusionRules):
    """Heuristic exclusion of directories that look like generated output.

    A directory is treated as a build artifact when its name is at most six
    characters long and consists only of lowercase ASCII letters. Files are never
    affected.

    Example:
        >>> rules = BuildArtifactExclusionRules()
        >>> rules.exclude(Entry("bin", "/p/bin", is_dir=True))
        True
        >>> rules.exclude(Entry("Source", "/p/Source", is_dir=True))
        False
        >>> rules.exclude(Entry("bin", "/p/bin", is_dir=False))
        False
    """

    decision = InclusionDecision.EXCLUDE_BUILD_ARTIFACT

    def exclude(self, entry: Entry) -> bool:
        return entry.is_dir and BUILD_ARTIFACT_NAME.fullmatch(entry.name) is not None


class DotFileExclusionRules(BaseExclusionRules):
    """Implicit exclusion of dot-named entries.

    Only active when the strict pattern source is absent; a project that ships
    one is trusted to list the dot-files it wants hidden.

    Attributes:
        enabled (bool): Whether dot-named entries are excluded.
    """

    decision = InclusionDecision.EXCLUDE_DOT_FILE

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def exclude(self, entry: Entry) -> bool:
        return self.enabled and entry.name.startswith(".")
