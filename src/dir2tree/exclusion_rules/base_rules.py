from abc import ABC, abstractmethod
from enum import Enum

from dir2tree.types import Entry


class InclusionDecision(str, Enum):
    """Outcome of evaluating one entry against the inclusion policy.

    Every exclusion carries the reason it was produced by, so callers can report
    why an entry (or the root itself) was dropped.

    Example:
        >>> InclusionDecision.EXCLUDE_DOT_FILE.is_excluded
        True
        >>> InclusionDecision.INCLUDE.is_included
        True
    """

    INCLUDE = "include"
    EXCLUDE_BUILD_ARTIFACT = "build-artifact"
    EXCLUDE_PATTERN = "pattern"
    EXCLUDE_DOT_FILE = "dot-file"
    EXCLUDE_EXTENSION = "extension"

    @property
    def is_included(self) -> bool:
        return self is InclusionDecision.INCLUDE

    @property
    def is_excluded(self) -> bool:
        return self is not InclusionDecision.INCLUDE


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for a single exclusion rule.

    Each concrete rule checks one aspect of an entry (its name shape, the loaded
    patterns, its extension, ...) and reports the decision it stands for through
    the ``decision`` class attribute. Rules are combined in a fixed order by
    :class:`~dir2tree.exclusion_rules.inclusion_policy.InclusionPolicy`, where the
    first rule that excludes an entry wins.

    Example:
        >>> from dir2tree.types import Entry
        >>> class TmpExclusionRules(BaseExclusionRules):
        ...     decision = InclusionDecision.EXCLUDE_PATTERN
        ...     def exclude(self, entry: Entry) -> bool:
        ...         return entry.name.endswith(".tmp")
        >>> rules = TmpExclusionRules()
        >>> rules.exclude(Entry("build.tmp", "/p/build.tmp", is_dir=False))
        True
        >>> rules.exclude(Entry("main.py", "/p/main.py", is_dir=False))
        False
    """

    decision: InclusionDecision = InclusionDecision.EXCLUDE_PATTERN

    @abstractmethod
    def exclude(self, entry: Entry) -> bool:
        """
        Determine if a given entry should be excluded by this rule.

        Args:
            entry: The filesystem entry to check.

        Returns:
            bool: True if the entry should be excluded, False if this rule lets it through.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are not driven by patterns (e.g., name-shape or extension
        rules) use this default implementation, which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
