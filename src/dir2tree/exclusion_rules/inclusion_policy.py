"""Ordered combination of the exclusion rules into one inclusion decision."""

import logging
from typing import Iterable, List, Optional, Sequence

from dir2tree.types import Entry

from .base_rules import BaseExclusionRules, InclusionDecision
from .extension_rules import ExtensionExclusionRules
from .heuristic_rules import BuildArtifactExclusionRules, DotFileExclusionRules
from .pattern_rules import PatternExclusionRules, PatternSet

logger = logging.getLogger(__name__)


class InclusionPolicy:
    """Per-entry inclusion decision over an ordered list of exclusion rules.

    Rules are evaluated in order and the first one that excludes an entry decides
    the outcome. The default order built by :meth:`from_pattern_set` is:

    1. build-artifact heuristic (directories only)
    2. pattern match (wildcard on the bare name, substring of the full path)
    3. dot-file rule (only without the strict pattern source)
    4. extension allow-list (files only)

    An entry no rule excludes is included. The order defines precedence and is
    part of the contract: an entry matched by several rules is always reported
    with the reason of the earliest one.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rules, in evaluation order.

    Example:
        >>> from dir2tree.types import Entry
        >>> policy = InclusionPolicy.from_pattern_set(PatternSet(("*.log",)), extensions=[".py"])
        >>> policy.decide(Entry("obj", "/p/obj", is_dir=True)).value
        'build-artifact'
        >>> policy.decide(Entry("server.log", "/p/server.log", is_dir=False)).value
        'pattern'
        >>> policy.decide(Entry(".idea", "/p/.idea", is_dir=True)).value
        'dot-file'
        >>> policy.decide(Entry("notes.md", "/p/notes.md", is_dir=False)).value
        'extension'
        >>> policy.decide(Entry("main.py", "/p/main.py", is_dir=False)).value
        'include'
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize the policy from already constructed rules.

        Args:
            rules: Exclusion rules in evaluation order.

        Raises:
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    @classmethod
    def from_pattern_set(
        cls,
        pattern_set: Optional[PatternSet] = None,
        extensions: Optional[Iterable[str]] = None,
    ) -> "InclusionPolicy":
        """Build the standard policy for one root directory.

        Args:
            pattern_set: Rules loaded from the root's pattern sources. Defaults to an
                empty set without the strict source, which leaves the dot-file rule on.
            extensions: Optional extension allow-list for files. Empty or None allows
                every extension.

        Returns:
            A policy with the four rules in their fixed order.
        """
        if pattern_set is None:
            pattern_set = PatternSet()

        return cls(
            [
                BuildArtifactExclusionRules(),
                PatternExclusionRules(pattern_set),
                DotFileExclusionRules(enabled=not pattern_set.strict_source_present),
                ExtensionExclusionRules(extensions),
            ]
        )

    def decide(self, entry: Entry) -> InclusionDecision:
        """Evaluate the rules against an entry.

        Args:
            entry: The filesystem entry to check.

        Returns:
            The decision of the first rule that excludes the entry, or INCLUDE.
        """
        for rule in self.rules:
            if rule.exclude(entry):
                logger.debug("Excluding %s (%s)", entry.path, rule.decision.value)
                return rule.decision
        return InclusionDecision.INCLUDE

    def exclude(self, entry: Entry) -> bool:
        """Check if an entry is excluded by any rule."""
        return self.decide(entry).is_excluded

    def add_rule(self, rule: str) -> None:
        """Add a pattern rule to the first rule that accepts individual rules.

        Args:
            rule: The pattern rule to add (e.g., "*.log").

        Raises:
            NotImplementedError: If no constituent rule accepts individual rules.
        """
        for constituent in self.rules:
            if isinstance(constituent, PatternExclusionRules):
                constituent.add_rule(rule)
                return
        raise NotImplementedError("No pattern rule in this policy accepts individual rules.")
