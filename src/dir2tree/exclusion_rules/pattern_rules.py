"""Pattern sources and the wildcard/substring exclusion rule built from them."""

import logging
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from dir2tree.exceptions import PatternSourceError
from dir2tree.types import Entry, PathType

from .base_rules import BaseExclusionRules, InclusionDecision

logger = logging.getLogger(__name__)

# Checked in this order; the first name is the strict source.
DEFAULT_PATTERN_SOURCES: Tuple[str, ...] = (".gitignore", ".dockerignore", ".npmignore")

COMMENT_MARKER = "#"
NEGATION_MARKER = "!"


@dataclass(frozen=True)
class PatternSet:
    """Normalized rules loaded from the pattern sources of one root directory.

    Attributes:
        patterns: Rules in source-priority order, then in-file order.
        strict_source_present: True if the first (strict) pattern source exists.
            Its presence disables the implicit dot-file exclusion.
    """

    patterns: Tuple[str, ...] = ()
    strict_source_present: bool = False


def normalize_pattern(line: str) -> Optional[str]:
    """Turn one pattern-source line into a rule, or None if it carries no rule.

    Blank lines, comments and negations produce no rule. Negation is not
    supported and does not re-include anything.

    Args:
        line: A raw line from a pattern source.

    Returns:
        The trimmed rule with one trailing path separator removed, or None.

    Example:
        >>> normalize_pattern("  build/  ")
        'build'
        >>> normalize_pattern("*.pyc")
        '*.pyc'
        >>> normalize_pattern("# comment") is None
        True
        >>> normalize_pattern("!keep.log") is None
        True
        >>> normalize_pattern("/") is None
        True
    """
    rule = line.strip()
    if not rule or rule.startswith(COMMENT_MARKER) or rule.startswith(NEGATION_MARKER):
        return None
    if rule.endswith(("/", "\\")):
        rule = rule[:-1]
    # An empty rule would be a substring of every path
    return rule or None


def load_pattern_set(base_dir: PathType, source_names: Sequence[str] = DEFAULT_PATTERN_SOURCES) -> PatternSet:
    """Load and combine the pattern sources found in a directory.

    Args:
        base_dir: Directory in which the pattern sources are looked up.
        source_names: Pattern source file names in priority order. The first one
            is the strict source.

    Returns:
        The combined PatternSet.

    Raises:
        PatternSourceError: If a pattern source exists but cannot be read.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     _ = (Path(tmpdir) / ".gitignore").write_text("# deps\\nnode_modules/\\n*.log\\n")
        ...     pattern_set = load_pattern_set(tmpdir)
        >>> pattern_set.patterns
        ('node_modules', '*.log')
        >>> pattern_set.strict_source_present
        True
    """
    base = Path(base_dir)
    patterns: List[str] = []
    strict_source_present = False

    for index, source_name in enumerate(source_names):
        source = base / source_name
        if not source.is_file():
            logger.debug("Pattern source not found, skipping: %s", source)
            continue

        if index == 0:
            strict_source_present = True

        try:
            with open(source, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise PatternSourceError(source, str(e)) from e

        rules = [rule for rule in (normalize_pattern(line) for line in lines) if rule is not None]
        logger.debug("Loaded %d rule(s) from %s", len(rules), source)
        patterns.extend(rules)

    return PatternSet(tuple(patterns), strict_source_present)


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion by simple wildcard or substring match against loaded patterns.

    An entry is excluded if its bare name matches a rule as a shell-style
    wildcard, or if its full path contains the rule as a literal substring.
    This is deliberately not gitignore syntax: there is no ``**``, no anchoring
    and no negation.

    Attributes:
        patterns (List[str]): The active rules, in evaluation order.

    Example:
        >>> rules = PatternExclusionRules(PatternSet(("*.pyc", "node_modules")))
        >>> rules.exclude(Entry("cache.pyc", "/p/cache.pyc", is_dir=False))
        True
        >>> rules.exclude(Entry("index.js", "/p/node_modules/x/index.js", is_dir=False))
        True
        >>> rules.exclude(Entry("main.py", "/p/main.py", is_dir=False))
        False
    """

    decision = InclusionDecision.EXCLUDE_PATTERN

    def __init__(self, pattern_set: Optional[PatternSet] = None):
        self.patterns: List[str] = list(pattern_set.patterns) if pattern_set is not None else []

    def exclude(self, entry: Entry) -> bool:
        return any(fnmatch(entry.name, pattern) or pattern in entry.path for pattern in self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single rule, normalized the same way as pattern-source lines.

        Args:
            rule: The rule to add (e.g., "*.log" or "dist/"). Lines that carry no
                rule after normalization are ignored.

        Example:
            >>> rules = PatternExclusionRules()
            >>> rules.add_rule("dist/")
            >>> rules.patterns
            ['dist']
        """
        normalized = normalize_pattern(rule)
        if normalized is None:
            logger.debug("Ignoring rule without effect: %r", rule)
            return
        self.patterns.append(normalized)
