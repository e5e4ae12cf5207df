"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules, InclusionDecision
from .extension_rules import ExtensionExclusionRules
from .heuristic_rules import BuildArtifactExclusionRules, DotFileExclusionRules
from .inclusion_policy import InclusionPolicy
from .pattern_rules import DEFAULT_PATTERN_SOURCES, PatternExclusionRules, PatternSet, load_pattern_set

__all__ = [
    "BaseExclusionRules",
    "BuildArtifactExclusionRules",
    "DEFAULT_PATTERN_SOURCES",
    "DotFileExclusionRules",
    "ExtensionExclusionRules",
    "InclusionDecision",
    "InclusionPolicy",
    "PatternExclusionRules",
    "PatternSet",
    "load_pattern_set",
]
