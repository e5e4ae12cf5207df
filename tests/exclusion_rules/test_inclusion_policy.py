import pytest

from dir2tree.exclusion_rules.base_rules import BaseExclusionRules, InclusionDecision
from dir2tree.exclusion_rules.extension_rules import ExtensionExclusionRules
from dir2tree.exclusion_rules.heuristic_rules import BuildArtifactExclusionRules, DotFileExclusionRules
from dir2tree.exclusion_rules.inclusion_policy import InclusionPolicy
from dir2tree.exclusion_rules.pattern_rules import PatternExclusionRules, PatternSet
from dir2tree.types import Entry


def entry(name, is_dir=False, parent="/work/Project"):
    return Entry(name, f"{parent}/{name}", is_dir=is_dir)


def test_default_rule_order():
    policy = InclusionPolicy.from_pattern_set()
    assert [type(rule) for rule in policy.rules] == [
        BuildArtifactExclusionRules,
        PatternExclusionRules,
        DotFileExclusionRules,
        ExtensionExclusionRules,
    ]


@pytest.mark.parametrize(
    "candidate,expected",
    [
        # Build-artifact heuristic wins over a matching pattern
        (entry("dist", is_dir=True), InclusionDecision.EXCLUDE_BUILD_ARTIFACT),
        # Pattern wins over the dot-file rule
        (entry(".cache", is_dir=True), InclusionDecision.EXCLUDE_PATTERN),
        # Pattern wins over the extension filter
        (entry("server.log"), InclusionDecision.EXCLUDE_PATTERN),
        # Dot-file rule wins over the extension filter
        (entry(".notes.md"), InclusionDecision.EXCLUDE_DOT_FILE),
        (entry(".idea", is_dir=True), InclusionDecision.EXCLUDE_DOT_FILE),
        (entry("main.py"), InclusionDecision.EXCLUDE_EXTENSION),
        (entry("README.md"), InclusionDecision.INCLUDE),
        # Directories are never filtered by extension
        (entry("Source", is_dir=True), InclusionDecision.INCLUDE),
    ],
)
def test_first_matching_rule_decides(candidate, expected):
    policy = InclusionPolicy.from_pattern_set(PatternSet(("dist", ".cache", "*.log")), extensions=[".md"])
    assert policy.decide(candidate) is expected
    assert policy.exclude(candidate) == expected.is_excluded


def test_strict_source_disables_dot_file_rule():
    policy = InclusionPolicy.from_pattern_set(PatternSet((), strict_source_present=True))
    assert policy.decide(entry(".venv", is_dir=True)) is InclusionDecision.INCLUDE
    assert policy.decide(entry(".env")) is InclusionDecision.INCLUDE


def test_strict_source_keeps_build_artifact_heuristic():
    policy = InclusionPolicy.from_pattern_set(PatternSet((), strict_source_present=True))
    assert policy.decide(entry("obj", is_dir=True)) is InclusionDecision.EXCLUDE_BUILD_ARTIFACT


def test_patterns_still_exclude_dot_files_with_strict_source():
    policy = InclusionPolicy.from_pattern_set(PatternSet((".env",), strict_source_present=True))
    assert policy.decide(entry(".env")) is InclusionDecision.EXCLUDE_PATTERN


def test_add_rule_goes_to_pattern_rules():
    policy = InclusionPolicy.from_pattern_set()
    policy.add_rule("*.bak")
    assert policy.decide(entry("old.bak")) is InclusionDecision.EXCLUDE_PATTERN


def test_add_rule_without_pattern_rules():
    policy = InclusionPolicy([BuildArtifactExclusionRules()])
    with pytest.raises(NotImplementedError):
        policy.add_rule("*.bak")


def test_invalid_rule_type():
    with pytest.raises(TypeError):
        InclusionPolicy([BuildArtifactExclusionRules(), "not a rule"])


def test_custom_rules():
    class LargeNameRules(BaseExclusionRules):
        decision = InclusionDecision.EXCLUDE_PATTERN

        def exclude(self, entry):
            return len(entry.name) > 10

    policy = InclusionPolicy([LargeNameRules()])
    assert policy.exclude(entry("a_very_long_name.txt"))
    assert not policy.exclude(entry("short.txt"))


def test_base_rule_add_rule_not_supported():
    with pytest.raises(NotImplementedError):
        BuildArtifactExclusionRules().add_rule("*.pyc")
