import pytest

from dir2tree.exclusion_rules.base_rules import InclusionDecision
from dir2tree.exclusion_rules.heuristic_rules import BuildArtifactExclusionRules, DotFileExclusionRules
from dir2tree.types import Entry


@pytest.mark.parametrize(
    "name,expected",
    [
        ("bin", True),
        ("obj", True),
        ("log", True),
        ("dist", True),
        ("build", True),
        ("target", True),
        ("x", True),
        ("Source", False),
        ("src1", False),
        ("ABC", False),
        ("vendors", False),  # seven characters
        ("my_lib", False),
        ("node-js", False),
        (".git", False),
        ("café", False),
    ],
)
def test_build_artifact_directories(name, expected):
    rules = BuildArtifactExclusionRules()
    assert rules.exclude(Entry(name, f"/work/{name}", is_dir=True)) == expected


def test_build_artifact_ignores_files():
    rules = BuildArtifactExclusionRules()
    assert not rules.exclude(Entry("bin", "/work/bin", is_dir=False))
    assert not rules.exclude(Entry("make", "/work/make", is_dir=False))


def test_build_artifact_decision():
    assert BuildArtifactExclusionRules.decision is InclusionDecision.EXCLUDE_BUILD_ARTIFACT


@pytest.mark.parametrize(
    "name,is_dir,expected",
    [
        (".venv", True, True),
        (".idea", True, True),
        (".env", False, True),
        ("..hidden", False, True),
        ("README.md", False, False),
        ("config.", False, False),
    ],
)
def test_dot_file_rule_enabled(name, is_dir, expected):
    rules = DotFileExclusionRules(enabled=True)
    assert rules.exclude(Entry(name, f"/work/{name}", is_dir=is_dir)) == expected


def test_dot_file_rule_disabled():
    rules = DotFileExclusionRules(enabled=False)
    assert not rules.exclude(Entry(".venv", "/work/.venv", is_dir=True))
