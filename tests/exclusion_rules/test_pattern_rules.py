import pytest

from dir2tree.exceptions import PatternSourceError
from dir2tree.exclusion_rules.pattern_rules import (
    DEFAULT_PATTERN_SOURCES,
    PatternExclusionRules,
    PatternSet,
    load_pattern_set,
    normalize_pattern,
)
from dir2tree.types import Entry


def make_entry(path, is_dir=False):
    return Entry(path.rsplit("/", 1)[-1], path, is_dir=is_dir)


@pytest.mark.parametrize(
    "line,expected",
    [
        ("*.pyc", "*.pyc"),
        ("  node_modules/  ", "node_modules"),
        ("build\\", "build"),
        ("dist//", "dist/"),
        ("", None),
        ("   ", None),
        ("# comment", None),
        ("  # indented comment", None),
        ("!important.log", None),
        ("/", None),
    ],
)
def test_normalize_pattern(line, expected):
    assert normalize_pattern(line) == expected


def test_load_pattern_set_no_sources(tmp_path):
    pattern_set = load_pattern_set(tmp_path)
    assert pattern_set == PatternSet((), False)


def test_load_pattern_set_priority_order(tmp_path):
    """Rules are concatenated in source priority order, then in file order."""
    (tmp_path / ".npmignore").write_text("*.log\n")
    (tmp_path / ".gitignore").write_text("# generated\nnode_modules/\n\n*.pyc\n!keep.pyc\n")
    (tmp_path / ".dockerignore").write_text("Dockerfile\n")

    pattern_set = load_pattern_set(tmp_path)

    assert pattern_set.patterns == ("node_modules", "*.pyc", "Dockerfile", "*.log")
    assert pattern_set.strict_source_present


def test_strict_source_only_from_first_name(tmp_path):
    """Only the first source name counts as the strict source."""
    (tmp_path / ".dockerignore").write_text("*.tmp\n")

    pattern_set = load_pattern_set(tmp_path)

    assert pattern_set.patterns == ("*.tmp",)
    assert not pattern_set.strict_source_present


def test_empty_strict_source_still_counts(tmp_path):
    (tmp_path / ".gitignore").write_text("")

    pattern_set = load_pattern_set(tmp_path)

    assert pattern_set.patterns == ()
    assert pattern_set.strict_source_present


def test_custom_source_names(tmp_path):
    (tmp_path / ".treeignore").write_text("Generated\n")
    (tmp_path / ".gitignore").write_text("*.pyc\n")

    pattern_set = load_pattern_set(tmp_path, [".treeignore"])

    assert pattern_set.patterns == ("Generated",)
    assert pattern_set.strict_source_present


def test_directory_named_like_source_is_skipped(tmp_path):
    (tmp_path / ".gitignore").mkdir()

    pattern_set = load_pattern_set(tmp_path)

    assert pattern_set == PatternSet((), False)


def test_unreadable_source_raises(tmp_path):
    source = tmp_path / ".gitignore"
    source.write_bytes(b"\xff\xfe\x00invalid")

    with pytest.raises(PatternSourceError) as exc_info:
        load_pattern_set(tmp_path)

    assert exc_info.value.file_path == str(source)


def test_default_pattern_sources():
    assert DEFAULT_PATTERN_SOURCES[0] == ".gitignore"
    assert len(DEFAULT_PATTERN_SOURCES) == 3


@pytest.mark.parametrize(
    "path,is_dir,expected",
    [
        # Wildcard against the bare name
        ("/work/app/cache.pyc", False, True),
        ("/work/app/cache.py", False, False),
        ("/work/app/node_modules", True, True),
        # Substring of the full path
        ("/work/app/node_modules/pkg/index.js", False, True),
        ("/work/app/Source/Secrets/key.pem", False, True),
        # Wildcards are only applied to the bare name
        ("/work/app/lib.pyc/readme.md", False, False),
        ("/work/app/Source/main.py", False, False),
    ],
)
def test_pattern_exclusion(path, is_dir, expected):
    rules = PatternExclusionRules(PatternSet(("*.pyc", "node_modules", "Secrets")))
    assert rules.exclude(make_entry(path, is_dir)) == expected


def test_pattern_exclusion_without_patterns():
    rules = PatternExclusionRules()
    assert not rules.exclude(make_entry("/work/app/anything.txt"))


def test_add_rule():
    rules = PatternExclusionRules(PatternSet(("*.pyc",)))
    rules.add_rule("fixtures/")
    rules.add_rule("# not a rule")
    rules.add_rule("!negated")

    assert rules.patterns == ["*.pyc", "fixtures"]
    assert rules.exclude(make_entry("/work/app/fixtures", is_dir=True))


def test_rules_do_not_share_pattern_set_state():
    pattern_set = PatternSet(("*.pyc",))
    rules = PatternExclusionRules(pattern_set)
    rules.add_rule("*.log")

    assert pattern_set.patterns == ("*.pyc",)
