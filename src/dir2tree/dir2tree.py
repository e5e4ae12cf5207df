"""Directory inventory facade.

This module wires the pattern loader, inclusion policy, tree builder and
renderers together for a caller that supplies a directory, optional pattern
source names and an optional extension allow-list.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from dir2tree.exclusion_rules.inclusion_policy import InclusionPolicy
from dir2tree.exclusion_rules.pattern_rules import DEFAULT_PATTERN_SOURCES, PatternSet, load_pattern_set
from dir2tree.file_system_tree.file_system_node import FileSystemNode
from dir2tree.file_system_tree.file_system_tree import FileSystemTree
from dir2tree.file_system_tree.permission_action import PermissionAction
from dir2tree.output.glyph_renderer import render_glyph_tree, stream_glyph_lines
from dir2tree.output.serializer import dump_json, serialize_tree
from dir2tree.types import PathType

logger = logging.getLogger(__name__)

TREE_ARTIFACT_SUFFIX = "-tree.json"
GLYPH_ARTIFACT_SUFFIX = ".txt"
ROOT_ARTIFACT_NAME = "root"


class Dir2Tree:
    """Filtered inventory of one directory with its two renderings.

    The pattern sources are read from the directory itself when the object is
    created. The tree is built on first access and reused by every rendering, so
    both outputs always describe the same complete tree. Nothing is rendered or
    written if building fails.

    Attributes:
        directory (Path): Directory being inventoried.
        pattern_set (PatternSet): Rules loaded from the directory's pattern sources.
        policy (InclusionPolicy): Policy applied to every entry.

    Example:
        >>> inventory = Dir2Tree("project", extensions=[".py"])  # doctest: +SKIP
        >>> print(inventory.render_tree())  # doctest: +SKIP
        └── project
            └── Source
                └── main.py
        >>> inventory.to_dict()  # doctest: +SKIP
        {'Name': 'project', 'Type': 'Folder', 'Children': [...]}

    Raises:
        PatternSourceError: If a pattern source exists but cannot be read.
        ValueError: If permission_action is not a valid action.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        source_names: Sequence[str] = DEFAULT_PATTERN_SOURCES,
        extensions: Optional[Iterable[str]] = None,
        extra_patterns: Iterable[str] = (),
        permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
    ):
        """Initialize the inventory.

        Args:
            directory: Directory to inventory. Can be any path-like object.
            source_names: Pattern source file names looked up in the directory, in
                priority order. The first name is the strict source.
            extensions: Optional extension allow-list for files (e.g. [".md", ".txt"]).
            extra_patterns: Additional rules applied after those from the pattern sources.
            permission_action: How to handle inaccessible entries below the root.
                Can be either "ignore" or "raise", or a PermissionAction enum value.
        """
        self.directory = Path(directory)

        if isinstance(permission_action, str):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid permission_action: {permission_action}. " "Must be one of: 'ignore', 'raise'"
                )

        self.pattern_set: PatternSet = load_pattern_set(self.directory, source_names)
        self.policy = InclusionPolicy.from_pattern_set(self.pattern_set, extensions)
        for pattern in extra_patterns:
            self.policy.add_rule(pattern)

        logger.debug(
            "Loaded %d pattern(s) for %s (strict source present: %s)",
            len(self.pattern_set.patterns),
            self.directory,
            self.pattern_set.strict_source_present,
        )

        self._fs_tree = FileSystemTree(self.directory, self.policy, permission_action=permission_action)

    @property
    def tree(self) -> FileSystemNode:
        """The root node, built on first access.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the path isn't a directory.
            PermissionError: If the directory can't be listed.
            RootExcludedError: If the directory itself is excluded by the policy.
        """
        return self._fs_tree.get_tree()

    @property
    def file_count(self) -> int:
        return self._fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        return self._fs_tree.get_directory_count()

    def to_dict(self) -> Dict[str, Any]:
        """Get the serialized tree as nested dictionaries."""
        return serialize_tree(self.tree)

    def to_json(self, indent: int = 2) -> str:
        """Get the serialized tree as JSON text."""
        return dump_json(self.tree, indent=indent)

    def stream_tree(self) -> Iterator[str]:
        """Generate the glyph tree one line at a time."""
        return stream_glyph_lines(self.tree)

    def render_tree(self) -> str:
        """Get the glyph tree as a single string."""
        return render_glyph_tree(self.tree)

    @property
    def tree_artifact_name(self) -> str:
        """File name of the serialized artifact, ``<directory-name>-tree.json``."""
        return f"{self._directory_name}{TREE_ARTIFACT_SUFFIX}"

    @property
    def glyph_artifact_name(self) -> str:
        """File name of the glyph artifact, ``<directory-name>.txt``."""
        return f"{self._directory_name}{GLYPH_ARTIFACT_SUFFIX}"

    @property
    def _directory_name(self) -> str:
        # A filesystem root such as "/" has an empty name
        return self.directory.resolve().name or ROOT_ARTIFACT_NAME

    def write_artifacts(self, output_dir: PathType, encoding: str = "utf-8") -> Tuple[Path, Path]:
        """Write both renderings into a directory.

        Both renderings are produced and encoded in memory before the output
        directory is created or either file is opened, so a tree that can't be
        built or encoded leaves nothing behind.

        Args:
            output_dir: Directory receiving the artifacts. Created if missing.
            encoding: Text encoding of the written files. Must be able to encode the
                box-drawing glyphs and every entry name.

        Returns:
            Paths of the serialized artifact and the glyph artifact.

        Raises:
            UnicodeEncodeError: If the encoding can't represent the renderings.
        """
        tree_bytes = (self.to_json() + "\n").encode(encoding)
        glyph_bytes = (self.render_tree() + "\n").encode(encoding)

        output = Path(output_dir)
        output.mkdir(parents=True, exist_ok=True)
        tree_path = output / self.tree_artifact_name
        glyph_path = output / self.glyph_artifact_name

        tree_path.write_bytes(tree_bytes)
        glyph_path.write_bytes(glyph_bytes)
        logger.info("Wrote %s and %s", tree_path, glyph_path)
        return tree_path, glyph_path
