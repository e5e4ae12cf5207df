"""File system tree representation with an inclusion policy.

This module provides the main FileSystemTree class for building tree
representations of directory structures, pruning every entry the inclusion
policy excludes.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from dir2tree.exceptions import RootExcludedError
from dir2tree.exclusion_rules.inclusion_policy import InclusionPolicy
from dir2tree.file_system_tree.file_system_node import FileNode, FileSystemNode, FolderNode
from dir2tree.file_system_tree.permission_action import PermissionAction
from dir2tree.types import Entry, PathType

logger = logging.getLogger(__name__)


class FileSystemTree:
    """A tree representation of a directory structure filtered by an inclusion policy.

    The tree is built lazily on first access with a single depth-first walk. Every
    entry, the root included, is passed through the policy; an excluded entry is
    never materialized and its subtree is not visited. Children of a folder are
    kept in sorted name order so that an unchanged directory always produces the
    same tree.

    Error Handling:
        Problems with the root are fatal: a missing root raises FileNotFoundError,
        a non-directory raises NotADirectoryError, an unlistable root raises
        PermissionError and a root excluded by the policy raises RootExcludedError.
        Entries below the root that cannot be accessed are handled according to
        permission_action:
        - IGNORE (default): prune the entry and its subtree, log a warning
        - RAISE: immediately raise PermissionError naming the entry

    Symbolic links are followed (``os.stat``) and no cycle detection is done.

    Attributes:
        root_path (Path): The root directory.
        policy (InclusionPolicy): Rules deciding which entries are kept.
        permission_action (PermissionAction): How to handle inaccessible entries.

    Example:
        >>> tree = FileSystemTree("project")  # doctest: +SKIP
        >>> root = tree.get_tree()  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['README.md', 'Source']
    """

    def __init__(
        self,
        root_path: PathType,
        policy: Optional[InclusionPolicy] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            policy: Inclusion policy applied to every entry. Defaults to the standard
                policy without pattern rules or extension filter.
            permission_action: How to handle inaccessible entries below the root.
                Defaults to IGNORE.
        """
        self.root_path = Path(root_path)
        self.policy = policy if policy is not None else InclusionPolicy.from_pattern_set()
        self.permission_action = permission_action
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it on first access.

        Returns:
            The root FolderNode.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If the root can't be listed, or an entry below it can't
                be accessed and permission_action is RAISE.
            RootExcludedError: If the root itself is excluded by the policy.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        """Build the filesystem tree from the root path and count its entries."""
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        resolved = self.root_path.resolve()
        root_entry = Entry(resolved.name, str(resolved), is_dir=True)
        decision = self.policy.decide(root_entry)
        if decision.is_excluded:
            raise RootExcludedError(self.root_path, decision)

        try:
            names = sorted(os.listdir(resolved))
        except OSError as e:
            raise PermissionError(f"Access denied to {self.root_path}: {e}") from e

        children = self._create_children(resolved, names)
        self._tree = FolderNode(root_entry.name, children=children)
        self._count_files_and_directories()

    def _create_children(self, directory: Path, names: List[str]) -> List[FileSystemNode]:
        """Build the surviving child nodes of a directory, in the given order."""
        children = []
        for name in names:
            child = self._create_node(directory / name)
            if child is not None:
                children.append(child)
        return children

    def _create_node(self, path: Path) -> Optional[FileSystemNode]:
        """Recursively create the node for a path, or None if it is pruned."""
        try:
            is_dir = stat.S_ISDIR(os.stat(path).st_mode)
        except OSError as e:
            self._handle_access_error(path, e)
            return None

        entry = Entry(path.name, str(path), is_dir=is_dir)
        if self.policy.exclude(entry):
            return None

        if not is_dir:
            return FileNode(entry.name)

        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            self._handle_access_error(path, e)
            return None

        return FolderNode(entry.name, children=self._create_children(path, names))

    def _handle_access_error(self, path: Path, error: OSError) -> None:
        if self.permission_action == PermissionAction.RAISE:
            raise PermissionError(f"Error accessing {path}: {error}") from error
        logger.warning("Skipping inaccessible entry %s: %s", path, error)

    def _count_files_and_directories(self) -> None:
        """Count files and directories in the tree, not counting the root."""
        self._file_count = 0
        self._directory_count = 0
        if self._tree is None:
            return
        for node in self._tree.descendants:
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the total number of files in the tree."""
        if self._tree is None:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding root)."""
        if self._tree is None:
            self._build_tree()
        return self._directory_count

    def refresh(self) -> None:
        """Rebuild the tree to reflect the current filesystem state."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
