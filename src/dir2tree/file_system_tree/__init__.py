"""File system tree representation with an inclusion policy.

This module provides classes for building tree representations of directory
structures, pruning entries the inclusion policy excludes.
"""

from .file_system_node import FileNode, FileSystemNode, FolderNode
from .file_system_tree import FileSystemTree
from .permission_action import PermissionAction

__all__ = ["FileNode", "FileSystemNode", "FileSystemTree", "FolderNode", "PermissionAction"]
