"""Nested mapping serialization of a built tree.

Each node becomes a mapping with ``Name`` and ``Type`` keys; folders also carry
``Children``, an ordered list of the same structure (possibly empty)::

    {"Name": "project", "Type": "Folder", "Children": [
        {"Name": "README.md", "Type": "File"}
    ]}
"""

import json
from typing import Any, Dict, List, Mapping

from dir2tree.exceptions import TreeFormatError
from dir2tree.file_system_tree.file_system_node import FileNode, FileSystemNode, FolderNode
from dir2tree.types import NodeType

NAME_KEY = "Name"
TYPE_KEY = "Type"
CHILDREN_KEY = "Children"


def serialize_tree(node: FileSystemNode) -> Dict[str, Any]:
    """Convert a node and its subtree into nested dictionaries.

    Args:
        node: Root of the (sub)tree to serialize. Not modified.

    Returns:
        A new nested dictionary.

    Example:
        >>> serialize_tree(FolderNode("docs", children=[FileNode("a.md")]))
        {'Name': 'docs', 'Type': 'Folder', 'Children': [{'Name': 'a.md', 'Type': 'File'}]}
    """
    data: Dict[str, Any] = {NAME_KEY: node.name, TYPE_KEY: node.node_type.value}
    if node.is_dir:
        data[CHILDREN_KEY] = [serialize_tree(child) for child in node.children]
    return data


def parse_tree(data: Mapping[str, Any]) -> FileSystemNode:
    """Rebuild a tree from the structure produced by serialize_tree.

    Args:
        data: A serialized node.

    Returns:
        A new tree with the same names, types and child order.

    Raises:
        TreeFormatError: If the structure is not a valid serialized node.

    Example:
        >>> root = parse_tree({"Name": "docs", "Type": "Folder", "Children": [{"Name": "a.md", "Type": "File"}]})
        >>> [child.name for child in root.children]
        ['a.md']
    """
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"Expected a mapping for a node, got {type(data).__name__}")

    try:
        name = data[NAME_KEY]
        raw_type = data[TYPE_KEY]
    except KeyError as e:
        raise TreeFormatError(f"Node is missing required key {e}") from e

    if not isinstance(name, str):
        raise TreeFormatError(f"Node name must be a string, got {type(name).__name__}")

    try:
        node_type = NodeType(raw_type)
    except ValueError:
        raise TreeFormatError(f"Unknown node type: {raw_type!r}")

    if node_type is NodeType.FILE:
        if CHILDREN_KEY in data:
            raise TreeFormatError(f"File node {name!r} must not have children")
        return FileNode(name)

    raw_children = data.get(CHILDREN_KEY, [])
    if not isinstance(raw_children, list):
        raise TreeFormatError(f"Children of {name!r} must be a list, got {type(raw_children).__name__}")
    children: List[FileSystemNode] = [parse_tree(child) for child in raw_children]
    return FolderNode(name, children=children)


def dump_json(node: FileSystemNode, indent: int = 2) -> str:
    """Serialize a tree to JSON text.

    Non-ASCII names are written as is, so the text must be stored with a
    Unicode-capable encoding.
    """
    return json.dumps(serialize_tree(node), indent=indent, ensure_ascii=False)


def load_json(text: str) -> FileSystemNode:
    """Parse JSON text produced by dump_json back into a tree.

    Raises:
        TreeFormatError: If the text is not valid JSON or not a valid serialized tree.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON: {e}") from e
    return parse_tree(data)
