"""Box-drawing glyph rendering of a built tree."""

from typing import Iterator

from dir2tree.file_system_tree.file_system_node import FileSystemNode

TEE = "├── "
CORNER = "└── "
VERTICAL = "│   "
SPACE = "    "


def stream_glyph_lines(node: FileSystemNode) -> Iterator[str]:
    """Generate the glyph tree one line at a time.

    Lines are produced depth-first in pre-order, one per node. The root line uses
    the corner glyph with no prefix. Every other line is prefixed by one segment
    per ancestor (root included): four spaces if that ancestor is the last among
    its siblings, a vertical bar otherwise. The root counts as last. The node's
    own glyph is a corner if it is the last child of its folder and a tee otherwise.

    Args:
        node: Root of the tree to render. Not modified.

    Yields:
        Display lines without trailing newlines.

    Example:
        >>> from dir2tree.file_system_tree.file_system_node import FileNode, FolderNode
        >>> root = FolderNode("app", children=[FolderNode("Source", children=[FileNode("main.py")]), FileNode("README")])
        >>> for line in stream_glyph_lines(root):
        ...     print(line)
        └── app
            ├── Source
            │   └── main.py
            └── README
    """

    def write_node(node: FileSystemNode, prefix: str, is_last: bool) -> Iterator[str]:
        connector = CORNER if is_last else TEE
        yield f"{prefix}{connector}{node.name}"

        child_prefix = prefix + (SPACE if is_last else VERTICAL)
        children = node.children
        for i, child in enumerate(children):
            yield from write_node(child, child_prefix, i == len(children) - 1)

    yield from write_node(node, "", True)


def render_glyph_tree(node: FileSystemNode) -> str:
    """Get the complete glyph tree as a single newline-joined string."""
    return "\n".join(stream_glyph_lines(node))
