"""Node representation for file system elements in the tree."""

from typing import Any, Iterable, Optional

from anytree import Node

from dir2tree.types import NodeType


class FileSystemNode(Node):  # type: ignore
    """Base node class for a file or folder in the filesystem tree.

    Extends anytree.Node with the node type. Concrete trees are made only of
    :class:`FileNode` and :class:`FolderNode`; the type is fixed by the class and
    checked when a folder is constructed, not when the tree is rendered.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        node_type (NodeType): FILE or FOLDER.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).
    """

    node_type: NodeType

    def __init__(self, name: str, parent: Optional["FileSystemNode"] = None, **kwargs: Any) -> None:
        if type(self) is FileSystemNode:
            raise TypeError("FileSystemNode is abstract; use FileNode or FolderNode")
        super().__init__(name, parent, **kwargs)

    @property
    def is_dir(self) -> bool:
        return self.node_type is NodeType.FOLDER


class FileNode(FileSystemNode):
    """Leaf node representing a file.

    Example:
        >>> node = FileNode("README.md")
        >>> node.node_type.value
        'File'
        >>> node.is_dir
        False
    """

    node_type = NodeType.FILE

    def __init__(self, name: str, parent: Optional[FileSystemNode] = None) -> None:
        super().__init__(name, parent)


class FolderNode(FileSystemNode):
    """Node representing a directory and its surviving children.

    Children are attached at construction in the given order, which is the order
    they appear in every rendering.

    Example:
        >>> folder = FolderNode("src", children=[FileNode("main.py"), FolderNode("utils")])
        >>> [child.name for child in folder.children]
        ['main.py', 'utils']
        >>> FolderNode("empty").children
        ()
    """

    node_type = NodeType.FOLDER

    def __init__(
        self,
        name: str,
        children: Iterable[FileSystemNode] = (),
        parent: Optional[FileSystemNode] = None,
    ) -> None:
        """Initialize a FolderNode.

        Args:
            name: The name of the directory.
            children: Child nodes, in display order.
            parent: The parent node. Defaults to None.

        Raises:
            TypeError: If any child is not a FileSystemNode.
        """
        children = list(children)
        for i, child in enumerate(children):
            if not isinstance(child, FileSystemNode):
                raise TypeError(f"Child at index {i} must be a FileSystemNode, got {type(child)}")
        super().__init__(name, parent, children=children)
