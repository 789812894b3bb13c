"""
Path Resolver Module

Turns textual paths into nodes of the in-memory tree.

Paths are split on ``/``. A leading ``~`` segment starts from the
root; anything else is relative to the current directory, including
paths that begin with ``/``. ``..`` moves to the parent and is a
no-op at the root.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List

from memfs.exceptions import DirectoryNotFoundError
from .node import Node


HOME = '~'
PARENT = '..'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    from_root: bool
    components: List[str]

    def __str__(self) -> str:
        joined = '/'.join(self.components)
        if self.from_root:
            return f"{HOME}/{joined}" if joined else HOME
        return joined


class PathResolver:
    """
    Resolves paths against a current directory and a root.

    Handles:
    - Root-anchored (``~/...``) and relative paths
    - ``..`` components
    - The file name collision rule
    """

    @staticmethod
    def split(path: str) -> List[str]:
        """
        Split a path into segments.

        Empty and whitespace-only segments are dropped; kept segments
        are returned as written.
        """
        return [p for p in path.split('/') if p.strip()]

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with the ``~`` anchor consumed
        """
        components = PathResolver.split(path)

        if components and components[0] == HOME:
            return ParsedPath(from_root=True, components=components[1:])

        return ParsedPath(from_root=False, components=components)

    @staticmethod
    def walk(path, current: Node, root: Node) -> Node:
        """
        Walk a path to the node it names.

        Every component other than ``..`` must name an existing
        directory child of the node reached so far. Nothing is
        mutated.

        Args:
            path: Path string or ParsedPath
            current: Current working directory
            root: Root of the tree

        Returns:
            The node reached after consuming every component

        Raises:
            DirectoryNotFoundError: On the first component that is
                missing or not a directory
        """
        parsed = path if isinstance(path, ParsedPath) else PathResolver.parse(path)

        node = root if parsed.from_root else current

        for name in parsed.components:
            if name == PARENT:
                if node.parent is not None:
                    node = node.parent
            elif node.has_child(name, is_directory=True):
                node = node.get_child(name)
            else:
                raise DirectoryNotFoundError(name)

        return node

    @staticmethod
    def full_path(node: Node) -> str:
        """
        Absolute path of a node, e.g. ``/home/test/a.txt``.

        The root is ``/``.
        """
        names: List[str] = []
        current = node

        while current is not None and current.parent is not None:
            names.append(current.name)
            current = current.parent

        if not names:
            return '/'
        return '/' + '/'.join(reversed(names))

    @staticmethod
    def collision_name(name: str) -> str:
        """
        Rename a file that collides with an existing sibling.

        A name with exactly one dot gets ``1`` before the dot
        (``a.txt`` -> ``a1.txt``); any other name gets ``1`` appended
        (``a`` -> ``a1``, ``a.tar.gz`` -> ``a.tar.gz1``). The rule is
        applied once; callers do not retry on a second collision.
        """
        parts = name.split('.')
        if len(parts) == 2:
            return f"{parts[0]}1.{parts[1]}"
        return f"{name}1"
