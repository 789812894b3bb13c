"""
Node Module

Implements the tree vertex of the in-memory file system.
A node is either a directory (owning named children) or a
regular file (owning a byte buffer).

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Optional, Any, List, TYPE_CHECKING

from memfs.exceptions import NotADirectoryError, NotAFileError

if TYPE_CHECKING:
    from .link import HardLink, SymbolicLink


@dataclass(eq=False)
class Node:
    """
    A directory or file in the tree.

    Children are owned by their parent's ``children`` map and keyed
    by name. The parent is held through a weak reference, so a node
    never keeps its ancestors alive.

    The ``symlinks`` and ``hardlinks`` maps record links whose target
    is this node; they exist so removal can update those links.
    """

    name: str
    is_directory: bool
    _contents: bytearray = field(default_factory=bytearray, repr=False)
    _children: dict[str, 'Node'] = field(default_factory=dict, repr=False)
    symlinks: dict[str, 'SymbolicLink'] = field(default_factory=dict, repr=False)
    hardlinks: dict[str, 'HardLink'] = field(default_factory=dict, repr=False)
    _parent_ref: Optional[weakref.ref] = field(default=None, repr=False)

    @classmethod
    def directory(cls, name: str, parent: Optional['Node'] = None) -> 'Node':
        node = cls(name=name, is_directory=True)
        node.parent = parent
        return node

    @classmethod
    def file(cls, name: str, parent: Optional['Node'] = None) -> 'Node':
        node = cls(name=name, is_directory=False)
        node.parent = parent
        return node

    @property
    def parent(self) -> Optional['Node']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional['Node']) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def children(self) -> dict[str, 'Node']:
        """Live view of the child map; empty for files."""
        return self._children

    @property
    def contents(self) -> bytes:
        return bytes(self._contents)

    @property
    def size(self) -> int:
        return len(self._contents)

    # Directory operations

    def get_child(self, name: str) -> Optional['Node']:
        return self._children.get(name)

    def has_child(self, name: str, is_directory: bool) -> bool:
        """Check for a child of the given kind."""
        child = self._children.get(name)
        return child is not None and child.is_directory == is_directory

    def upsert_child(self, child: 'Node') -> Optional['Node']:
        """
        Insert ``child`` under its own name and adopt it.

        Returns:
            The node previously stored under that name, if any
        """
        if not self.is_directory:
            raise NotADirectoryError(self.name)

        previous = self._children.get(child.name)
        self._children[child.name] = child
        child.parent = self
        return previous

    def remove_child(self, name: str) -> Optional['Node']:
        """Detach and return the named child."""
        if not self.is_directory:
            raise NotADirectoryError(self.name)

        child = self._children.pop(name, None)
        if child is not None:
            child.parent = None
        return child

    def child_names(self) -> List[str]:
        return list(self._children)

    # File operations

    def append(self, data: bytes) -> int:
        """
        Append data to the file.

        Returns:
            Number of bytes appended
        """
        if self.is_directory:
            raise NotAFileError(self.name, actual_type="directory")

        self._contents.extend(data)
        return len(data)

    def read(self) -> bytes:
        """Return the full file contents."""
        if self.is_directory:
            raise NotAFileError(self.name, actual_type="directory")
        return bytes(self._contents)

    def iter_subtree(self) -> List['Node']:
        """This node followed by all descendants, depth-first (pre-order)."""
        nodes: List['Node'] = []
        stack = [self]

        while stack:
            node = stack.pop()
            nodes.append(node)
            # Reversed so the first child is visited first
            stack.extend(reversed(list(node._children.values())))

        return nodes

    def to_dict(self) -> dict[str, Any]:
        """Convert node to dictionary for display."""
        return {
            'name': self.name,
            'type': 'DIRECTORY' if self.is_directory else 'REGULAR',
            'size': self.size,
            'children': len(self._children),
            'symlinks': sorted(self.symlinks),
            'hardlinks': sorted(self.hardlinks),
        }
