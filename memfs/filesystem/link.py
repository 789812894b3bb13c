"""
Link Module

Hard and symbolic links, and the flat registry they live in.

Links never appear in a directory's children. They are looked up
by name in a LinkRegistry owned by the file system, independent of
the directory they were declared in.

Author: YSNRFD
Version: 1.0.0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, List, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node


class LinkType(Enum):
    """Kinds of links."""
    HARD = 'hard'
    SYMBOLIC = 'symbolic'


class Link(ABC):
    """
    An alias for a node.

    Both variants dereference the same way. They differ in what
    happens when the aliased node is removed from the tree.
    """

    link_type: LinkType

    def __init__(self, name: str, target: 'Node'):
        self._name = name
        self._target: Optional['Node'] = target

    @property
    def name(self) -> str:
        return self._name

    @property
    def target(self) -> Optional['Node']:
        """The aliased node, or None once the link dangles."""
        return self._target

    @property
    def is_symlink(self) -> bool:
        return self.link_type is LinkType.SYMBOLIC

    @property
    def is_dangling(self) -> bool:
        return self._target is None

    def remove_target(self) -> None:
        self._target = None

    @abstractmethod
    def on_target_removed(self) -> None:
        """Called when the target node is detached from the tree."""

    @abstractmethod
    def attach(self) -> None:
        """Record this link on its target's link map."""

    @abstractmethod
    def detach(self) -> None:
        """Drop this link from its target's link map."""

    def __repr__(self) -> str:
        target = self._target.name if self._target is not None else None
        return f"{self.__class__.__name__}(name={self._name!r}, target={target!r})"


class HardLink(Link):
    """
    Alias that keeps its target after the target's name is removed.

    Only regular files can be hard linked.
    """

    link_type = LinkType.HARD

    def on_target_removed(self) -> None:
        # The bytes stay reachable through the link.
        pass

    def attach(self) -> None:
        self._target.hardlinks[self._name] = self

    def detach(self) -> None:
        if self._target is not None:
            self._target.hardlinks.pop(self._name, None)


class SymbolicLink(Link):
    """Alias whose target is cleared when the target is removed."""

    link_type = LinkType.SYMBOLIC

    def on_target_removed(self) -> None:
        self.remove_target()

    def attach(self) -> None:
        self._target.symlinks[self._name] = self

    def detach(self) -> None:
        if self._target is not None:
            self._target.symlinks.pop(self._name, None)


class LinkRegistry:
    """
    Flat mapping from link name to Link.

    Example:
        >>> registry = LinkRegistry()
        >>> registry.register(SymbolicLink('docs', node))
        >>> registry.resolve('docs') is node
        True
    """

    def __init__(self):
        self._links: dict[str, Link] = {}

    def register(self, link: Link) -> Optional[Link]:
        """
        Register a link under its name.

        Returns:
            The link previously registered under that name, if any
        """
        previous = self._links.get(link.name)
        self._links[link.name] = link
        return previous

    def unregister(self, name: str) -> Optional[Link]:
        return self._links.pop(name, None)

    def get(self, name: str) -> Optional[Link]:
        return self._links.get(name)

    def resolve(self, name: str) -> Optional['Node']:
        """Return the live target for ``name``, or None."""
        link = self._links.get(name)
        if link is None:
            return None
        return link.target

    def names(self) -> List[str]:
        return list(self._links)

    def dangling(self) -> List[Link]:
        return [link for link in self._links.values() if link.is_dangling]

    def __contains__(self, name: object) -> bool:
        return name in self._links

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        return iter(list(self._links.values()))
