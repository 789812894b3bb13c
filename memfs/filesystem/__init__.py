"""
memfs Virtual File System Module

Provides the in-memory file tree:
- Directory/file nodes with parent back-references
- Path resolution (relative, ``~``-anchored, ``..``)
- Hard and symbolic links
- Breadth-first search
"""

from .node import Node
from .link import Link, LinkType, HardLink, SymbolicLink, LinkRegistry
from .path_resolver import PathResolver, ParsedPath
from .search import breadth_first_search
from .vfs import VirtualFileSystem

__all__ = [
    # Node
    'Node',
    # Links
    'Link',
    'LinkType',
    'HardLink',
    'SymbolicLink',
    'LinkRegistry',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    # Search
    'breadth_first_search',
    # VFS
    'VirtualFileSystem',
]
