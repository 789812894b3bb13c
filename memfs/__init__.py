"""
memfs - An in-memory hierarchical file system

This package provides an embeddable file tree with directories,
files, hard and symbolic links, and an interactive shell on top.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .filesystem.vfs import VirtualFileSystem
from .shell.shell import Shell, create_shell

__all__ = [
    'VirtualFileSystem',
    'Shell',
    'create_shell',
]
