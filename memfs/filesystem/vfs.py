"""
Virtual File System (VFS) Module

Implements the in-memory file system:
- Hierarchical directory tree with a current-directory cursor
- Whole-buffer file reads and appends
- Name collision handling
- Recursive removal
- Tree-wide search
- Hard and symbolic links

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any, List, Iterable

from .node import Node
from .link import Link, HardLink, SymbolicLink, LinkRegistry
from .path_resolver import PathResolver, HOME, PARENT
from .search import breadth_first_search
from memfs.core.config_loader import FilesystemConfig, get_config
from memfs.exceptions import (
    DirectoryNotFoundError,
    FileNotFoundError,
    InvalidNameError,
    EmptyNameError,
    NonEmptyDirectoryError,
    RecursiveRemoveOfFileError,
    NotADirectoryError,
    NotAFileError,
    CannotMoveDirectoryError,
    FileExistsError,
    LinkAlreadyExistsError,
    FileTooLargeError,
    InvalidContentError,
)
from memfs.logger import get_logger


RESERVED_NAMES = (HOME, PARENT)


class VirtualFileSystem:
    """
    In-memory file system.

    Owns the root directory, the current-directory cursor and the
    link registry. Every operation validates its arguments before
    touching the tree, so a failed call leaves the tree unchanged.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> vfs.mkdir('home')
        'home'
        >>> vfs.cd('home')
        'home'
        >>> vfs.pwd()
        '/home'
    """

    def __init__(self, config: Optional[FilesystemConfig] = None):
        self._config = config if config is not None else get_config().filesystem
        self._root = Node.directory('/')
        self._cwd = self._root
        self._links = LinkRegistry()
        self._logger = get_logger('filesystem')

    @property
    def root(self) -> Node:
        return self._root

    @property
    def current_directory(self) -> Node:
        return self._cwd

    @property
    def links(self) -> LinkRegistry:
        return self._links

    @property
    def config(self) -> FilesystemConfig:
        return self._config

    def _walk(self, path) -> Node:
        return PathResolver.walk(path, self._cwd, self._root)

    def _release(self, nodes: Iterable[Node]) -> None:
        """Tell every link aimed at a removed node that it is gone."""
        for node in nodes:
            links: List[Link] = list(node.symlinks.values()) + list(node.hardlinks.values())
            for link in links:
                link.on_target_removed()
                if link.is_dangling:
                    self._logger.warning(
                        "Symbolic link left dangling",
                        context={'link': link.name, 'target': node.name}
                    )
            node.symlinks.clear()

    def _detach_subtree(self, node: Node) -> None:
        """Detach all descendants of ``node``, deepest first."""
        for parent in reversed(node.iter_subtree()):
            for name in list(parent.children):
                parent.remove_child(name)

    # Navigation

    def pwd(self) -> str:
        """
        Return the current working directory, e.g. ``/home/test``.

        Returns:
            ``/`` at the root, otherwise the slash-joined names from
            the root down to the current directory
        """
        return PathResolver.full_path(self._cwd)

    def cd(self, path: str) -> str:
        """
        Change the current working directory.

        A registered link name takes precedence over a path.

        Args:
            path: Link name, or a path; ``~`` starts at the root and
                ``..`` goes up one level

        Returns:
            Name of the new current directory

        Raises:
            DirectoryNotFoundError: If a component does not exist or
                the link no longer has a target
            NotADirectoryError: If the link points at a file
        """
        link = self._links.get(path)

        if link is not None:
            target = link.target
            if target is None:
                raise DirectoryNotFoundError(path)
            if not target.is_directory:
                raise NotADirectoryError(path)
            self._cwd = target
        else:
            self._cwd = self._walk(path)

        return self._cwd.name

    # Creation

    def mkdir(self, path: str) -> str:
        """
        Create a new directory.

        Every component but the last must already be a directory;
        the last one names the new directory. Asking for a directory
        that already exists returns it untouched.

        Args:
            path: A name (``home``) or a path (``home/test``,
                ``~/home/test``, ``../sibling``)

        Returns:
            The directory name

        Raises:
            EmptyNameError: If the path has no components
            InvalidNameError: If the last component is ``~`` or ``..``
            DirectoryNotFoundError: If a parent component is missing
            FileExistsError: If a file already uses the name
        """
        components = PathResolver.split(path)

        if not components:
            raise EmptyNameError(path)

        name = components[-1]
        if name in RESERVED_NAMES:
            raise InvalidNameError(name, reason=f"Cannot create a directory named {name}")

        parent = self._walk('/'.join(components[:-1]))

        existing = parent.get_child(name)
        if existing is not None:
            if not existing.is_directory:
                raise FileExistsError(name)
            self._logger.debug(
                "Directory already exists",
                context={'name': name, 'parent': PathResolver.full_path(parent)}
            )
            return existing.name

        parent.upsert_child(Node.directory(name))

        self._logger.debug(
            "Created directory",
            context={'name': name, 'parent': PathResolver.full_path(parent)}
        )

        return name

    def mkfile(self, name: str) -> str:
        """
        Create a new empty file in the current directory.

        If a file with the same name exists, the name is changed once
        by the collision rule (``a.txt`` -> ``a1.txt``).

        Args:
            name: File name; must not contain ``/``

        Returns:
            The name the file was created under

        Raises:
            InvalidNameError: If the name contains ``/`` or is reserved
            EmptyNameError: If the name is blank
            FileExistsError: If a directory already uses the name
        """
        if '/' in name:
            raise InvalidNameError(name, reason="/ character not supported in filenames")
        if not name.strip():
            raise EmptyNameError(name)
        if name in RESERVED_NAMES:
            raise InvalidNameError(name, reason=f"Cannot create a file named {name}")

        wd = self._cwd

        if wd.has_child(name, is_directory=False):
            name = PathResolver.collision_name(name)

        if wd.has_child(name, is_directory=True):
            raise FileExistsError(name)

        previous = wd.upsert_child(Node.file(name))

        if previous is not None:
            self._logger.warning(
                "Replaced existing file after name collision",
                context={'name': name}
            )
            previous.parent = None
            self._release([previous])

        self._logger.debug("Created file", context={'name': name, 'parent': self.pwd()})

        return name

    # Listing, removal, read/write

    def ls(self, path: Optional[str] = None) -> str:
        """
        List the contents of a directory.

        Args:
            path: Optional link name or path; defaults to the current
                directory

        Returns:
            Child names separated by a space
        """
        if path is None or not path.strip():
            node = self._cwd
        else:
            link = self._links.get(path)
            if link is not None:
                node = link.target
                if node is None:
                    raise DirectoryNotFoundError(path)
                if not node.is_directory:
                    raise NotADirectoryError(path)
            else:
                node = self._walk(path)

        return ' '.join(node.child_names())

    def rm(self, path: str, recursive: bool = False) -> str:
        """
        Remove a link, file or directory from the current directory.

        A link name removes only the alias. Otherwise the entry is
        detached; symbolic links into the removed nodes are left
        dangling while hard links keep their target.

        Args:
            path: Name of a direct child (surrounding ``/`` ignored)
                or of a link
            recursive: Remove a directory together with its contents

        Returns:
            The removed name

        Raises:
            DirectoryNotFoundError: If nothing has that name
            NonEmptyDirectoryError: If a populated directory is
                removed without ``recursive``
            RecursiveRemoveOfFileError: If ``recursive`` is used on a file
        """
        name = path.strip('/')

        link = self._links.get(name)
        if link is not None:
            link.detach()
            self._links.unregister(name)
            self._logger.debug(
                "Removed link",
                context={'link': name, 'type': link.link_type.value}
            )
            return name

        wd = self._cwd
        node = wd.get_child(name)

        if node is None:
            raise DirectoryNotFoundError(name)

        if not recursive and node.is_directory and node.children:
            raise NonEmptyDirectoryError(name)

        if recursive and not node.is_directory:
            raise RecursiveRemoveOfFileError(name)

        removed = node.iter_subtree()

        wd.remove_child(name)
        if recursive:
            self._detach_subtree(node)

        self._release(removed)

        self._logger.debug(
            "Removed entry",
            context={'name': name, 'recursive': recursive, 'nodes': len(removed)}
        )

        return node.name

    def write_file(self, name: str, *data: str) -> str:
        """
        Append text to a file in the current directory.

        The arguments are joined with single spaces. The write is
        all-or-nothing: if the file would exceed its maximum size,
        nothing is appended.

        Args:
            name: Name of an existing file in the current directory
            *data: Text to append

        Returns:
            The file name

        Raises:
            FileNotFoundError: If no such file exists
            FileTooLargeError: If the maximum file size would be exceeded
            InvalidContentError: If the text cannot be encoded
        """
        node = self._cwd.get_child(name)

        if node is None or node.is_directory:
            raise FileNotFoundError(name)

        try:
            payload = ' '.join(data).encode('utf-8', errors='surrogateescape')
        except UnicodeEncodeError as e:
            raise InvalidContentError(name, reason=e.reason) from e

        total = node.size + len(payload)

        if total > self._config.max_file_size:
            raise FileTooLargeError(name, size=total, limit=self._config.max_file_size)

        node.append(payload)

        self._logger.debug(
            "Wrote file",
            context={'name': name, 'bytes': len(payload), 'size': total}
        )

        return name

    def read_file(self, name: str) -> str:
        """
        Read a file by link name or by name in the current directory.

        Long contents are cut to ``max_read_size`` characters followed
        by the truncation marker; the stored bytes are not changed.

        Args:
            name: Link name or file name

        Returns:
            File contents as text

        Raises:
            FileNotFoundError: If neither a link nor a file has that name
        """
        link = self._links.get(name)

        if link is not None:
            node = link.target
        else:
            node = self._cwd.get_child(name)

        if node is None or node.is_directory:
            raise FileNotFoundError(name)

        text = node.read().decode('utf-8', errors='replace')

        limit = self._config.max_read_size
        if len(text) > limit:
            text = text[:limit] + self._config.truncation_marker.format(limit=limit)

        return text

    # Move

    def mv_file(self, name: str, target: str) -> str:
        """
        Move a file from the current directory into another directory.

        If the destination already holds a file with the same name,
        the moved file is renamed once by the collision rule.

        Args:
            name: Name of a file in the current directory
            target: Destination directory path

        Returns:
            The target path as given (surrounding ``/`` stripped)

        Raises:
            FileNotFoundError: If the file does not exist
            CannotMoveDirectoryError: If ``name`` is a directory
            DirectoryNotFoundError: If the target cannot be resolved
            FileExistsError: If a directory at the destination uses
                the final name
        """
        name = name.strip('/')
        target = target.strip('/')

        wd = self._cwd
        node = wd.get_child(name)

        if node is None:
            raise FileNotFoundError(name)

        if node.is_directory:
            raise CannotMoveDirectoryError(name)

        destination = self._walk(target)

        new_name = name
        existing = destination.get_child(name)
        if existing is not None and existing is not node and not existing.is_directory:
            new_name = PathResolver.collision_name(name)

        if destination.has_child(new_name, is_directory=True):
            raise FileExistsError(new_name)

        wd.remove_child(name)
        node.name = new_name
        previous = destination.upsert_child(node)

        if previous is not None and previous is not node:
            self._logger.warning(
                "Replaced existing file after name collision",
                context={'name': new_name}
            )
            previous.parent = None
            self._release([previous])

        self._logger.debug(
            "Moved file",
            context={'name': name, 'new_name': new_name,
                     'destination': PathResolver.full_path(destination)}
        )

        return target

    # Search

    def find(self, name: str, recursive: bool = False) -> List[str]:
        """
        Find files or directories by exact name.

        Args:
            name: Name to look for
            recursive: Search the whole tree from the root instead of
                only the current directory

        Returns:
            Child names (non-recursive) or full paths (recursive), in
            discovery order; empty if nothing matches
        """
        if recursive:
            return [
                PathResolver.full_path(node)
                for node in breadth_first_search(self._root, name)
            ]

        return [child for child in self._cwd.children if child == name]

    # Links

    def _create_link(self, target: str, link_name: str, link_cls: type) -> str:
        if '/' in link_name or not link_name.strip():
            raise InvalidNameError(link_name, reason="Invalid link name")

        node = self._cwd.get_child(target)

        if node is None:
            raise FileNotFoundError(target)

        if link_cls is HardLink and node.is_directory:
            raise NotAFileError(target, actual_type="directory")

        own_links = node.hardlinks if link_cls is HardLink else node.symlinks
        if link_name in own_links:
            raise LinkAlreadyExistsError(link_name, target=target)

        link = link_cls(link_name, node)
        link.attach()

        previous = self._links.register(link)
        if previous is not None:
            previous.detach()
            self._logger.warning(
                "Link name reassigned",
                context={'link': link_name, 'target': target}
            )

        self._logger.debug(
            "Created link",
            context={'link': link_name, 'target': target, 'type': link.link_type.value}
        )

        return link_name

    def create_symlink(self, target: str, link_name: str) -> str:
        """
        Create a symbolic link to a file or directory in the current
        directory.

        Raises:
            FileNotFoundError: If ``target`` is not in the current directory
            LinkAlreadyExistsError: If the target already has a symbolic
                link with this name
        """
        return self._create_link(target, link_name, SymbolicLink)

    def create_hardlink(self, target: str, link_name: str) -> str:
        """
        Create a hard link to a file in the current directory.

        Raises:
            FileNotFoundError: If ``target`` is not in the current directory
            NotAFileError: If ``target`` is a directory
            LinkAlreadyExistsError: If the target already has a hard
                link with this name
        """
        return self._create_link(target, link_name, HardLink)

    def resolve_link(self, name: str) -> Optional[Node]:
        """Return the live target of a link, or None."""
        return self._links.resolve(name)

    def get_stats(self) -> dict[str, Any]:
        """Get filesystem statistics."""
        nodes = self._root.iter_subtree()
        directories = sum(1 for node in nodes if node.is_directory)

        return {
            'total_nodes': len(nodes),
            'directories': directories,
            'files': len(nodes) - directories,
            'total_bytes': sum(node.size for node in nodes),
            'links': len(self._links),
            'dangling_links': len(self._links.dangling()),
            'max_file_size': self._config.max_file_size,
        }
