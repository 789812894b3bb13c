#!/usr/bin/env python3
"""
memfs File System Tests

Tests for navigation, creation, listing, removal, file I/O,
moves and search on VirtualFileSystem.

Run with: python -m pytest memfs/tests -v

Author: YSNRFD
Version: 1.0.0
"""

import sys
import unittest

from memfs.core.config_loader import FilesystemConfig
from memfs.exceptions import (
    DirectoryNotFoundError,
    FileNotFoundError,
    InvalidNameError,
    EmptyNameError,
    NonEmptyDirectoryError,
    RecursiveRemoveOfFileError,
    CannotMoveDirectoryError,
    FileExistsError,
    FileTooLargeError,
    InvalidContentError,
)
from memfs.filesystem import VirtualFileSystem


class FilesystemTestCase(unittest.TestCase):
    """Gives every test a fresh file system with default limits."""

    def setUp(self):
        self.fs = VirtualFileSystem(FilesystemConfig())


class TestNavigation(FilesystemTestCase):
    """Test pwd and cd."""

    def test_new_filesystem(self):
        """A new file system starts at an empty root."""
        root = self.fs.root

        self.assertEqual(root.name, "/")
        self.assertTrue(root.is_directory)
        self.assertIsNone(root.parent)
        self.assertIs(self.fs.current_directory, root)

    def test_pwd(self):
        """pwd follows mkdir/cd sequences."""
        self.assertEqual(self.fs.pwd(), "/")

        self.fs.mkdir("/home")
        self.fs.cd("/home")
        self.assertEqual(self.fs.pwd(), "/home")

        self.fs.mkdir("/test")
        self.fs.cd("/test")
        self.assertEqual(self.fs.pwd(), "/home/test")

    def test_cd(self):
        """cd handles relative, ~-anchored and .. paths."""
        with self.assertRaises(DirectoryNotFoundError) as ctx:
            self.fs.cd("/dir1")
        self.assertEqual(ctx.exception.name, "dir1")

        self.fs.mkdir("/dir1")
        self.fs.mkdir("/dir1/dir2")
        self.fs.mkdir("/dir1/dir2/dir3")

        self.assertEqual(self.fs.cd("/dir1"), "dir1")
        self.assertEqual(self.fs.cd("~/dir1/dir2"), "dir2")
        self.assertEqual(self.fs.cd("../"), "dir1")
        self.assertEqual(self.fs.pwd(), "/dir1")

        with self.assertRaises(DirectoryNotFoundError):
            self.fs.cd("/test1")

    def test_cd_parent_at_root(self):
        """.. at the root stays at the root."""
        before = self.fs.pwd()

        self.assertEqual(self.fs.cd(".."), "/")
        self.fs.cd("../..")

        self.assertEqual(self.fs.pwd(), before)

    def test_failed_cd_keeps_cursor(self):
        """A failed cd does not move the cursor part of the way."""
        self.fs.mkdir("a")
        self.fs.mkdir("a/b")
        self.fs.cd("a")

        with self.assertRaises(DirectoryNotFoundError) as ctx:
            self.fs.cd("b/missing")

        self.assertEqual(ctx.exception.name, "missing")
        self.assertEqual(self.fs.pwd(), "/a")

    def test_cd_into_file(self):
        """Files cannot be traversed."""
        self.fs.mkfile("notes")

        with self.assertRaises(DirectoryNotFoundError):
            self.fs.cd("notes")


class TestCreation(FilesystemTestCase):
    """Test mkdir and mkfile."""

    def test_mkdir(self):
        """mkdir returns the new directory name."""
        self.assertEqual(self.fs.mkdir("/home"), "home")
        self.assertEqual(self.fs.mkdir("/home/bwent"), "bwent")
        self.assertEqual(self.fs.ls("home"), "bwent")

    def test_mkdir_missing_parent(self):
        """Intermediate components must exist; nothing is created."""
        with self.assertRaises(DirectoryNotFoundError) as ctx:
            self.fs.mkdir("/invalid/path")

        self.assertEqual(ctx.exception.name, "invalid")
        self.assertEqual(self.fs.ls(), "")

    def test_mkdir_empty(self):
        """An empty path is rejected."""
        with self.assertRaises(EmptyNameError) as ctx:
            self.fs.mkdir(" ")

        self.assertIsInstance(ctx.exception, InvalidNameError)
        self.assertEqual(ctx.exception.message, "Must provide at least one directory name")

        with self.assertRaises(EmptyNameError):
            self.fs.mkdir("//")

    def test_mkdir_existing_directory_is_kept(self):
        """Re-creating a directory keeps its contents."""
        self.fs.mkdir("docs")
        self.fs.cd("docs")
        self.fs.mkfile("a.txt")
        self.fs.cd("..")

        self.assertEqual(self.fs.mkdir("docs"), "docs")
        self.assertEqual(self.fs.ls("docs"), "a.txt")

    def test_mkdir_over_file(self):
        """A directory cannot take a file's name."""
        self.fs.mkfile("x")

        with self.assertRaises(FileExistsError):
            self.fs.mkdir("x")

    def test_mkdir_root_and_parent_paths(self):
        """mkdir resolves ~ and .. in the parent part."""
        self.fs.mkdir("a")
        self.fs.cd("a")

        self.fs.mkdir("~/b")
        self.fs.mkdir("../c")

        self.assertEqual(self.fs.ls("~"), "a b c")
        self.assertEqual(self.fs.ls(), "")

    def test_mkdir_reserved_name(self):
        """.. and ~ cannot be directory names."""
        self.fs.mkdir("a")

        with self.assertRaises(InvalidNameError):
            self.fs.mkdir("a/..")
        with self.assertRaises(InvalidNameError):
            self.fs.mkdir("~")

    def test_mkfile(self):
        """A second file with the same name gets the collision name."""
        self.assertEqual(self.fs.mkfile("test.txt"), "test.txt")
        self.assertEqual(self.fs.mkfile("test.txt"), "test1.txt")

    def test_mkfile_without_extension(self):
        """Names without a single dot get 1 appended."""
        self.fs.mkfile("notes")

        self.assertEqual(self.fs.mkfile("notes"), "notes1")

    def test_mkfile_collision_not_retried(self):
        """The collision rule is applied once only."""
        self.fs.mkfile("a.txt")
        self.fs.mkfile("a.txt")
        self.fs.write_file("a1.txt", "old")

        self.assertEqual(self.fs.mkfile("a.txt"), "a1.txt")
        self.assertEqual(self.fs.ls(), "a.txt a1.txt")
        self.assertEqual(self.fs.read_file("a1.txt"), "")

    def test_mkfile_rejects_slash(self):
        """File names cannot contain /."""
        with self.assertRaises(InvalidNameError) as ctx:
            self.fs.mkfile("a/b")

        self.assertEqual(ctx.exception.message, "/ character not supported in filenames")

    def test_mkfile_over_directory(self):
        """A file cannot take a directory's name."""
        self.fs.mkdir("docs")

        with self.assertRaises(FileExistsError):
            self.fs.mkfile("docs")
        self.assertTrue(self.fs.root.children["docs"].is_directory)


class TestListing(FilesystemTestCase):
    """Test ls."""

    def test_ls(self):
        """ls lists the current directory or a path."""
        self.assertEqual(self.fs.ls(), "")

        self.fs.mkdir("/home")
        self.fs.mkdir("/home/test")
        self.fs.mkdir("/home/test/foo")

        self.assertEqual(self.fs.ls("/home/test"), "foo")
        self.assertEqual(self.fs.ls("~/home"), "test")

        self.fs.cd("/home/test")
        self.assertEqual(self.fs.ls("../"), "test")

    def test_ls_insertion_order(self):
        """Children are listed in creation order."""
        self.fs.mkdir("b")
        self.fs.mkfile("a")

        self.assertEqual(self.fs.ls(), "b a")

    def test_ls_missing(self):
        """Listing a missing directory fails."""
        with self.assertRaises(DirectoryNotFoundError):
            self.fs.ls("nope")


class TestRemoval(FilesystemTestCase):
    """Test rm."""

    def test_rm(self):
        """Non-empty directories need recursive removal."""
        self.fs.mkdir("dir1")
        self.fs.mkdir("dir1/dir2")

        with self.assertRaises(NonEmptyDirectoryError):
            self.fs.rm("/dir1", False)

        with self.assertRaises(DirectoryNotFoundError) as ctx:
            self.fs.rm("/test", False)
        self.assertEqual(ctx.exception.message, "Directory not found: test")

        self.assertEqual(self.fs.rm("/dir1", True), "dir1")
        self.assertEqual(self.fs.ls(), "")

    def test_rm_file(self):
        """Files are removed without recursion."""
        self.fs.mkfile("a")

        self.assertEqual(self.fs.rm("a"), "a")
        self.assertEqual(self.fs.ls(), "")

    def test_rm_empty_directory(self):
        """Empty directories are removed without recursion."""
        self.fs.mkdir("empty")

        self.assertEqual(self.fs.rm("empty"), "empty")
        self.assertEqual(self.fs.ls(), "")

    def test_rm_file_recursively(self):
        """Recursive removal of a file is rejected."""
        self.fs.mkfile("a")

        with self.assertRaises(RecursiveRemoveOfFileError):
            self.fs.rm("a", True)
        self.assertEqual(self.fs.ls(), "a")

    def test_rm_recursive_detaches_subtree(self):
        """Every node of the removed subtree is detached."""
        self.fs.mkdir("a")
        self.fs.mkdir("a/b")
        self.fs.mkdir("a/b/c")
        b = self.fs.root.children["a"].children["b"]

        self.fs.rm("a", True)

        self.assertIsNone(b.parent)
        self.assertEqual(b.children, {})
        self.assertEqual(self.fs.find("c", True), [])

    def test_rm_deep_tree(self):
        """Deep trees are counted and removed without hitting the recursion limit."""
        depth = sys.getrecursionlimit() + 200
        self.fs.mkdir("top")
        self.fs.cd("top")
        for _ in range(depth):
            self.fs.mkdir("d")
            self.fs.cd("d")
        deepest = self.fs.current_directory
        self.fs.cd("~")

        stats = self.fs.get_stats()
        self.assertEqual(stats['total_nodes'], depth + 2)
        self.assertEqual(stats['directories'], depth + 2)

        self.assertEqual(self.fs.rm("top", True), "top")
        self.assertEqual(self.fs.ls(), "")
        self.assertIsNone(deepest.parent)
        self.assertEqual(self.fs.get_stats()['total_nodes'], 1)

    def test_rm_only_direct_children(self):
        """rm does not walk paths."""
        self.fs.mkdir("a")
        self.fs.mkdir("a/b")

        with self.assertRaises(DirectoryNotFoundError):
            self.fs.rm("a/b")


class TestReadWrite(FilesystemTestCase):
    """Test write_file and read_file."""

    def test_write_missing_file(self):
        """Writing requires an existing file."""
        with self.assertRaises(FileNotFoundError) as ctx:
            self.fs.write_file("test.txt", "hello world!")

        self.assertEqual(ctx.exception.message, "File test.txt does not exist")

    def test_write_and_read(self):
        """Writes append to the existing contents."""
        self.fs.mkfile("test.txt")

        self.assertEqual(self.fs.write_file("test.txt", "hello world!"), "test.txt")
        self.assertEqual(self.fs.read_file("test.txt"), "hello world!")

        self.fs.write_file("test.txt", " I am a computer.")
        self.assertEqual(self.fs.read_file("test.txt"), "hello world! I am a computer.")

    def test_write_appends_in_order(self):
        """Contents equal the writes concatenated in call order."""
        self.fs.mkfile("greeting")

        self.fs.write_file("greeting", "hello ")
        self.fs.write_file("greeting", "world")

        self.assertEqual(self.fs.read_file("greeting"), "hello world")

    def test_write_joins_arguments(self):
        """Multiple arguments are joined with spaces."""
        self.fs.mkfile("a")

        self.fs.write_file("a", "hello", "there", "world")

        self.assertEqual(self.fs.read_file("a"), "hello there world")

    def test_write_directory(self):
        """Directories cannot be written."""
        self.fs.mkdir("d")

        with self.assertRaises(FileNotFoundError):
            self.fs.write_file("d", "x")

    def test_write_too_large(self):
        """An oversized write appends nothing."""
        fs = VirtualFileSystem(FilesystemConfig(max_file_size=10))
        fs.mkfile("small")
        fs.write_file("small", "x" * 8)

        with self.assertRaises(FileTooLargeError) as ctx:
            fs.write_file("small", "abc")

        self.assertEqual(ctx.exception.size, 11)
        self.assertEqual(ctx.exception.limit, 10)
        self.assertEqual(fs.read_file("small"), "x" * 8)

        fs.write_file("small", "ab")
        self.assertEqual(fs.root.children["small"].size, 10)

    def test_default_max_file_size(self):
        """The default limit is 2,000,000 bytes."""
        self.fs.mkfile("big")
        self.fs.write_file("big", "x" * 2000000)

        with self.assertRaises(FileTooLargeError):
            self.fs.write_file("big", "y")

    def test_read_missing(self):
        """Reading a missing file fails."""
        with self.assertRaises(FileNotFoundError):
            self.fs.read_file("nope")

    def test_read_truncates(self):
        """Long reads are truncated; stored content is not."""
        self.fs.mkfile("large-text-test.txt")
        self.fs.write_file("large-text-test.txt", "x" * 2001)

        expected = "x" * 2000 + " ...[truncated contents after 2000 chars]"
        self.assertEqual(self.fs.read_file("large-text-test.txt"), expected)

        node = self.fs.root.children["large-text-test.txt"]
        self.assertEqual(node.size, 2001)

        self.fs.write_file("large-text-test.txt", "y")
        self.assertEqual(node.size, 2002)
        self.assertTrue(node.contents.endswith(b"xy"))

    def test_read_at_cap(self):
        """Contents exactly at the cap are returned whole."""
        fs = VirtualFileSystem(FilesystemConfig(max_read_size=5))
        fs.mkfile("a")
        fs.write_file("a", "abcde")

        self.assertEqual(fs.read_file("a"), "abcde")

        fs.write_file("a", "f")
        self.assertEqual(fs.read_file("a"), "abcde ...[truncated contents after 5 chars]")

    def test_read_utf8(self):
        """Text round-trips through UTF-8."""
        self.fs.mkfile("a")
        self.fs.write_file("a", "héllo wörld")

        self.assertEqual(self.fs.read_file("a"), "héllo wörld")

    def test_write_surrogate_escapes(self):
        """Surrogate-escaped input is stored as the original bytes."""
        self.fs.mkfile("a")

        self.fs.write_file("a", "x\udcff")

        node = self.fs.root.children["a"]
        self.assertEqual(node.contents, b"x\xff")
        self.assertEqual(self.fs.read_file("a"), "x\ufffd")

    def test_write_unencodable_text(self):
        """Lone surrogates outside the escape range are rejected."""
        self.fs.mkfile("a")
        self.fs.write_file("a", "ok")

        with self.assertRaises(InvalidContentError) as ctx:
            self.fs.write_file("a", "\ud800")

        self.assertEqual(ctx.exception.error_code, 4013)
        self.assertEqual(self.fs.read_file("a"), "ok")


class TestMove(FilesystemTestCase):
    """Test mv_file."""

    def test_move_file(self):
        """Files move into directories resolved by path."""
        self.fs.mkdir("dir1")

        with self.assertRaises(FileNotFoundError):
            self.fs.mv_file("file1", "dir1")

        self.fs.mkfile("file1")
        with self.assertRaises(DirectoryNotFoundError) as ctx:
            self.fs.mv_file("file1", "dir2")
        self.assertEqual(ctx.exception.message, "Directory not found: dir2")

        self.fs.mkdir("dir2")
        with self.assertRaises(CannotMoveDirectoryError):
            self.fs.mv_file("dir1", "dir2")

        self.fs.mkfile("file2")
        with self.assertRaises(DirectoryNotFoundError):
            self.fs.mv_file("file2", "file1")

        self.assertEqual(self.fs.mv_file("file1", "dir1"), "dir1")
        self.assertEqual(self.fs.mv_file("file2", "dir1/"), "dir1")

        self.fs.mkdir("dir1/test1")
        self.fs.mkfile("file3")
        self.assertEqual(self.fs.mv_file("file3", "~/dir1/test1"), "~/dir1/test1")

        self.assertEqual(self.fs.ls(), "dir1 dir2")
        self.assertEqual(self.fs.ls("dir1"), "file1 file2 test1")
        self.assertEqual(self.fs.ls("dir1/test1"), "file3")

    def test_move_reparents(self):
        """A moved file reports its new location."""
        self.fs.mkdir("dest")
        self.fs.mkfile("a")
        node = self.fs.root.children["a"]

        self.fs.mv_file("a", "dest")

        self.assertIs(node.parent, self.fs.root.children["dest"])
        self.assertEqual(self.fs.find("a", True), ["/dest/a"])

    def test_move_collision(self):
        """A same-named file at the destination triggers the collision rule."""
        self.fs.mkdir("dest")
        self.fs.cd("dest")
        self.fs.mkfile("a.txt")
        self.fs.write_file("a.txt", "old")
        self.fs.cd("..")
        self.fs.mkfile("a.txt")
        self.fs.write_file("a.txt", "new")

        self.assertEqual(self.fs.mv_file("a.txt", "dest"), "dest")

        self.assertEqual(self.fs.ls(), "dest")
        self.assertEqual(self.fs.ls("dest"), "a.txt a1.txt")
        self.fs.cd("dest")
        self.assertEqual(self.fs.read_file("a1.txt"), "new")
        self.assertEqual(self.fs.read_file("a.txt"), "old")

    def test_failed_move_leaves_tree(self):
        """Validation happens before the file is detached."""
        self.fs.mkfile("a")

        with self.assertRaises(DirectoryNotFoundError):
            self.fs.mv_file("a", "missing")

        self.assertEqual(self.fs.ls(), "a")

    def test_move_onto_directory_name(self):
        """A file cannot replace a directory at the destination."""
        self.fs.mkdir("dest")
        self.fs.mkdir("dest/a")
        self.fs.mkfile("a")

        with self.assertRaises(FileExistsError):
            self.fs.mv_file("a", "dest")

        self.assertEqual(self.fs.ls(), "dest a")

    def test_move_into_same_directory(self):
        """Moving a file to its own directory keeps its name."""
        self.fs.mkfile("a")

        self.assertEqual(self.fs.mv_file("a", "~"), "~")
        self.assertEqual(self.fs.ls(), "a")


class TestSearch(FilesystemTestCase):
    """Test find."""

    def test_find(self):
        """Non-recursive finds names; recursive finds full paths."""
        self.fs.mkdir("dir1")
        self.fs.mkdir("dir2")
        self.fs.mkfile("file1.txt")
        self.fs.mkfile("file2.txt")

        self.assertEqual(self.fs.find("file1.txt", False), ["file1.txt"])

        self.fs.mv_file("file1.txt", "dir1")
        self.assertEqual(self.fs.find("file1.txt", True), ["/dir1/file1.txt"])
        self.assertEqual(self.fs.find("file1.txt", False), [])

        self.assertEqual(self.fs.find("file3.txt", True), [])

    def test_find_same_name_in_different_places(self):
        """Same-named nodes in different directories are all found."""
        self.fs.mkdir("a")
        self.fs.mkdir("b")
        self.fs.mkdir("a/notes")
        self.fs.mkdir("b/notes")

        self.assertEqual(self.fs.find("notes", True), ["/a/notes", "/b/notes"])

    def test_find_searches_from_root(self):
        """Recursive search ignores the current directory."""
        self.fs.mkdir("a")
        self.fs.mkdir("b")
        self.fs.mkdir("b/target")
        self.fs.cd("a")

        self.assertEqual(self.fs.find("target", True), ["/b/target"])

    def test_find_level_order(self):
        """Shallower matches come first."""
        self.fs.mkdir("a")
        self.fs.mkdir("a/target")
        self.fs.mkdir("target")

        self.assertEqual(self.fs.find("target", True), ["/target", "/a/target"])


class TestStats(FilesystemTestCase):
    """Test get_stats."""

    def test_stats(self):
        """Statistics count reachable nodes, bytes and links."""
        self.fs.mkdir("d")
        self.fs.mkfile("f")
        self.fs.write_file("f", "abc")
        self.fs.create_symlink("d", "dl")

        stats = self.fs.get_stats()

        self.assertEqual(stats['total_nodes'], 3)
        self.assertEqual(stats['directories'], 2)
        self.assertEqual(stats['files'], 1)
        self.assertEqual(stats['total_bytes'], 3)
        self.assertEqual(stats['links'], 1)
        self.assertEqual(stats['dangling_links'], 0)
        self.assertEqual(stats['max_file_size'], 2000000)


def run_tests():
    """Run all tests."""
    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(sys.modules[__name__])

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
