"""
Shell Built-in Commands

Maps shell commands onto file system operations, validates their
argument counts and prints results or errors.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Callable, List, Tuple

from memfs.exceptions import FileSystemException


# Argument count meaning "any number"
UNBOUNDED = -1

TRUE_VALUES = ('1', 't', 'T', 'TRUE', 'true', 'True')
FALSE_VALUES = ('0', 'f', 'F', 'FALSE', 'false', 'False')

HELP_TEXT = """Commands:
pwd                         Prints the current working directory.
mkdir <path>                Creates a new directory within the current working directory.
cd <path>                   Changes the current working directory to the specified path.
ls [path]                   Lists the contents (files and subdirectories) of the specified path.
rm <path> [recursive]       Removes a file or empty directory. Set recursive to true to remove directories recursively.
mkfile <name>               Creates a new empty file in the current directory.
writefile <name> <text...>  Appends text to the specified file in the current directory.
readfile <name>             Reads the contents of the specified file in the current directory.
mvfile <name> <target>      Moves the specified file to the given target directory.
find <name> <recursive>     Finds files or directories with the specified name. Set recursive to true to search the whole tree.
link <target> <name>        Creates a hard link to the specified target with the given name. Files only.
symlink <target> <name>     Creates a symbolic link to the specified target (file or directory) with the given name.
stats                       Displays file system statistics.
-------------------------
help                        Displays this help menu.
exit                        Exits the program."""


def parse_bool(value: str) -> bool:
    """
    Parse a boolean command argument.

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(
        "Invalid boolean parameter: must be among {true, false, T, F, 0, 1}"
    )


class BuiltinCommands:
    """
    Built-in shell commands.

    Every command has a fixed set of accepted argument counts;
    ``writefile`` accepts any number.
    """

    def __init__(self, shell):
        """
        Initialize built-in commands.

        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._commands: dict[str, Tuple[Callable[[List[str]], int], Tuple[int, ...]]] = {
            'pwd': (self.cmd_pwd, (0,)),
            'mkdir': (self.cmd_mkdir, (1,)),
            'cd': (self.cmd_cd, (1,)),
            'ls': (self.cmd_ls, (0, 1)),
            'rm': (self.cmd_rm, (1, 2)),
            'mkfile': (self.cmd_mkfile, (1,)),
            'writefile': (self.cmd_writefile, (UNBOUNDED,)),
            'readfile': (self.cmd_readfile, (1,)),
            'mvfile': (self.cmd_mvfile, (2,)),
            'find': (self.cmd_find, (2,)),
            'link': (self.cmd_link, (2,)),
            'symlink': (self.cmd_symlink, (2,)),
            'stats': (self.cmd_stats, (0,)),
            'help': (self.cmd_help, (0,)),
            'exit': (self.cmd_exit, (0,)),
        }

    @property
    def _fs(self):
        return self._shell.filesystem

    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands

    def validate(self, name: str, args: List[str]) -> bool:
        """
        Check the argument count for a command, printing the reason
        when it is rejected.
        """
        entry = self._commands.get(name)
        if entry is None:
            print(f"Invalid method {name} - run 'help' for guidance")
            return False

        arities = entry[1]
        if UNBOUNDED in arities or len(args) in arities:
            return True

        expected = ", ".join(str(n) for n in arities)
        print(
            f"Invalid input length (saw={len(args)}, expected={expected}). "
            f"Run 'help' for guidance"
        )
        return False

    def execute(self, name: str, args: List[str]) -> int:
        """
        Execute a built-in command.

        Args:
            name: Command name
            args: Command arguments

        Returns:
            Exit code
        """
        if not self.is_builtin(name):
            self.validate(name, args)
            return 127

        if not self.validate(name, args):
            return 2

        handler = self._commands[name][0]
        try:
            return handler(args)
        except FileSystemException as e:
            print(f"{name}: {e.message}")
            return 1

    # Command implementations

    def cmd_pwd(self, args: List[str]) -> int:
        """Print working directory."""
        print(self._fs.pwd())
        return 0

    def cmd_mkdir(self, args: List[str]) -> int:
        """Create directory."""
        print(self._fs.mkdir(args[0]))
        return 0

    def cmd_cd(self, args: List[str]) -> int:
        """Change directory."""
        print(self._fs.cd(args[0]))
        return 0

    def cmd_ls(self, args: List[str]) -> int:
        """List directory contents."""
        print(self._fs.ls(args[0] if args else None))
        return 0

    def cmd_rm(self, args: List[str]) -> int:
        """Remove a link, file or directory."""
        recursive = False
        if len(args) == 2:
            try:
                recursive = parse_bool(args[1])
            except ValueError as e:
                print(f"rm: {e}")
                return 2

        print(self._fs.rm(args[0], recursive))
        return 0

    def cmd_mkfile(self, args: List[str]) -> int:
        """Create empty file."""
        print(self._fs.mkfile(args[0]))
        return 0

    def cmd_writefile(self, args: List[str]) -> int:
        """Append text to a file."""
        if not args:
            print("writefile: missing file operand")
            return 2

        print(self._fs.write_file(args[0], *args[1:]))
        return 0

    def cmd_readfile(self, args: List[str]) -> int:
        """Display file contents."""
        print(self._fs.read_file(args[0]))
        return 0

    def cmd_mvfile(self, args: List[str]) -> int:
        """Move a file into a directory."""
        print(self._fs.mv_file(args[0], args[1]))
        return 0

    def cmd_find(self, args: List[str]) -> int:
        """Find files or directories by name."""
        try:
            recursive = parse_bool(args[1])
        except ValueError as e:
            print(f"find: {e}")
            return 2

        print(",".join(self._fs.find(args[0], recursive)))
        return 0

    def cmd_link(self, args: List[str]) -> int:
        """Create a hard link."""
        print(self._fs.create_hardlink(args[0], args[1]))
        return 0

    def cmd_symlink(self, args: List[str]) -> int:
        """Create a symbolic link."""
        print(self._fs.create_symlink(args[0], args[1]))
        return 0

    def cmd_stats(self, args: List[str]) -> int:
        """Display file system statistics."""
        for key, value in self._fs.get_stats().items():
            print(f"{key}: {value}")
        return 0

    def cmd_help(self, args: List[str]) -> int:
        """Display help information."""
        print(HELP_TEXT)
        return 0

    def cmd_exit(self, args: List[str]) -> int:
        """Exit the shell."""
        print("Exiting")
        self._shell.request_exit()
        return 0
