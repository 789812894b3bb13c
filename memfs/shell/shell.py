"""
memfs Shell Module

The interactive command-line shell for the in-memory file system.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from .parser import CommandParser
from .builtins import BuiltinCommands
from memfs.core.config_loader import ShellConfig, get_config
from memfs.filesystem.vfs import VirtualFileSystem
from memfs.logger import get_logger


class Shell:
    """
    memfs Interactive Shell.

    Reads one command per line, dispatches it to the file system and
    prints the result or the error message.

    Example:
        >>> shell = Shell(VirtualFileSystem())
        >>> shell.execute_line('mkdir home')
        home
        0
    """

    def __init__(
        self,
        filesystem: Optional[VirtualFileSystem] = None,
        config: Optional[ShellConfig] = None
    ):
        self._config = config if config is not None else get_config().shell
        self._filesystem = filesystem if filesystem is not None else VirtualFileSystem()
        self._logger = get_logger('shell')
        self._parser = CommandParser(history_size=self._config.history_size)
        self._builtins = BuiltinCommands(self)
        self._running = False
        self._exiting = False

    @property
    def filesystem(self) -> VirtualFileSystem:
        return self._filesystem

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def exiting(self) -> bool:
        return self._exiting

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        self._running = True

        while self._running and not self._exiting:
            try:
                line = input(self._config.prompt)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print("^C")
                continue

            self.execute_line(line)

        self._running = False

    def execute_line(self, line: str) -> int:
        """
        Execute a command line.

        Args:
            line: Command line string

        Returns:
            Exit code
        """
        cmd = self._parser.parse(line)

        if cmd is None:
            return 0

        self._logger.debug(
            "Executing command",
            context={'command': cmd.command, 'args': len(cmd.args)}
        )

        return self._builtins.execute(cmd.command, cmd.args)

    def request_exit(self) -> None:
        """Request the shell to exit."""
        self._exiting = True

    def run_script(self, script: str) -> int:
        """
        Run a script (multiple commands).

        Stops early if the script runs ``exit``.

        Args:
            script: Script content

        Returns:
            Last exit code
        """
        exit_code = 0

        for line in script.split('\n'):
            line = line.strip()
            if line and not line.startswith('#'):
                exit_code = self.execute_line(line)
            if self._exiting:
                break

        return exit_code


def create_shell(filesystem: Optional[VirtualFileSystem] = None) -> Shell:
    """Factory function to create a shell."""
    return Shell(filesystem)
