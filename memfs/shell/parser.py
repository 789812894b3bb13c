"""
Command Parser Module

Parses shell input lines into a command name and arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)


class CommandParser:
    """
    Parses shell command lines.

    Handles:
    - Command and arguments separated by whitespace
    - Single and double quoted strings
    - Backslash escapes
    - ``#`` comment lines

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse('writefile notes.txt "hello world"')
        >>> cmd.args
        ['notes.txt', 'hello world']
    """

    def __init__(self, history_size: int = 1000):
        self._history: List[str] = []
        self._history_size = history_size

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            ParsedCommand or None if the line is empty or a comment
        """
        line = line.strip()

        if not line or line.startswith('#'):
            return None

        self._remember(line)

        words = self._tokenize(line)

        if not words:
            return None

        return ParsedCommand(command=words[0].lower(), args=words[1:])

    def _remember(self, line: str) -> None:
        if self._history_size <= 0:
            return
        self._history.append(line)
        if len(self._history) > self._history_size:
            del self._history[:-self._history_size]

    def _tokenize(self, line: str) -> List[str]:
        """Split a line into words."""
        words = []
        current = ""
        in_word = False
        in_quote = None
        i = 0

        while i < len(line):
            char = line[i]

            # Handle quotes
            if char in ('"', "'") and in_quote is None:
                in_quote = char
                in_word = True
                i += 1
                continue

            if char == in_quote:
                in_quote = None
                i += 1
                continue

            # Handle escape
            if char == '\\' and i + 1 < len(line):
                current += line[i + 1]
                in_word = True
                i += 2
                continue

            # Inside quotes, just add character
            if in_quote:
                current += char
                i += 1
                continue

            # Handle whitespace
            if char.isspace():
                if in_word:
                    words.append(current)
                    current = ""
                    in_word = False
                i += 1
                continue

            # Regular character
            current += char
            in_word = True
            i += 1

        # Don't forget last word
        if in_word:
            words.append(current)

        return words

    def get_history(self) -> List[str]:
        """Get command history."""
        return self._history

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
