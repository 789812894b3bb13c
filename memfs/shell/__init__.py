"""
memfs Shell Module

Provides the interactive command-line shell:
- Command parsing
- Built-in commands with argument-count validation
- REPL and script execution
"""

from .parser import CommandParser, ParsedCommand
from .builtins import BuiltinCommands, HELP_TEXT, parse_bool
from .shell import Shell, create_shell

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'BuiltinCommands',
    'HELP_TEXT',
    'parse_bool',
    'Shell',
    'create_shell',
]
