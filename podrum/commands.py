"""Registry of named console commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence


class CommandNotFoundError(KeyError):
    """Raised when no command has the requested name."""


@dataclass
class Command:
    """A command and the callable that runs it with its arguments."""

    name: str
    executor: Callable[[Sequence[str]], object]
    description: str = ""
    usage: str = ""
    prefix: str = ""


class CommandManager:
    """Commands kept in registration order."""

    def __init__(self) -> None:
        self._commands: list[Command] = []

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return any(command.name == name for command in self._commands)

    def register(self, command: Command) -> None:
        """Add a command after those already registered."""
        self._commands.append(command)

    def get(self, name: str) -> Command:
        """Return the first command registered under ``name``."""
        for command in self._commands:
            if command.name == name:
                return command
        raise CommandNotFoundError(name)

    def delete(self, name: str) -> None:
        """Remove every command registered under ``name``."""
        self._commands = [command for command in self._commands if command.name != name]

    def execute(self, name: str, args: Sequence[str] = ()) -> bool:
        """Run the named command; return False if there is no such command."""
        try:
            command = self.get(name)
        except CommandNotFoundError:
            return False
        command.executor(list(args))
        return True