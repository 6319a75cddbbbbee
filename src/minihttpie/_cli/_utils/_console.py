from enum import Enum
from typing import Optional

import click

from ...models.errors import ExitCode


class LogLevel(Enum):
    """Message levels with their display prefix."""

    INFO = ""
    WARNING = "⚠ "
    ERROR = "✗ "


_LEVEL_COLORS = {
    LogLevel.INFO: None,
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


class ConsoleLogger:
    """Singleton writing user-facing messages to the terminal.

    Everything except INFO goes to stderr so that stdout only ever carries
    the rendered HTTP exchange.
    """

    _instance: Optional["ConsoleLogger"] = None

    def __new__(cls) -> "ConsoleLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "ConsoleLogger":
        return cls()

    def log(
        self,
        message: str,
        level: LogLevel = LogLevel.INFO,
        fg: Optional[str] = None,
        bg: Optional[str] = None,
    ) -> None:
        text = f"{level.value}{message}"
        color = fg or _LEVEL_COLORS[level]
        if color or bg:
            text = click.style(text, fg=color, bg=bg)
        click.echo(text, err=level is not LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str, exit_code: int = ExitCode.BUILD_ERROR) -> None:
        """Print an error and terminate the current command with `exit_code`."""
        self.log(message, LogLevel.ERROR)
        click.get_current_context().exit(int(exit_code))
