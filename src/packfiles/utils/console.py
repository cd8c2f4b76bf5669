"""Console output with theme support.

This module provides themed status printing on top of Rich for the
command-line interface.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    heading: str
    path: str
    number: str
    dim: str


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        heading='bright_yellow',
        path='white',
        number='bright_blue',
        dim='bright_black',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        heading='bright_cyan',
        path='bright_green',
        number='green',
        dim='green',
    ),
}


class ConsoleManager:
    """Console management with theme support."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 no_color: Optional[bool] = None):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            no_color: Disable colors; defaults to the NO_COLOR environment variable
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        if no_color is None:
            no_color = bool(os.environ.get('NO_COLOR'))

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=no_color,
            highlight=False,
            soft_wrap=True,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        return Theme({
            'info': self.theme_colors.info,
            'warning': self.theme_colors.warning,
            'error': self.theme_colors.error,
            'success': self.theme_colors.success,
            'highlight': self.theme_colors.highlight,
            'heading': self.theme_colors.heading,
            'path': self.theme_colors.path,
            'number': self.theme_colors.number,
            'dim': self.theme_colors.dim,
        })

    def print(self, *args, **kwargs):
        """Print with Rich formatting."""
        self.console.print(*args, **kwargs)

    def print_plain(self, message: str):
        """Print text verbatim, without markup interpretation."""
        self.console.print(message, markup=False)

    def print_status(self, status: StatusType, message: str, prefix: str = ""):
        """Print a status line with icon."""
        icon, _, color = status.value

        status_text = Text()
        if prefix:
            status_text.append(prefix + " ")
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_info_with_heading(self, heading: str, value: str):
        """Print an info message with a colored heading and regular value."""
        text = Text()
        text.append(heading, style=self.theme_colors.heading)
        text.append(f" {value}", style=self.theme_colors.info)
        self.console.print(text)

    def print_path(self, label: str, path: str):
        """Print a labelled path."""
        self.console.print(f"[info]{escape(label)}[/info] [path]{escape(path)}[/path]")

    def print_exception(self):
        """Print exception traceback with Rich formatting."""
        self.console.print_exception()
