"""Presenter interface and the terminal implementation.

The core never formats colour or art itself; it hands plain text to a
Presenter. A None from read_line means "nothing entered"; ``closed``
turns True once the input stream is exhausted.
"""
import sys
import time
from abc import ABC, abstractmethod
from typing import Optional
import click
from theme import color, ACCENT, BANNER_COLOR, DIVIDER_COLOR, ERROR, PROMPT_COLOR

SPEAKER = "CyberGuardian: "
DIVIDER_WIDTH = 40
BANNER_TAGLINE = "      [:: Your AI Guide to Cybersecurity ::]"


class Presenter(ABC):
    closed: bool = False

    @abstractmethod
    def write_line(self, text: str = '') -> None:
        """Show one line of plain text."""

    def write_typed(self, text: str, delay_ms: Optional[int] = None) -> None:
        self.write_line(text)

    @abstractmethod
    def read_line(self, prompt: str = '') -> Optional[str]:
        """Read one line; None when nothing could be read."""

    def show_error(self, text: str) -> None:
        self.write_line(text)

    def show_banner(self, title: str) -> None:
        self.write_line(title)

    def show_divider(self, title: str) -> None:
        self.write_line(f"[ {title} ]")

    def pause(self, message: str = '') -> None:
        """Wait for one key press (no-op by default)."""


class TerminalPresenter(Presenter):
    def __init__(self, typing_delay_ms: int = 30):
        self.typing_delay_ms = typing_delay_ms
        self.closed = False

    # -------------------- output --------------------
    def write_line(self, text: str = '') -> None:
        print(text, flush=True)

    def write_typed(self, text: str, delay_ms: Optional[int] = None) -> None:
        """Print text one character at a time (plain print when not a TTY)."""
        delay = self.typing_delay_ms if delay_ms is None else delay_ms
        if delay <= 0 or not sys.stdout.isatty():
            self.write_line(text)
            return
        for ch in text:
            sys.stdout.write(ch)
            sys.stdout.flush()
            time.sleep(delay / 1000)
        print(flush=True)

    def show_error(self, text: str) -> None:
        print(color(text, ERROR), flush=True)

    def show_banner(self, title: str) -> None:
        click.clear()
        art = f"  {title.upper()}  "
        rule = '═' * max(len(art), len(BANNER_TAGLINE))
        print(color(rule, BANNER_COLOR))
        print(color(art, BANNER_COLOR))
        print(color(rule, BANNER_COLOR))
        print(color(BANNER_TAGLINE, ACCENT))
        print(color(rule, BANNER_COLOR), flush=True)

    def show_divider(self, title: str) -> None:
        line = '-' * DIVIDER_WIDTH
        print(color(f"\n{line}", DIVIDER_COLOR))
        print(f"[ {title} ]")
        print(color(f"{line}\n", DIVIDER_COLOR), flush=True)

    # -------------------- input --------------------
    def read_line(self, prompt: str = '') -> Optional[str]:
        try:
            return input(color(prompt, PROMPT_COLOR))
        except EOFError:
            self.closed = True
            return None

    def pause(self, message: str = '') -> None:
        if self.closed or not sys.stdin.isatty():
            return
        click.pause(info=message)
