import random
from datetime import datetime
from typing import Iterable, List, Optional

import pytest

from presenter import Presenter
from router import IntentRouter
from session import Session

NOW = datetime(2025, 5, 26, 9, 30, 0)


class ScriptedPresenter(Presenter):
    """Feeds canned input lines and records everything shown."""

    def __init__(self, inputs: Iterable[Optional[str]] = ()):
        self.inputs: List[Optional[str]] = list(inputs)
        self.lines: List[str] = []
        self.errors: List[str] = []
        self.prompts: List[str] = []
        self.closed = False

    def write_line(self, text: str = '') -> None:
        self.lines.append(text)

    def show_error(self, text: str) -> None:
        self.errors.append(text)

    def read_line(self, prompt: str = '') -> Optional[str]:
        self.prompts.append(prompt)
        if not self.inputs:
            self.closed = True
            return None
        return self.inputs.pop(0)

    def feed(self, *lines: Optional[str]) -> None:
        self.inputs.extend(lines)

    @property
    def output(self) -> str:
        return '\n'.join(self.lines)


@pytest.fixture
def presenter():
    return ScriptedPresenter()


@pytest.fixture
def session():
    return Session(user_name='Tester')


@pytest.fixture
def router(presenter):
    return IntentRouter(presenter, rng=random.Random(1234), now=lambda: NOW)
