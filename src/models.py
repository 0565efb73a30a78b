"""Data models for the CyberGuardian assistant.

Tasks are append-only and never mutated after creation; activity log
entries and quiz questions are immutable. ConversationState is the only
model mutated turn by turn (by the intent router).
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

@dataclass(frozen=True)
class Task:
    """A single cybersecurity task.

    Fields:
        title: Non-blank title, casing as the user typed it.
        description: Chosen from the title by keyword rule at creation.
        reminder_date: Optional future datetime for a reminder.
    """
    title: str
    description: str
    reminder_date: Optional[datetime] = None

    def __str__(self) -> str:
        reminder = ''
        if self.reminder_date is not None:
            reminder = f" (Reminder: {self.reminder_date.strftime(DATE_FORMAT)})"
        return f"- {self.title}: {self.description}{reminder}"


@dataclass(frozen=True)
class ActivityLogEntry:
    timestamp: datetime
    description: str

    def __str__(self) -> str:
        return f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] {self.description}"


@dataclass
class ConversationState:
    """Per-session conversational memory (reset only at session start)."""
    current_topic: Optional[str] = None
    interest: Optional[str] = None


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    options: Tuple[str, ...]
    correct_option_index: int
    explanation: str

    @property
    def correct_letter(self) -> str:
        return chr(ord('A') + self.correct_option_index)
