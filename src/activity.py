"""Bounded rolling log of user-visible actions (oldest evicted first)."""
from collections import deque
from datetime import datetime
from typing import Callable, Deque, List
from models import ActivityLogEntry

CAPACITY = 10


class ActivityLog:
    def __init__(self, capacity: int = CAPACITY, now: Callable[[], datetime] = datetime.now):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._entries: Deque[ActivityLogEntry] = deque(maxlen=capacity)
        self._now = now

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or CAPACITY

    def record(self, description: str) -> ActivityLogEntry:
        entry = ActivityLogEntry(timestamp=self._now(), description=description)
        self._entries.append(entry)
        return entry

    def list(self) -> List[ActivityLogEntry]:
        return list(self._entries)

    def size(self) -> int:
        return len(self._entries)
