"""Task store: ordered, append-only collection of cybersecurity tasks."""
from datetime import datetime
from typing import List, Optional
from knowledge import describe_task
from models import Task


class TaskStore:
    def __init__(self) -> None:
        self._tasks: List[Task] = []

    # -------------------- task operations --------------------
    def add(self, title: str, description: Optional[str] = None,
            reminder_date: Optional[datetime] = None) -> Task:
        """Append a task; description defaults to the keyword rule over title."""
        title = title.strip()
        if not title:
            raise ValueError("task title must not be blank")
        task = Task(
            title=title,
            description=description if description is not None else describe_task(title),
            reminder_date=reminder_date,
        )
        self._tasks.append(task)
        return task

    # -------------------- queries --------------------
    def list(self) -> List[Task]:
        return list(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)
