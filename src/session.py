"""One chat session's mutable state.

Each session owns its own TaskStore, ActivityLog and ConversationState;
the KnowledgeBase is shared read-only.
"""
from dataclasses import dataclass, field
from models import ConversationState
from tasks import TaskStore
from activity import ActivityLog


@dataclass
class Session:
    user_name: str = ''
    tasks: TaskStore = field(default_factory=TaskStore)
    activity: ActivityLog = field(default_factory=ActivityLog)
    state: ConversationState = field(default_factory=ConversationState)

    def log(self, description: str) -> None:
        self.activity.record(description)
