"""Intent routing: one line of user input -> one response strategy.

Rules are evaluated top to bottom and the first match wins, so a later
rule never fires for input an earlier rule already claims (e.g. "remind me
to review password" is a reminder, not a password keyword). The order of
RULE_ORDER is the behaviour; do not sort it.

Each fired rule emits its reply through the Presenter and records one
ActivityLog entry (the quiz records its start and completion). Failures
inside a turn are reported and logged, never raised.
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple
from knowledge import KnowledgeBase, describe_task
from models import DATE_FORMAT, Task
from presenter import SPEAKER, Presenter
from quiz import QuizEngine
from reminders import REMINDER_PHRASES, parse_natural_reminder, parse_relative_reminder, strip_relative_prefix
from session import Session

logger = logging.getLogger(__name__)

LOG_VIEW_PHRASES = frozenset({
    "show activity log",
    "what have you done for me?",
    "show my actions",
    "task summary",
})
ADD_TASK_PREFIXES: Tuple[str, ...] = ("add task", "add a task")
CREATE_TASK_PHRASE = "create task"
TITLE_MARKERS: Tuple[str, ...] = ("add task", "add a task", "create task")
QUIZ_KEYWORDS: Tuple[str, ...] = ("start quiz", "cyber quiz", "quiz game", "quiz")
LIST_TASK_KEYWORDS: Tuple[str, ...] = ("show tasks", "list tasks", "my tasks")
INTEREST_PREFIXES: Tuple[str, ...] = ("i'm interested in ", "i am interested in ")
FOLLOW_UP_KEYWORDS: Tuple[str, ...] = (
    "more", "explain", "i don't understand", "what do you mean", "huh", "i'm confused",
)

ERROR_MESSAGE = "CyberGuardian encountered an error while processing your input. Please try again."
EMPTY_INPUT_MESSAGE = SPEAKER + "I didn't quite catch that. Could you please say something?"
TASK_FORMAT_MESSAGE = (SPEAKER + "Please specify the task title after 'add task'. "
                       "For example, 'Add task - update password'.")
REMINDER_PROMPT = SPEAKER + "Would you like a reminder? (e.g., Remind me in 3 days): "
FALLBACK_MESSAGE = SPEAKER + "I'm not sure I understand. Can you try rephrasing?"


@dataclass(frozen=True)
class Turn:
    text: str
    lower: str
    session: Session


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[Turn], bool]
    handle: Callable[[Turn], None]


RULE_ORDER: Tuple[str, ...] = (
    "empty",
    "activity_log",
    "reminder",
    "add_task",
    "quiz",
    "list_tasks",
    "phishing",
    "interest",
    "sentiment",
    "interest_tip",
    "follow_up",
    "static",
    "topic",
    "keyword",
    "fallback",
)


def extract_task_title(text: str) -> Optional[str]:
    """Title after the first task marker found, minus a leading "-"."""
    lowered = text.lower()
    for marker in TITLE_MARKERS:
        idx = lowered.find(marker)
        if idx >= 0:
            after = text[idx + len(marker):].strip()
            if after.startswith('-'):
                after = after[1:].strip()
            return after
    return None


def extract_interest(text: str) -> str:
    """Everything after the first "in " of an "I'm interested in ..." line."""
    idx = text.lower().find("in ")
    return text[idx + 3:].strip()


class IntentRouter:
    def __init__(self, presenter: Presenter, knowledge: Optional[KnowledgeBase] = None,
                 rng: Optional[random.Random] = None,
                 now: Callable[[], datetime] = datetime.now):
        self.presenter = presenter
        self.knowledge = knowledge or KnowledgeBase()
        self.rng = rng or random.Random()
        self.now = now
        handlers = {
            "empty": (self._is_empty, self._handle_empty),
            "activity_log": (self._is_log_view, self._handle_log_view),
            "reminder": (self._is_reminder, self._handle_reminder),
            "add_task": (self._is_add_task, self._handle_add_task),
            "quiz": (self._is_quiz, self._handle_quiz),
            "list_tasks": (self._is_list_tasks, self._handle_list_tasks),
            "phishing": (self._is_phishing, self._handle_phishing),
            "interest": (self._is_interest, self._handle_interest),
            "sentiment": (self._is_sentiment, self._handle_sentiment),
            "interest_tip": (self._is_interest_tip, self._handle_interest_tip),
            "follow_up": (self._is_follow_up, self._handle_follow_up),
            "static": (self._is_static, self._handle_static),
            "topic": (self._is_topic, self._handle_topic),
            "keyword": (self._is_keyword, self._handle_keyword),
            "fallback": (lambda turn: True, self._handle_fallback),
        }
        self.rules: List[Rule] = [Rule(name, *handlers[name]) for name in RULE_ORDER]

    # -------------------- entry point --------------------
    def route(self, line: Optional[str], session: Session) -> str:
        """Run the first matching rule for one input line; returns its name."""
        text = (line or '').strip()
        turn = Turn(text=text, lower=text.lower(), session=session)
        try:
            for rule in self.rules:
                if rule.matches(turn):
                    logger.debug("input %r -> rule %s", text, rule.name)
                    rule.handle(turn)
                    return rule.name
        except Exception:
            logger.exception("failed to process input %r", text)
            self.presenter.show_error(ERROR_MESSAGE)
            session.log("Error processing user input.")
            return "error"
        return "fallback"  # pragma: no cover - fallback rule always matches

    def say(self, text: str) -> None:
        self.presenter.write_typed(SPEAKER + text)

    # -------------------- predicates --------------------
    def _is_empty(self, turn: Turn) -> bool:
        return not turn.text

    def _is_log_view(self, turn: Turn) -> bool:
        return turn.lower in LOG_VIEW_PHRASES

    def _is_reminder(self, turn: Turn) -> bool:
        return any(p in turn.lower for p in REMINDER_PHRASES)

    def _is_add_task(self, turn: Turn) -> bool:
        return turn.lower.startswith(ADD_TASK_PREFIXES) or CREATE_TASK_PHRASE in turn.lower

    def _is_quiz(self, turn: Turn) -> bool:
        return any(k in turn.lower for k in QUIZ_KEYWORDS)

    def _is_list_tasks(self, turn: Turn) -> bool:
        return any(k in turn.lower for k in LIST_TASK_KEYWORDS)

    def _is_phishing(self, turn: Turn) -> bool:
        return "phishing" in turn.lower

    def _is_interest(self, turn: Turn) -> bool:
        return turn.lower.startswith(INTEREST_PREFIXES)

    def _is_sentiment(self, turn: Turn) -> bool:
        return self.knowledge.match_sentiment(turn.lower) is not None

    def _is_interest_tip(self, turn: Turn) -> bool:
        return bool(turn.session.state.interest) and "tip" in turn.lower

    def _is_follow_up(self, turn: Turn) -> bool:
        topic = turn.session.state.current_topic
        if not topic:
            return False
        return any(k in turn.lower for k in FOLLOW_UP_KEYWORDS) and self.knowledge.has_topic(topic)

    def _is_static(self, turn: Turn) -> bool:
        return self.knowledge.static_response(turn.lower) is not None

    def _is_topic(self, turn: Turn) -> bool:
        return self.knowledge.has_topic(turn.lower)

    def _is_keyword(self, turn: Turn) -> bool:
        return self.knowledge.match_keyword(turn.lower) is not None

    # -------------------- handlers --------------------
    def _handle_empty(self, turn: Turn) -> None:
        self.presenter.show_error(EMPTY_INPUT_MESSAGE)

    def _handle_log_view(self, turn: Turn) -> None:
        entries = turn.session.activity.list()
        self.presenter.show_divider(f"Activity Log (Last {turn.session.activity.capacity} Actions)")
        if not entries:
            self.say("No actions recorded yet.")
            return
        for i, entry in enumerate(entries, start=1):
            self.presenter.write_line(f"{i}. {entry}")
        self.presenter.write_line()

    def _handle_reminder(self, turn: Turn) -> None:
        parsed = parse_natural_reminder(turn.text, now=self.now())
        task = None
        if parsed.title:
            task = self.add_task_flow(turn.session, parsed.title, parsed.date)
        date = parsed.date or (task.reminder_date if task else None)
        if date is not None:
            day = date.strftime(DATE_FORMAT)
            self.say(f"Got it! I’ll remind you on {day}.")
            turn.session.log(f"Reminder set via NLP command for '{parsed.title or 'unknown task'}' on {day}")
        else:
            self.say("Reminder noted without specific time.")
            turn.session.log(f"Added reminder via NLP command: '{turn.text}'")

    def _handle_add_task(self, turn: Turn) -> None:
        title = extract_task_title(turn.text)
        if not title:
            self.presenter.show_error(TASK_FORMAT_MESSAGE)
            return
        task = self.add_task_flow(turn.session, title)
        if task is None:
            return
        entry = f"Task added: '{task.title}'"
        if task.reminder_date is not None:
            entry += f" (reminder on {task.reminder_date.strftime(DATE_FORMAT)})"
        turn.session.log(entry)

    def _handle_quiz(self, turn: Turn) -> None:
        turn.session.log("Quiz started.")
        engine = QuizEngine(self.presenter)
        score = engine.run()
        turn.session.log(f"Quiz completed. Score: {score}/{len(engine.questions)}")

    def _handle_list_tasks(self, turn: Turn) -> None:
        self.presenter.show_divider("Your Cybersecurity Tasks")
        if turn.session.tasks.is_empty():
            self.say("You have no tasks at the moment.")
        else:
            for task in turn.session.tasks.list():
                self.presenter.write_line(str(task))
        turn.session.log("Displayed task list.")

    def _handle_phishing(self, turn: Turn) -> None:
        turn.session.state.current_topic = "phishing"
        tip = self.knowledge.topic_tip("phishing", self.rng)
        self.say(f"Here's a tip on phishing: {tip}")
        turn.session.log("Provided phishing tip.")

    def _handle_interest(self, turn: Turn) -> None:
        interest = extract_interest(turn.text)
        state = turn.session.state
        state.interest = interest
        state.current_topic = interest.lower()
        self.say(f"Great! I'll remember that you're interested in {interest}.")
        turn.session.log(f"User interest noted: {interest}")

    def _handle_sentiment(self, turn: Turn) -> None:
        key, response = self.knowledge.match_sentiment(turn.lower)  # type: ignore[misc]
        self.say(response)
        turn.session.log(f"Handled sentiment expression: '{key}'")

    def _handle_interest_tip(self, turn: Turn) -> None:
        state = turn.session.state
        interest = state.interest or ''
        self.say(f"As someone interested in {interest}, here's a tip:")
        tip = self.knowledge.topic_tip(interest, self.rng)
        keyword_tip = self.knowledge.keyword_response(interest) if tip is None else None
        if tip is not None:
            self.say(tip)
            turn.session.log(f"Provided personalized tip for interest: {interest}")
        elif keyword_tip is not None:
            self.say(keyword_tip)
            turn.session.log(f"Provided keyword tip for interest: {interest}")
        else:
            self.say("I don't have specific tips on that yet, but I’ll remember it for the future!")
            turn.session.log(f"No tip available for interest: {interest}")
        state.current_topic = interest.lower()

    def _handle_follow_up(self, turn: Turn) -> None:
        topic = turn.session.state.current_topic or ''
        tip = self.knowledge.topic_tip(topic, self.rng)
        self.say(f"Here's more on {topic}: {tip}")
        turn.session.log(f"Provided follow-up explanation for topic: {topic}")

    def _handle_static(self, turn: Turn) -> None:
        self.say(self.knowledge.static_response(turn.lower))  # type: ignore[arg-type]
        turn.session.log(f"Responded with static response for: '{turn.lower}'")
        turn.session.state.current_topic = None

    def _handle_topic(self, turn: Turn) -> None:
        state = turn.session.state
        tip = self.knowledge.topic_tip(turn.lower, self.rng)
        if state.interest and state.interest.lower() == turn.lower:
            self.say(f"As someone interested in {turn.text}, here's a tip for you:")
        self.say(tip)  # type: ignore[arg-type]
        turn.session.log(f"Provided topic response for: '{turn.lower}'")
        state.current_topic = turn.lower

    def _handle_keyword(self, turn: Turn) -> None:
        key, response = self.knowledge.match_keyword(turn.lower)  # type: ignore[misc]
        self.say(response)
        turn.session.log(f"Provided keyword response for: '{key}'")
        turn.session.state.current_topic = key

    def _handle_fallback(self, turn: Turn) -> None:
        self.presenter.write_typed(FALLBACK_MESSAGE)
        turn.session.log(f"Unrecognized input: '{turn.lower}'")
        turn.session.state.current_topic = None

    # -------------------- task-add flow --------------------
    def add_task_flow(self, session: Session, title: str,
                      reminder_date: Optional[datetime] = None) -> Optional[Task]:
        """Create a task; asks for a reminder unless one is supplied."""
        title = title.strip()
        if not title:
            self.presenter.show_error(TASK_FORMAT_MESSAGE)
            return None
        description = describe_task(title)
        self.say(f"Task added with the description: \"{description}\".")
        if reminder_date is None:
            reminder_date = self._ask_for_reminder()
        return session.tasks.add(title, description, reminder_date)

    def _ask_for_reminder(self) -> Optional[datetime]:
        reply = (self.presenter.read_line(REMINDER_PROMPT) or '').strip()
        if not reply or "remind me" not in reply.lower():
            self.say("No reminder set.")
            return None
        now = self.now()
        date = parse_relative_reminder(strip_relative_prefix(reply), now=now)
        if date is None:
            self.presenter.show_error(SPEAKER + "Sorry, I couldn't understand the reminder format.")
            return None
        self.say(f"Got it! I’ll remind you in {(date - now).days} days.")
        return date
