"""Interactive chat session: banner, welcome sound, name prompt, chat loop.

Only the literal "exit" (any case) ends the loop. A closed input stream
ends it too, so a piped or detached stdin cannot spin forever.
"""
import logging
from pathlib import Path
from typing import Optional
from config import Settings
from presenter import SPEAKER, Presenter
from router import IntentRouter
from session import Session
from theme import ACCENT, SUCCESS, color

logger = logging.getLogger(__name__)

APP_NAME = "CyberGuardian"
EXIT_COMMAND = 'exit'
ANONYMOUS_NAME = 'friend'

HELP_LINES = (
    "You can ask about:",
    " - Password safety",
    " - Scams",
    " - Privacy",
    " - Phishing",
    " - Safe browsing",
    " - My purpose",
    " - What can I help with",
    "Type 'exit' to leave the chat.",
    "Type 'add task - <title>' or 'remind me to <something> tomorrow' to track tasks.",
    "Type 'start quiz' to begin the cybersecurity quiz.",
    "Type 'show activity log' or 'what have you done for me?' to view recent actions.",
    "------------------------------",
)


def play_welcome_sound(path: Optional[str], presenter: Presenter) -> bool:
    """Play a WAV file synchronously; failures are reported, never raised."""
    if not path:
        return False
    sound = Path(path).expanduser()
    if not sound.is_file():
        presenter.show_error(f"Audio file not found: {sound}")
        return False
    try:
        import winsound
    except ImportError:
        logger.warning("audio playback unavailable on this platform; skipping %s", sound)
        presenter.show_error("Audio could not be played: playback is only supported on Windows.")
        return False
    try:
        winsound.PlaySound(str(sound), winsound.SND_FILENAME)
    except RuntimeError as exc:
        logger.warning("audio playback failed: %s", exc)
        presenter.show_error(f"Audio could not be played: {exc}")
        return False
    return True


class CLI:
    def __init__(self, presenter: Presenter, router: Optional[IntentRouter] = None,
                 settings: Optional[Settings] = None):
        self.presenter = presenter
        self.router = router or IntentRouter(presenter)
        self.settings = settings or Settings()

    def run(self) -> Session:
        """Whole session from banner to farewell; returns the finished session."""
        p = self.presenter
        session = Session()
        p.show_banner(APP_NAME)
        play_welcome_sound(self.settings.welcome_sound, p)
        session.user_name = (p.read_line("Please enter your name: ") or '').strip()
        name = session.user_name or ANONYMOUS_NAME
        self._welcome(name)
        farewell_note: Optional[str] = None
        try:
            self._chat(session, name)
        except KeyboardInterrupt:
            farewell_note = "Interrupted."
        p.show_divider("Session Ended")
        if farewell_note:
            p.write_line(farewell_note)
        p.write_typed(color(f"\nThank you for using {APP_NAME}, {name}!", SUCCESS))
        p.write_typed(color("Stay safe, stay smart. Press Enter to exit.", SUCCESS))
        p.pause()
        return session

    # -------------------- chat loop --------------------
    def _chat(self, session: Session, name: str) -> None:
        p = self.presenter
        p.show_divider("Chat Help")
        for line in HELP_LINES:
            p.write_line(color(line, ACCENT))
        p.write_line()
        while True:
            line = p.read_line(f"\n{name}: ")
            if line is None:
                if p.closed:
                    break
                p.write_typed(SPEAKER + "It seems like something went wrong with the input. "
                              "Let's continue whenever you're ready.")
                continue
            if line.strip().lower() == EXIT_COMMAND:
                break
            self.router.route(line, session)

    def _welcome(self, name: str) -> None:
        p = self.presenter
        lines = [
            f"Welcome, {name}!",
            f"I'm {APP_NAME}, your cybersecurity companion.",
            "Ask me anything about staying safe online.",
        ]
        width = max(len(line) for line in lines)
        border = '*' * (width + 6)
        p.write_line(color("\n" + border, ACCENT))
        for line in lines:
            p.write_typed(color(f"*  {line.ljust(width)}  *", ACCENT), 15)
        p.write_line(color(border, ACCENT))
