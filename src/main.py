"""Main entry point for CyberGuardian."""
import logging
import click
from config import Settings
from presenter import TerminalPresenter
from router import IntentRouter
from cli import CLI

logger = logging.getLogger(__name__)


@click.command()
def main() -> None:
    """CyberGuardian: a terminal cybersecurity awareness assistant."""
    settings = Settings.load()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    presenter = TerminalPresenter(typing_delay_ms=settings.typing_delay_ms)
    try:
        CLI(presenter, IntentRouter(presenter), settings).run()
    except Exception as exc:
        logger.exception("session aborted")
        presenter.show_error(f"An unexpected error occurred: {exc}")
        raise SystemExit(1)

if __name__ == "__main__":
    main()
