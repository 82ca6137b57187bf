"""Application entry point and setup for the TypeTrend typing trainer."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from typetrend import config
from typetrend.core.session import TypingSession
from typetrend.core.store import FileBackend, SessionStore
from typetrend.core.text import TextGenerator, WordCorpus
from typetrend.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_session() -> tuple[TypingSession, str]:
    """Load history and the word corpus; return the session and any startup warning."""
    store = SessionStore(FileBackend(config.DATA_DIR))
    records, error = store.load_or_empty()
    logging.info("Loaded %d past sessions from %s", len(records), config.DATA_DIR)
    warning = f"Session history could not be read and was ignored ({error})" if error else ""
    generator = TextGenerator(WordCorpus.from_yaml())
    return TypingSession(generator, store), warning


def run() -> None:
    """Initialize the application and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)
    app.setApplicationDisplayName(config.APP_NAME)

    session, warning = build_session()
    window = MainWindow(session, startup_warning=warning or None)
    window.resize(1000, 480)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
