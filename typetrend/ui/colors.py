"""Theme colors for the typing view."""

from typetrend.core.comparator import CORRECT, CURSOR, ERROR, PENDING


class TypingColors:
    """Light theme palette."""

    BG = "#f9fafb"
    CARD_BG = "#f3f4f6"
    PANEL_BG = "#ffffff"

    PRIMARY = "#3b82f6"
    TEXT_PRIMARY = "#111827"
    TEXT_MUTED = "#6b7280"

    CORRECT = "#16a34a"
    ERROR = "#dc2626"
    CURSOR_BG = "#bfdbfe"
    WARNING = "#b45309"


def state_style(state: str) -> str:
    """Inline CSS for one character of the practice text."""
    if state == CORRECT:
        return f"color: {TypingColors.CORRECT};"
    if state == ERROR:
        return f"color: {TypingColors.ERROR};"
    if state == CURSOR:
        return f"background-color: {TypingColors.CURSOR_BG};"
    if state == PENDING:
        return f"color: {TypingColors.TEXT_PRIMARY};"
    raise ValueError(f"unknown character state: {state!r}")
