"""Tests for typetrend.ui.colors – palette and character styling."""

from __future__ import annotations

import pytest

from typetrend.core.comparator import CORRECT, CURSOR, ERROR, PENDING
from typetrend.ui.colors import TypingColors, state_style


# ===========================================================================
# TypingColors – constants exist
# ===========================================================================

class TestTypingColors:
    @pytest.mark.parametrize("name", ["BG", "PRIMARY", "CORRECT", "ERROR", "CURSOR_BG", "WARNING"])
    def test_is_hex(self, name: str):
        value = getattr(TypingColors, name)
        assert value.startswith("#")
        assert len(value) == 7


# ===========================================================================
# state_style
# ===========================================================================

class TestStateStyle:
    def test_correct_is_green(self):
        assert TypingColors.CORRECT in state_style(CORRECT)

    def test_error_is_red(self):
        assert TypingColors.ERROR in state_style(ERROR)

    def test_cursor_is_highlighted(self):
        assert state_style(CURSOR).startswith("background-color:")

    def test_pending_uses_text_color(self):
        assert TypingColors.TEXT_PRIMARY in state_style(PENDING)

    def test_unknown_state(self):
        with pytest.raises(ValueError):
            state_style("bogus")
