"""Tests for typetrend.app – startup wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets")

from typetrend import app, config


@pytest.fixture()
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(config, "DATA_DIR", tmp_path)
    return tmp_path


class TestBuildSession:
    def test_fresh_install(self, data_dir: Path):
        session, warning = app.build_session()
        assert warning == ""
        assert session.store.records == ()
        assert len(session.target.split(" ")) == config.WORDS_PER_SESSION

    def test_existing_history(self, data_dir: Path):
        (data_dir / f"{config.SESSIONS_KEY}.json").write_text(
            '[{"timestamp": 1, "wpm": 42.5, "accuracy": 97.0}]', encoding="utf-8"
        )
        session, warning = app.build_session()
        assert warning == ""
        assert session.store.records[0].wpm == 42.5

    def test_corrupt_history_warns(self, data_dir: Path):
        (data_dir / f"{config.SESSIONS_KEY}.json").write_text("garbage", encoding="utf-8")
        session, warning = app.build_session()
        assert "could not be read" in warning
        assert session.store.records == ()
