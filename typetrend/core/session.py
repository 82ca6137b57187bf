from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from typetrend import config
from typetrend.core.aggregate import Aggregates, aggregate
from typetrend.core.metrics import LiveMetrics, compute_live, final_metrics
from typetrend.core.sampler import SamplerHandle, SessionSampler, WpmSample
from typetrend.core.store import SessionRecord, SessionStore
from typetrend.core.text import TextGenerator

logger = logging.getLogger(__name__)


@dataclass
class TimerState:
    start_instant: Optional[int] = None
    elapsed_seconds: int = 0


def added_chars(previous: str, text: str) -> str:
    """Characters of *text* past its common prefix with *previous*."""
    shared = 0
    for a, b in zip(previous, text):
        if a != b:
            break
        shared += 1
    return text[shared:]


class TypingSession:
    """The single active practice attempt.

    Owns the practice text, the input buffer, the timer and the WPM series;
    all four are replaced together when the session finishes or is reset.
    Completed attempts are appended to the injected :class:`SessionStore`.
    """

    def __init__(
        self,
        generator: TextGenerator,
        store: SessionStore,
        word_count: int = config.WORDS_PER_SESSION,
        on_keystroke: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._generator = generator
        self._store = store
        self._word_count = word_count
        self._on_keystroke = on_keystroke
        self._sampler = SessionSampler()
        self._handle: Optional[SamplerHandle] = None
        self._session_id = 0
        self._target = generator.generate(word_count)
        self._input = ""
        self._timer = TimerState()

    @property
    def session_id(self) -> int:
        return self._session_id

    @property
    def target(self) -> str:
        return self._target

    @property
    def input(self) -> str:
        return self._input

    @property
    def timer(self) -> TimerState:
        return self._timer

    @property
    def handle(self) -> Optional[SamplerHandle]:
        """Sampling handle of the running session, None before the first keystroke."""
        return self._handle

    @property
    def samples(self) -> Tuple[WpmSample, ...]:
        return self._sampler.samples

    @property
    def store(self) -> SessionStore:
        return self._store

    def set_keystroke_hook(self, hook: Optional[Callable[[str], None]]) -> None:
        """Install the callback invoked once for every character added to the input."""
        self._on_keystroke = hook

    def is_started(self) -> bool:
        return self._timer.start_instant is not None

    def update_input(self, text: str, now_ms: int) -> LiveMetrics:
        """Replace the input buffer with *text* and return fresh live metrics.

        Reaching the end of the practice text finishes the session, which
        may raise :class:`StorageWriteError` from the store.
        """
        previous = self._input
        if not self.is_started() and text:
            self._timer.start_instant = now_ms
            self._handle = self._sampler.start(self._session_id, now_ms)
            logger.debug("Session %s started", self._session_id)
        if self._on_keystroke is not None:
            for char in added_chars(previous, text):
                self._on_keystroke(char)
        self._input = text
        metrics = self.live_metrics()
        if self.is_started() and len(text) >= len(self._target):
            self.finish(now_ms)
        return metrics

    def tick(self, now_ms: int, handle: Optional[SamplerHandle] = None) -> Optional[WpmSample]:
        handle = handle or self._handle
        if handle is None or not self._sampler.is_live(handle):
            return None
        sample = self._sampler.tick(handle, now_ms, self._input, self._target)
        if sample is not None:
            self._timer.elapsed_seconds = sample.at_second
        return sample

    def live_metrics(self) -> LiveMetrics:
        return compute_live(self._input, self._target, self._timer.elapsed_seconds)

    def aggregates(self, now_ms: int) -> Aggregates:
        return aggregate(self._store.records, now_ms)

    def finish(self, now_ms: int) -> Optional[SessionRecord]:
        if self._timer.start_instant is None:
            return None
        result = final_metrics(self._input, self._target, now_ms - self._timer.start_instant)
        record = SessionRecord(timestamp=now_ms, wpm=result.wpm, accuracy_percent=result.accuracy_percent)
        logger.info(
            "Session %s finished: %.1f WPM, %.1f%% accuracy",
            self._session_id,
            record.wpm,
            record.accuracy_percent,
        )
        self.reset()
        self._store.append(record)
        return record

    def close(self, now_ms: int) -> Optional[SessionRecord]:
        """End the attempt: record it when it was started, otherwise just start over."""
        if self.is_started():
            return self.finish(now_ms)
        self.reset()
        return None

    def reset(self) -> None:
        if self._handle is not None:
            self._sampler.cancel(self._handle)
            self._handle = None
        self._session_id += 1
        self._target = self._generator.generate(self._word_count)
        self._input = ""
        self._timer = TimerState()
        logger.debug("Session reset, next id %s", self._session_id)
