from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from typetrend.core.metrics import compute_live

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WpmSample:
    at_second: int
    wpm: float


@dataclass
class SamplerHandle:
    """Ticket for one session's sampling task. Cancel it to stop sampling."""

    session_id: int
    start_ms: int
    cancelled: bool = field(default=False, compare=False)


class SessionSampler:
    """Records one raw-WPM sample per timer tick while a session is live.

    Ticks are keyed by :class:`SamplerHandle`; a tick carrying a handle that
    was cancelled, or that belongs to an earlier session, is dropped so a
    late timer can never write into a newer session's series.
    """

    def __init__(self) -> None:
        self._handle: Optional[SamplerHandle] = None
        self._samples: List[WpmSample] = []

    @property
    def samples(self) -> Tuple[WpmSample, ...]:
        return tuple(self._samples)

    @property
    def active_handle(self) -> Optional[SamplerHandle]:
        return self._handle

    def start(self, session_id: int, start_ms: int) -> SamplerHandle:
        if self._handle is not None:
            self.cancel(self._handle)
        self._samples = []
        self._handle = SamplerHandle(session_id=session_id, start_ms=start_ms)
        logger.debug("Sampler started for session %s", session_id)
        return self._handle

    def cancel(self, handle: SamplerHandle) -> None:
        handle.cancelled = True
        if handle is self._handle:
            self._handle = None
            self._samples = []
            logger.debug("Sampler cancelled for session %s", handle.session_id)

    def is_live(self, handle: SamplerHandle) -> bool:
        return handle is self._handle and not handle.cancelled

    def tick(self, handle: SamplerHandle, now_ms: int, typed: str, target: str) -> Optional[WpmSample]:
        if not self.is_live(handle):
            return None
        if now_ms < handle.start_ms:
            raise ValueError(f"tick at {now_ms} precedes session start {handle.start_ms}")
        elapsed = (now_ms - handle.start_ms) // 1000
        wpm = compute_live(typed, target, elapsed).raw_wpm
        sample = WpmSample(at_second=elapsed, wpm=round(wpm, 2))
        self._samples.append(sample)
        return sample
