from __future__ import annotations

import asyncio
from collections.abc import Callable

DEFAULT_RAMP_MS = 3000
STEP_PERCENT = 2
HOLD_PERCENT = 90


class ProgressController:
    """Cosmetic progress ramp: 0% to 90% in fixed steps, then hold.

    The ramp never reaches 100% on its own; the owner calls :meth:`stop` once
    the real request settles. Only one ramp is active at a time.
    """

    def __init__(
        self,
        on_tick: Callable[[int], None] | None = None,
        *,
        total_ms: int = DEFAULT_RAMP_MS,
    ) -> None:
        self.on_tick = on_tick
        self.interval = total_ms / 1000 / (HOLD_PERCENT / STEP_PERCENT)
        self.percent = 0
        self._handle: asyncio.TimerHandle | None = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        self.stop()
        self.percent = 0
        self._emit()
        self._schedule()

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.interval, self._tick)

    def _tick(self) -> None:
        self._handle = None
        self.percent = min(HOLD_PERCENT, self.percent + STEP_PERCENT)
        self._emit()
        if self.percent < HOLD_PERCENT:
            self._schedule()

    def _emit(self) -> None:
        if self.on_tick is not None:
            self.on_tick(self.percent)
