from __future__ import annotations

import sys
from typing import TextIO

from seocheck.client.state import UIState
from seocheck.services.report_renderer import render_text

BAR_WIDTH = 30


class TerminalView:
    """Binds UI state to a terminal: progress on one stream, results on another."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None, *, color: bool = True) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.color = color
        self._bar_visible = False

    def __call__(self, state: UIState) -> None:
        if state.phase == "in_flight":
            self._draw_bar(state.progress_percent)
            return

        self._clear_bar()
        if state.prompt:
            self.err.write(f"{state.prompt}\n")
        if state.outcome is not None and state.phase in {"success", "error"}:
            stream = self.out if state.phase == "success" else self.err
            stream.write(render_text(state.outcome, color=self.color) + "\n")

    def _draw_bar(self, percent: int) -> None:
        filled = BAR_WIDTH * percent // 100
        bar = "#" * filled + "-" * (BAR_WIDTH - filled)
        self.err.write(f"\rAnalyzing [{bar}] {percent:3d}%")
        self.err.flush()
        self._bar_visible = True

    def _clear_bar(self) -> None:
        if self._bar_visible:
            self.err.write("\r" + " " * (BAR_WIDTH + 20) + "\r")
            self.err.flush()
            self._bar_visible = False
