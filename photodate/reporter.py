"""Colored, line-oriented progress output.

Each planned move prints ``<name>: moving <src> to <dst>...`` followed on
the same line by ``OK!`` (green), ``KO! (<error>)`` (red) or ``SKIP!``
(white) once the outcome is known. Entries without a usable date print
``<name>: no match`` in red.
"""
from collections import Counter
from typing import Optional

from rich.console import Console

from .models import DirectoryEntry, MoveOutcome, OutcomeKind
from .planner import MovePlan

NEUTRAL = "white"
SUCCESS = "green"
FAILURE = "red"


class Reporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(soft_wrap=True, highlight=False)
        self.totals: Counter = Counter()

    def _write(self, text: str, style: str, end: str = "\n"):
        # file names may contain [brackets]; never interpret them as markup
        self.console.print(
            text, style=style, end=end, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def attempt(self, entry: DirectoryEntry, plan: MovePlan):
        self._write(f"{entry.name}: moving {entry.path} to {plan.dest_path}...", NEUTRAL, end="")

    def outcome(self, entry: DirectoryEntry, outcome: MoveOutcome):
        self.totals[outcome.kind] += 1
        if outcome.kind is OutcomeKind.SKIPPED:
            self._write(f"{entry.name}: {outcome.reason}", FAILURE)
        elif outcome.kind is OutcomeKind.SIMULATED:
            self._write(" SKIP!", NEUTRAL)
        elif outcome.kind is OutcomeKind.SUCCEEDED:
            self._write(" OK!", SUCCESS)
        else:
            self._write(f" KO! ({outcome.error})", FAILURE)

    def summary(self, processed: int, limit_reached: bool = False):
        moved = self.totals[OutcomeKind.SUCCEEDED]
        simulated = self.totals[OutcomeKind.SIMULATED]
        failed = self.totals[OutcomeKind.FAILED]
        unmatched = self.totals[OutcomeKind.SKIPPED]
        line = (
            f"Processed {processed} entries: {moved} moved, {simulated} simulated, "
            f"{failed} failed, {unmatched} unmatched"
        )
        if limit_reached:
            line += " (limit reached)"
        self._write(line, FAILURE if failed else NEUTRAL)
