"""Move dated entries of a directory tree into ``YYYY_MM_DD`` folders.

The :class:`Reorganizer` walks the source tree, asks the
:class:`~photodate.matcher.DateMatcher` for a date in every entry name and
moves (or, in simulation mode, only reports) each dated entry to
``<dest_root>/YYYY_MM_DD/<name>``.

A failure on one entry is reported and the walk goes on. Only problems
with the configuration or with reading the source root stop a run.
"""
import logging
import os
import stat
from collections import Counter
from contextlib import closing
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterator, Optional

from tqdm import tqdm

from .errors import TraversalError
from .matcher import MATCHER_DISABLED, DateMatcher
from .models import DirectoryEntry, MoveOutcome
from .planner import plan_move
from .reporter import Reporter

logger = logging.getLogger(__name__)

SELF_AND_PARENT = (".", "..")


@dataclass(frozen=True)
class RunConfig:
    """Options for one run.

    ``dest_root`` is ``None`` for a simulation-only run. ``demoted`` is set
    when the destination root could not be created and the run was forced
    into simulation mode.
    """
    source: Path
    dest_root: Optional[Path] = None
    matcher: DateMatcher = MATCHER_DISABLED
    limit: int = 0
    simulate: bool = False
    demoted: bool = False

    @classmethod
    def create(
        cls,
        source: Optional[str] = None,
        dest_root: Optional[str] = None,
        pattern: Optional[str] = None,
        year: int = 0,
        month: int = 0,
        day: int = 0,
        limit: int = 0,
        simulate: bool = False,
    ) -> "RunConfig":
        """Build a config from raw options and prepare the destination root.

        The pattern is compiled here so that a bad pattern fails before
        anything is walked.

        Raises:
            PatternError: ``pattern`` is not a valid regular expression.
        """
        matcher = DateMatcher.from_text(pattern, year=year, month=month, day=day)
        if not source:
            logger.warning("no source path specified, assuming current directory")
            source = "."
        config = cls(
            source=Path(source),
            dest_root=Path(dest_root) if dest_root else None,
            matcher=matcher,
            limit=limit,
            simulate=simulate,
        )
        return config.prepare_destination()

    @property
    def dry_run(self) -> bool:
        return self.simulate or self.dest_root is None

    @property
    def unlimited(self) -> bool:
        return self.limit <= 0

    def prepare_destination(self) -> "RunConfig":
        """Create the destination root, demoting to simulation on failure."""
        if self.dest_root is None:
            return self
        try:
            self.dest_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("error creating directory %s: %s; running in simulation mode", self.dest_root, e)
            return replace(self, simulate=True, demoted=True)
        return self


def _is_dir(path: Path) -> bool:
    st = path.lstat()
    return stat.S_ISDIR(st.st_mode)


def _entry_name(path: Path) -> str:
    return os.path.basename(os.path.normpath(str(path))) or str(path)


def walk(root) -> Iterator[DirectoryEntry]:
    """Yield ``root`` and everything below it, depth first in name order.

    A directory is yielded before its content and is listed only after the
    consumer has handled it; a directory that was moved away in the
    meantime is not descended into. Symbolic links are not followed.

    Raises:
        TraversalError: ``root`` cannot be stat'ed or listed.
    """
    root = Path(root)
    try:
        is_dir = _is_dir(root)
    except OSError as e:
        raise TraversalError(root, e) from e
    yield DirectoryEntry(root, _entry_name(root), is_dir)
    if not is_dir or not root.is_dir():
        return
    try:
        names = sorted(os.listdir(root))
    except OSError as e:
        raise TraversalError(root, e) from e

    # (directory, remaining names) for every directory being listed
    stack = [(root, iter(names))]
    while stack:
        directory, remaining = stack[-1]
        name = next(remaining, None)
        if name is None:
            stack.pop()
            continue
        path = directory / name
        try:
            is_dir = _is_dir(path)
        except OSError as e:
            logger.error("error walking path %s: %s", path, e)
            continue
        yield DirectoryEntry(path, name, is_dir)
        if not is_dir:
            continue
        if not path.is_dir():
            logger.debug("%s was moved, not descending into it", path)
            continue
        try:
            children = sorted(os.listdir(path))
        except OSError as e:
            logger.error("error walking path %s: %s", path, e)
            continue
        stack.append((path, iter(children)))


@dataclass
class RunCounters:
    processed: int = 0


@dataclass
class RunResult:
    processed: int
    totals: Counter = field(default_factory=Counter)  # OutcomeKind -> entries
    limit_reached: bool = False


class Reorganizer:
    """Walk ``config.source`` and relocate every dated entry."""

    def __init__(self, config: RunConfig, reporter: Optional[Reporter] = None, progress: bool = False):
        self.config = config
        self.reporter = reporter or Reporter()
        self.progress = progress
        self.counters = RunCounters()

    @property
    def limit_reached(self) -> bool:
        return not self.config.unlimited and self.counters.processed >= self.config.limit

    def process(self, entry: DirectoryEntry) -> Optional[MoveOutcome]:
        """Handle one entry and return its outcome.

        Returns ``None`` for the ``.`` and ``..`` entries. Filesystem
        errors are turned into a failed outcome and never raised.
        """
        if entry.name in SELF_AND_PARENT:
            return None

        date = self.config.matcher.match(entry.name)
        if not date.is_valid:
            outcome = MoveOutcome.skipped(entry.path)
            self.reporter.outcome(entry, outcome)
            return outcome

        dest_root = self.config.dest_root if self.config.dest_root is not None else Path()
        plan = plan_move(dest_root, date.year, date.month, date.day, entry.name)
        self.reporter.attempt(entry, plan)
        # counts planned entries, whatever happens to the move itself
        self.counters.processed += 1

        if self.config.dry_run:
            outcome = MoveOutcome.simulated(entry.path, plan.dest_path)
        else:
            outcome = self._move(entry.path, plan.target_dir, plan.dest_path)
        self.reporter.outcome(entry, outcome)
        return outcome

    def _move(self, source: Path, target_dir: Path, destination: Path) -> MoveOutcome:
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            os.rename(source, destination)
        except OSError as e:
            logger.debug("moving %s to %s failed: %s", source, destination, e)
            return MoveOutcome.failed(source, destination, e)
        return MoveOutcome.succeeded(source, destination)

    def run(self) -> RunResult:
        """Walk the source tree, stopping early once the limit is reached.

        Raises:
            TraversalError: the source root cannot be read.
        """
        logger.debug(
            "organizing %s into %s (matcher=%r, limit=%d, simulate=%s)",
            self.config.source, self.config.dest_root, self.config.matcher,
            self.config.limit, self.config.dry_run,
        )
        result = RunResult(processed=0)
        with closing(walk(self.config.source)) as entries, \
                tqdm(entries, disable=not self.progress, unit=" entries", leave=False) as bar:
            for entry in bar:
                outcome = self.process(entry)
                if outcome is not None:
                    result.totals[outcome.kind] += 1
                if self.limit_reached:
                    logger.info("limit of %d entries reached, stopping", self.config.limit)
                    result.limit_reached = True
                    break
        result.processed = self.counters.processed
        return result
