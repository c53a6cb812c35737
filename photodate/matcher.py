"""Extract dates from file names with a user supplied regular expression.

The pattern is compiled once per run by :func:`compile_pattern`. Each
entry name is then matched with :func:`match_captures` and the year,
month and day capture groups (1-based positions chosen by the user) are
decoded by :func:`extract_date`.

No calendar validation is done: any strictly positive integers are
accepted, so the pattern is expected to capture plausible values only.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import PatternError

logger = logging.getLogger(__name__)


def compile_pattern(text: Optional[str]) -> Optional[re.Pattern]:
    """Compile ``text`` or return ``None`` when no pattern was given.

    Raises:
        PatternError: ``text`` is not a valid regular expression.
    """
    if not text:
        return None
    try:
        return re.compile(text)
    except re.error as e:
        raise PatternError(text, str(e)) from e


def match_captures(pattern: re.Pattern, name: str) -> Tuple[Optional[str], ...]:
    """Return ``(whole_match, group1, group2, ...)`` or ``()`` on no match.

    The pattern is searched anywhere in ``name``. Groups that did not take
    part in the match are ``None``.
    """
    m = pattern.search(name)
    if not m:
        return ()
    return (m.group(0),) + m.groups()


@dataclass(frozen=True)
class DateMatch:
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return all(v is not None and v > 0 for v in (self.year, self.month, self.day))


NO_MATCH = DateMatch()

# optionally signed ASCII decimal, nothing else
_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_field(field: str, value: Optional[str], pattern_text: str) -> Optional[int]:
    try:
        if value is None or not _INTEGER_RE.fullmatch(value):
            raise ValueError(f"invalid integer {value!r}")
        return int(value, 10)
    except ValueError as e:
        logger.error("error parsing %s: invalid regexp? (regexp=%r, error=%s)", field, pattern_text, e)
        return None


def extract_date(
    captures: Sequence[Optional[str]],
    year_index: int,
    month_index: int,
    day_index: int,
    pattern_text: str = "",
) -> DateMatch:
    """Decode year, month and day from ``captures``.

    Args:
        captures: Sequence as returned by :func:`match_captures`.
        year_index: 1-based capture group holding the year.
        month_index: 1-based capture group holding the month.
        day_index: 1-based capture group holding the day.
        pattern_text: Pattern source, only used in log messages.

    Returns:
        :data:`NO_MATCH` when an index is out of range (silently). Otherwise
        a :class:`DateMatch` whose unparsable fields are ``None``; parse
        failures are logged and never raised.
    """
    n = len(captures)
    if not all(0 < i < n for i in (year_index, month_index, day_index)):
        return NO_MATCH
    return DateMatch(
        year=_parse_field("year", captures[year_index], pattern_text),
        month=_parse_field("month", captures[month_index], pattern_text),
        day=_parse_field("day", captures[day_index], pattern_text),
    )


class DateMatcher:
    """Compiled pattern plus the positions of the date groups.

    A matcher built without a pattern is *disabled*: every name is
    reported as unmatched.
    """

    def __init__(self, pattern: Optional[re.Pattern] = None, year: int = 0, month: int = 0, day: int = 0):
        self.pattern = pattern
        self.year_index = year
        self.month_index = month
        self.day_index = day

    @classmethod
    def from_text(cls, text: Optional[str], year: int = 0, month: int = 0, day: int = 0) -> "DateMatcher":
        return cls(compile_pattern(text), year=year, month=month, day=day)

    @property
    def disabled(self) -> bool:
        return self.pattern is None

    def match(self, name: str) -> DateMatch:
        if self.disabled:
            return NO_MATCH
        return extract_date(
            match_captures(self.pattern, name),
            self.year_index,
            self.month_index,
            self.day_index,
            pattern_text=self.pattern.pattern,
        )

    def __repr__(self):
        pattern = self.pattern.pattern if self.pattern is not None else None
        return (
            f"DateMatcher(pattern={pattern!r}, year={self.year_index}, "
            f"month={self.month_index}, day={self.day_index})"
        )


MATCHER_DISABLED = DateMatcher()
