"""Records passed between the walk, the reorganizer and the reporter."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DirectoryEntry:
    """One node visited while walking the source tree."""
    path: Path
    name: str
    is_dir: bool


class OutcomeKind(str, Enum):
    SKIPPED = "skipped"
    SIMULATED = "simulated"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class MoveOutcome:
    kind: OutcomeKind
    source: Path
    destination: Optional[Path] = None
    reason: str = ""  # e.g. "no match"
    error: Optional[OSError] = None

    @classmethod
    def skipped(cls, source: Path, reason: str = "no match") -> "MoveOutcome":
        return cls(OutcomeKind.SKIPPED, source, reason=reason)

    @classmethod
    def simulated(cls, source: Path, destination: Path) -> "MoveOutcome":
        return cls(OutcomeKind.SIMULATED, source, destination)

    @classmethod
    def succeeded(cls, source: Path, destination: Path) -> "MoveOutcome":
        return cls(OutcomeKind.SUCCEEDED, source, destination)

    @classmethod
    def failed(cls, source: Path, destination: Path, error: OSError) -> "MoveOutcome":
        return cls(OutcomeKind.FAILED, source, destination, error=error)
