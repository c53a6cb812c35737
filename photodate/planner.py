"""Compute where a dated entry goes under the destination root."""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MovePlan:
    target_dir_name: str
    target_dir: Path
    dest_path: Path


def target_dir_name(year: int, month: int, day: int) -> str:
    # wider values overflow the width, they are never truncated
    return f"{year:04d}_{month:02d}_{day:02d}"


def plan_move(dest_root: Path, year: int, month: int, day: int, base_name: str) -> MovePlan:
    """Return the ``dest_root/YYYY_MM_DD/base_name`` plan for one entry.

    Existing files at the destination are not checked for; the rename
    decides what happens on collision.
    """
    name = target_dir_name(year, month, day)
    target_dir = Path(dest_root) / name
    return MovePlan(target_dir_name=name, target_dir=target_dir, dest_path=target_dir / base_name)
