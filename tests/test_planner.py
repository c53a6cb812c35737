from pathlib import Path

import pytest

from photodate.planner import plan_move, target_dir_name


@pytest.mark.parametrize("ymd, expected", [
    ((2021, 7, 4), "2021_07_04"),
    ((2021, 12, 31), "2021_12_31"),
    ((21, 7, 4), "0021_07_04"),
    ((12345, 7, 4), "12345_07_04"),
    ((2021, 13, 123), "2021_13_123"),
])
def test_target_dir_name_is_zero_padded(ymd, expected):
    assert target_dir_name(*ymd) == expected


def test_plan_move_joins_root_dir_and_name():
    plan = plan_move(Path("/out"), 2021, 7, 4, "IMG_2021-07-04_party.jpg")
    assert plan.target_dir_name == "2021_07_04"
    assert plan.target_dir == Path("/out/2021_07_04")
    assert plan.dest_path == Path("/out/2021_07_04/IMG_2021-07-04_party.jpg")


def test_plan_move_accepts_string_root():
    plan = plan_move("out", 2021, 7, 4, "a.jpg")
    assert plan.dest_path == Path("out") / "2021_07_04" / "a.jpg"
