"""Tests for the leaderboard ranking engine."""

import copy
import random
from datetime import datetime

import pytest

from progress_point.services.leaderboard.ranking_engine import (
    RankingEngine, compute_leaderboard, attendance_percent, total_marks
)
from tests.helpers import make_student


def full_marks(efforts=0, presentation=0, assessment=0, assignment=0):
    return {"efforts": efforts, "presentation": presentation, "assessment": assessment, "assignment": assignment}


class TestComputeLeaderboard:

    def test_empty_input_returns_empty_list(self):
        assert compute_leaderboard([]) == []

    def test_none_input_returns_empty_list(self):
        assert compute_leaderboard(None) == []

    def test_one_entry_per_student(self):
        students = [make_student(f"R{i}", full_marks(i, i, i, i), ["Present"]) for i in range(25)]

        leaderboard = compute_leaderboard(students)

        assert len(leaderboard) == len(students)
        assert sorted(e["regNo"] for e in leaderboard) == sorted(s["regNo"] for s in students)

    def test_total_is_sum_of_four_components(self):
        student = make_student("A", full_marks(10, 20, 30, 5))

        entry = compute_leaderboard([student])[0]

        assert entry["total"] == 65
        assert (entry["efforts"], entry["presentation"], entry["assessment"], entry["assignment"]) == (10, 20, 30, 5)

    def test_missing_and_non_numeric_components_count_as_zero(self):
        student = make_student("A", {"efforts": 12, "presentation": None, "assessment": "abc"})

        entry = compute_leaderboard([student])[0]

        assert entry["total"] == 12
        assert entry["presentation"] == 0
        assert entry["assessment"] == 0
        assert entry["assignment"] == 0

    def test_numeric_strings_are_parsed(self):
        entry = compute_leaderboard([make_student("A", {"efforts": "12", "presentation": "7.5"})])[0]

        assert entry["efforts"] == 12
        assert entry["total"] == 19.5

    def test_missing_marks_object(self):
        student = {"regNo": "A", "name": "No Marks"}

        entry = compute_leaderboard([student])[0]

        assert entry["total"] == 0
        assert entry["attendancePercent"] == 0.0
        assert entry["rank"] == 1

    def test_empty_attendance_gives_zero_percent(self):
        entry = compute_leaderboard([make_student("A", full_marks(1), [])])[0]
        assert entry["attendancePercent"] == 0.0

    def test_on_duty_counts_as_present(self):
        entry = compute_leaderboard([make_student("A", statuses=["On-Duty", "Absent"])])[0]
        assert entry["attendancePercent"] == 50.0

    def test_attendance_rounded_to_two_places(self):
        entry = compute_leaderboard([make_student("A", statuses=["Present", "Absent", "Absent"])])[0]
        assert entry["attendancePercent"] == 33.33

    def test_tie_on_total_broken_by_attendance(self):
        students = [
            make_student("A", full_marks(10, 10, 10, 10), ["Present"]),
            make_student("B", full_marks(40, 0, 0, 0), ["Absent"]),
        ]

        leaderboard = compute_leaderboard(students)

        assert [(e["regNo"], e["total"], e["rank"]) for e in leaderboard] == [("A", 40, 1), ("B", 40, 2)]
        assert leaderboard[0]["attendancePercent"] == 100.0
        assert leaderboard[1]["attendancePercent"] == 0.0

    def test_full_ties_ordered_by_reg_no_with_distinct_ranks(self):
        students = [
            make_student("C", full_marks(5), ["Present"]),
            make_student("A", full_marks(5), ["Present"]),
            make_student("B", full_marks(5), ["Present"]),
        ]

        leaderboard = compute_leaderboard(students)

        assert [e["regNo"] for e in leaderboard] == ["A", "B", "C"]
        assert [e["rank"] for e in leaderboard] == [1, 2, 3]

    def test_identical_keys_keep_input_order(self):
        students = [
            make_student("X", full_marks(5), name="First"),
            make_student("X", full_marks(5), name="Second"),
        ]

        leaderboard = compute_leaderboard(students)

        assert [e["name"] for e in leaderboard] == ["First", "Second"]

    def test_input_is_not_mutated(self):
        students = [
            make_student("A", {"efforts": "3"}, ["Present"]),
            make_student("B", full_marks(9), ["Absent", "On-Duty"]),
        ]
        snapshot = copy.deepcopy(students)

        compute_leaderboard(students)

        assert students == snapshot

    def test_idempotent(self):
        rng = random.Random(7)
        students = [
            make_student(f"R{i:03d}", full_marks(rng.randint(0, 3), rng.randint(0, 3)),
                         [rng.choice(["Present", "Absent", "On-Duty"]) for _ in range(rng.randint(0, 4))])
            for i in range(40)
        ]

        assert compute_leaderboard(students) == compute_leaderboard(students)

    def test_monotonic_ordering(self):
        rng = random.Random(11)
        students = [
            make_student(f"R{i:03d}", full_marks(rng.randint(0, 5), rng.randint(0, 5)),
                         [rng.choice(["Present", "Absent", "On-Duty"]) for _ in range(rng.randint(0, 6))])
            for i in range(60)
        ]

        leaderboard = compute_leaderboard(students)

        for a, b in zip(leaderboard, leaderboard[1:]):
            assert a["rank"] < b["rank"]
            assert a["total"] > b["total"] or (
                a["total"] == b["total"] and a["attendancePercent"] >= b["attendancePercent"]
            )

    def test_display_fields_carried_through(self):
        updated = datetime(2024, 3, 1, 10, 30)
        student = make_student(
            "A", full_marks(1), name="Asha", department="ECE",
            personalEmail="asha@example.com", collegeEmail="asha@college.edu",
            marksLastUpdated=updated, batchName="2024-A", year=2024
        )

        entry = compute_leaderboard([student])[0]

        assert entry["name"] == "Asha"
        assert entry["department"] == "ECE"
        assert entry["personalEmail"] == "asha@example.com"
        assert entry["collegeEmail"] == "asha@college.edu"
        assert entry["marksLastUpdated"] == updated
        assert entry["batchName"] == "2024-A"
        assert entry["year"] == 2024

    def test_malformed_records_never_raise(self):
        students = [
            {},
            {"regNo": None, "marks": "not a dict", "attendance": "nope"},
            {"regNo": 42, "marks": {"efforts": float("nan")}, "attendance": [None, "x", {"status": "Present"}]},
            "not even a record",
        ]

        leaderboard = RankingEngine.compute_leaderboard(students)

        assert len(leaderboard) == 4
        by_reg = {e["regNo"]: e for e in leaderboard}
        assert by_reg["42"]["total"] == 0
        assert by_reg["42"]["attendancePercent"] == 100.0

    def test_non_string_statuses_count_as_absent(self):
        student = {
            "regNo": "A",
            "attendance": [{"status": ["Present"]}, {"status": {}}, {"status": "Present"}, {"status": 1}],
        }

        leaderboard = RankingEngine.compute_leaderboard([student])

        assert leaderboard[0]["attendancePercent"] == 25.0


class TestHelpers:

    @pytest.mark.parametrize("statuses, expected", [
        ([], 0.0),
        (["Present"], 100.0),
        (["Absent"], 0.0),
        (["Present", "Present", "Absent"], 66.67),
        (["On-Duty", "On-Duty", "Present", "Absent"], 75.0),
    ])
    def test_attendance_percent(self, statuses, expected):
        assert attendance_percent([{"status": s} for s in statuses]) == expected

    def test_total_marks(self):
        assert total_marks(full_marks(1, 2, 3, 4)) == 10
