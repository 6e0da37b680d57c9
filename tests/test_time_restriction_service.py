"""Tests for time-restriction administration and access checks."""

from datetime import datetime

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from progress_point.exceptions.exceptions import NotFoundError, TimeRestrictedError, ValidationError
from progress_point.services.admin.time_restriction_service import TimeRestrictionService

MONDAY_10AM = datetime(2024, 1, 1, 10, 0)
TUESDAY_10AM = datetime(2024, 1, 2, 10, 0)

MONDAY_ONLY = {
    "type": "attendance",
    "isEnabled": True,
    "startTime": "09:00",
    "endTime": "17:00",
    "timezone": "Asia/Kolkata",
    "allowedDays": ["Monday"],
}


@pytest.fixture
def service(restriction_repo):
    return TimeRestrictionService()


class TestSetRestriction:

    def test_upserts_with_defaults(self, service, restriction_repo):
        restriction_repo.upsert.side_effect = lambda restriction_type, doc: doc

        result = service.set_restriction(
            {"type": "marks", "startTime": "09:00", "endTime": "12:30"}, "Asha"
        )

        restriction_type, stored = restriction_repo.upsert.call_args.args
        assert restriction_type == "marks"
        assert stored["isEnabled"] is False
        assert stored["timezone"] == "Asia/Kolkata"
        assert stored["allowWeekends"] is True
        assert stored["allowedDays"] == [
            "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
        ]
        assert stored["lastUpdatedBy"] == "Asha"
        assert result["message"] == "Time restriction for marks disabled successfully"
        assert isinstance(result["restriction"]["lastUpdatedAt"], str)

    def test_path_type_overrides_body(self, service, restriction_repo):
        restriction_repo.upsert.return_value = {"type": "attendance"}

        service.set_restriction(
            {"type": "marks", "isEnabled": True, "startTime": "09:00", "endTime": "10:00"},
            restriction_type="attendance"
        )

        assert restriction_repo.upsert.call_args.args[0] == "attendance"

    def test_allowed_days_kept_in_week_order(self, service, restriction_repo):
        service.set_restriction({
            "type": "attendance", "startTime": "09:00", "endTime": "10:00",
            "allowedDays": ["Friday", "Monday"]
        })

        assert restriction_repo.upsert.call_args.args[1]["allowedDays"] == ["Monday", "Friday"]

    @pytest.mark.parametrize("data, message", [
        ({"startTime": "09:00", "endTime": "10:00"}, "Missing required fields: type"),
        ({"type": "exams", "startTime": "09:00", "endTime": "10:00"}, "Type must be one of"),
        ({"type": "marks", "startTime": "9am", "endTime": "10:00"}, "HH:MM"),
        ({"type": "marks", "startTime": "10:00", "endTime": "10:00"}, "End time must be after start time"),
        ({"type": "marks", "startTime": "09:00", "endTime": "10:00", "allowedDays": ["Funday"]}, "Invalid weekday"),
    ])
    def test_rejects_invalid_input(self, service, restriction_repo, data, message):
        with pytest.raises(ValidationError, match=message):
            service.set_restriction(data)
        restriction_repo.upsert.assert_not_called()


class TestReadAndDelete:

    def test_get_missing_raises(self, service, restriction_repo):
        with pytest.raises(NotFoundError):
            service.get_restriction("marks")

    def test_get_all(self, service, restriction_repo):
        restriction_repo.find_all.return_value = [MONDAY_ONLY]
        assert service.get_all_restrictions() == {"restrictions": [MONDAY_ONLY]}

    def test_delete_missing_raises(self, service, restriction_repo):
        restriction_repo.delete.return_value = False
        with pytest.raises(NotFoundError):
            service.delete_restriction("marks")

    def test_delete(self, service, restriction_repo):
        restriction_repo.delete.return_value = True
        result = service.delete_restriction("marks")
        assert result["message"] == "Time restriction for marks deleted successfully"


class TestAccess:

    def test_no_restriction_allows(self, service, restriction_repo):
        assert service.is_time_allowed("attendance", TUESDAY_10AM)["allowed"] is True

    def test_disabled_restriction_allows(self, service, restriction_repo):
        restriction_repo.find_by_type.return_value = {**MONDAY_ONLY, "isEnabled": False}
        assert service.is_time_allowed("attendance", TUESDAY_10AM)["allowed"] is True

    def test_closed_day_blocks(self, service, restriction_repo):
        restriction_repo.find_by_type.return_value = MONDAY_ONLY

        result = service.is_time_allowed("attendance", TUESDAY_10AM)

        assert result == {"allowed": False, "message": "attendance is not allowed on Tuesday"}

    def test_open_window_allows(self, service, restriction_repo):
        restriction_repo.find_by_type.return_value = MONDAY_ONLY
        assert service.is_time_allowed("attendance", MONDAY_10AM)["allowed"] is True

    def test_database_error_fails_open(self, service, restriction_repo, caplog):
        restriction_repo.find_by_type.side_effect = ServerSelectionTimeoutError("no servers")

        assert service.is_time_allowed("attendance", TUESDAY_10AM)["allowed"] is True
        assert "allowing" in caplog.text

    def test_malformed_restriction_fails_open(self, service, restriction_repo, caplog):
        restriction_repo.find_by_type.return_value = {**MONDAY_ONLY, "startTime": "nine"}

        result = service.is_time_allowed("attendance", TUESDAY_10AM)

        assert result == {"allowed": True, "message": "Error checking restrictions"}
        assert "Malformed attendance time restriction" in caplog.text

    def test_ensure_allowed_raises_when_closed(self, service, restriction_repo):
        restriction_repo.find_by_type.return_value = MONDAY_ONLY
        with pytest.raises(TimeRestrictedError, match="not allowed on Tuesday"):
            service.ensure_allowed("attendance", TUESDAY_10AM)

    def test_check_access_includes_window(self, service, restriction_repo):
        restriction_repo.find_by_type.return_value = MONDAY_ONLY

        result = service.check_access("attendance", MONDAY_10AM)

        assert result["allowed"] is True
        assert result["restriction"] == {
            "startTime": "09:00", "endTime": "17:00", "allowedDays": ["Monday"]
        }

    def test_check_access_without_restriction(self, service, restriction_repo):
        result = service.check_access("marks", MONDAY_10AM)
        assert result == {"allowed": True, "message": "No time restrictions in place"}
