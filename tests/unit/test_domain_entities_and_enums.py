"""Tests for TaskEntity validation, completion timestamps, and TaskStatus."""

from datetime import timedelta

import pytest

from app.domain.entities.task import PRIORITY_MAX, TITLE_MAX_LENGTH, TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException
from app.shared.utils.datetime import utc_now


class TestTaskEntity:
    def test_defaults(self) -> None:
        task = TaskEntity(title="Write release notes")
        assert task.status is TaskStatus.TODO
        assert task.priority == 0
        assert task.description is None

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_rejected(self, title: str) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskEntity(title=title)
        assert exc_info.value.details == {"field": "title"}

    def test_title_too_long_rejected(self) -> None:
        with pytest.raises(ValidationException):
            TaskEntity(title="x" * (TITLE_MAX_LENGTH + 1))

    def test_status_string_coerced(self) -> None:
        assert TaskEntity(title="t", status="DONE").status is TaskStatus.DONE

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskEntity(title="t", status="BLOCKED")
        assert exc_info.value.details == {"field": "status"}

    def test_non_integer_priority_rejected(self) -> None:
        with pytest.raises(ValidationException):
            TaskEntity(title="t", priority="high")

    def test_priority_outside_column_range_rejected(self) -> None:
        TaskEntity(title="t", priority=PRIORITY_MAX)
        with pytest.raises(ValidationException):
            TaskEntity(title="t", priority=PRIORITY_MAX + 1)


class TestCompletedAt:
    def test_not_done_clears(self) -> None:
        now = utc_now()
        task = TaskEntity(title="t", status=TaskStatus.TODO)
        assert task.completed_at_after_save(TaskStatus.DONE, now, now) is None

    def test_entering_done_sets_now(self) -> None:
        now = utc_now()
        task = TaskEntity(title="t", status=TaskStatus.DONE)
        assert task.completed_at_after_save(None, None, now) == now
        assert task.completed_at_after_save(TaskStatus.IN_PROGRESS, None, now) == now

    def test_staying_done_keeps_previous(self) -> None:
        now = utc_now()
        earlier = now - timedelta(days=1)
        task = TaskEntity(title="t", status=TaskStatus.DONE)
        assert task.completed_at_after_save(TaskStatus.DONE, earlier, now) == earlier


class TestTaskStatus:
    def test_values(self) -> None:
        assert TaskStatus.values() == ["TODO", "IN_PROGRESS", "DONE", "CANCELLED"]

    def test_is_active(self) -> None:
        assert [s for s in TaskStatus if not s.is_active] == [TaskStatus.CANCELLED]

    def test_stats_keys(self) -> None:
        assert [s.stats_key for s in TaskStatus] == ["todo", "in_progress", "done", "cancelled"]
