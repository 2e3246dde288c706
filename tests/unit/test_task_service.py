"""TaskService tests against the in-memory repository."""

from datetime import timedelta

import pytest

from app.application.dtos.task import TaskResult
from app.application.services.task_service import TaskService
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException
from app.infrastructure.memory import InMemoryTaskRepository, InMemoryTaskStore
from app.shared.utils.datetime import utc_now


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def service(store: InMemoryTaskStore) -> TaskService:
    return TaskService(InMemoryTaskRepository(store))


def _put(store: InMemoryTaskStore, task_id: str, status: TaskStatus, priority: int, age_s: int) -> None:
    created = utc_now() - timedelta(seconds=age_s)
    store.tasks[task_id] = TaskResult(
        id=task_id,
        title=task_id,
        description=None,
        status=status,
        priority=priority,
        created_at=created,
        updated_at=created,
    )


class TestSave:
    async def test_save_assigns_id_and_created_at(self, service: TaskService) -> None:
        created = await service.save(TaskEntity(title="Write release notes", priority=5))
        assert created.id
        assert created.created_at is not None
        assert created.status is TaskStatus.TODO
        assert await service.find_by_id(created.id) == created

    async def test_save_rejects_blank_title(self, service: TaskService, store: InMemoryTaskStore) -> None:
        task = TaskEntity(title="ok")
        task.title = " "
        with pytest.raises(ValidationException):
            await service.save(task)
        assert store.tasks == {}


class TestUpdate:
    async def test_update_missing_returns_none(self, service: TaskService) -> None:
        assert await service.update("missing", TaskEntity(title="x")) is None

    async def test_update_is_full_replace(self, service: TaskService) -> None:
        created = await service.save(
            TaskEntity(title="t", description="keep?", status=TaskStatus.IN_PROGRESS, priority=8)
        )
        updated = await service.update(created.id, TaskEntity(title="t", status=TaskStatus.DONE))
        assert updated is not None
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.description is None
        assert updated.priority == 0
        assert updated.status is TaskStatus.DONE
        assert updated.completed_at is not None


class TestDelete:
    async def test_delete_existing_returns_true(self, service: TaskService) -> None:
        created = await service.save(TaskEntity(title="x"))
        assert await service.delete(created.id) is True
        assert await service.find_by_id(created.id) is None

    async def test_delete_missing_returns_false(self, service: TaskService) -> None:
        assert await service.delete("missing") is False


class TestQueries:
    async def test_active_excludes_cancelled_and_orders(self, service: TaskService, store: InMemoryTaskStore) -> None:
        _put(store, "old5", TaskStatus.TODO, 5, age_s=60)
        _put(store, "new5", TaskStatus.DONE, 5, age_s=1)
        _put(store, "top", TaskStatus.IN_PROGRESS, 9, age_s=3600)
        _put(store, "gone", TaskStatus.CANCELLED, 99, age_s=1)
        active = await service.find_active_tasks_ordered_by_priority()
        assert [t.id for t in active] == ["top", "new5", "old5"]

    async def test_find_by_status(self, service: TaskService, store: InMemoryTaskStore) -> None:
        _put(store, "a", TaskStatus.TODO, 1, age_s=10)
        _put(store, "b", TaskStatus.TODO, 1, age_s=5)
        _put(store, "c", TaskStatus.DONE, 7, age_s=5)
        todo = await service.find_by_status(TaskStatus.TODO)
        assert [t.id for t in todo] == ["b", "a"]

    async def test_find_all_in_insertion_order(self, service: TaskService) -> None:
        a = await service.save(TaskEntity(title="a"))
        b = await service.save(TaskEntity(title="b"))
        assert [t.id for t in await service.find_all()] == [a.id, b.id]


class TestStatistics:
    async def test_empty(self, service: TaskService) -> None:
        stats = await service.get_task_statistics()
        assert stats.as_dict() == {"total": 0, "todo": 0, "in_progress": 0, "done": 0, "cancelled": 0}

    async def test_total_is_sum_of_statuses(self, service: TaskService) -> None:
        for status in (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE, TaskStatus.DONE, TaskStatus.CANCELLED):
            await service.save(TaskEntity(title="t", status=status))
        stats = await service.get_task_statistics()
        assert stats.total == 5
        assert (stats.todo, stats.in_progress, stats.done, stats.cancelled) == (1, 1, 2, 1)
        assert stats.total == stats.todo + stats.in_progress + stats.done + stats.cancelled

    async def test_status_change_moves_counts(self, service: TaskService) -> None:
        created = await service.save(TaskEntity(title="Write release notes", priority=5))
        before = await service.get_task_statistics()
        await service.update(created.id, TaskEntity(title="Write release notes", status=TaskStatus.DONE, priority=5))
        after = await service.get_task_statistics()
        assert after.done == before.done + 1
        assert after.todo == before.todo - 1
