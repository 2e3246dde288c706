"""Tasks API: list, filter, statistics, get, create, replace, delete.

Not-found is answered with an empty-body 404; validation failures are
answered with 400 by the registered exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_task_service, get_task_service_for_write
from app.application.services.task_service import TaskService
from app.domain.enums import TaskStatus
from app.schemas.task import TaskRequest, TaskResponse, TaskStatsResponse

router = APIRouter()

ReadService = Annotated[TaskService, Depends(get_task_service)]
WriteService = Annotated[TaskService, Depends(get_task_service_for_write)]


def _not_found() -> Response:
    return Response(status_code=404)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(service: ReadService):
    """List all tasks (unbounded)."""
    tasks = await service.find_all()
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/active", response_model=list[TaskResponse])
async def list_active_tasks(service: ReadService):
    """List non-cancelled tasks, highest priority first, newest first within a priority."""
    tasks = await service.find_active_tasks_ordered_by_priority()
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/stats", response_model=TaskStatsResponse)
async def get_task_stats(service: ReadService):
    """Return task counts: total, todo, in_progress, done, cancelled."""
    stats = await service.get_task_statistics()
    return TaskStatsResponse.model_validate(stats)


@router.get("/status/{status}", response_model=list[TaskResponse])
async def list_tasks_by_status(status: TaskStatus, service: ReadService):
    """List tasks with status, highest priority first."""
    tasks = await service.find_by_status(status)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse, responses={404: {"description": "Task not found"}})
async def get_task(task_id: str, service: ReadService):
    """Get task by id."""
    task = await service.find_by_id(task_id)
    if task is None:
        return _not_found()
    return TaskResponse.model_validate(task)


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(body: TaskRequest, service: WriteService):
    """Create a task. Status defaults to TODO; id and timestamps are assigned."""
    created = await service.save(body.to_entity())
    return TaskResponse.model_validate(created)


@router.put("/{task_id}", response_model=TaskResponse, responses={404: {"description": "Task not found"}})
async def update_task(task_id: str, body: TaskRequest, service: WriteService):
    """Replace title, description, status and priority of a task (full replace)."""
    updated = await service.update(task_id, body.to_entity())
    if updated is None:
        return _not_found()
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204, responses={404: {"description": "Task not found"}})
async def delete_task(task_id: str, service: WriteService):
    """Delete a task permanently."""
    if not await service.delete(task_id):
        return _not_found()
    return Response(status_code=204)
