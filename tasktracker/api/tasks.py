"""Task endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from tasktracker.models.tasks import Task, TaskCreateRequest
from tasktracker.services.id_policy import InvalidTaskIdError, TaskId
from tasktracker.services.task_store import TaskStore

router = APIRouter()

TASKS_COMPLETED = "Tasks marked as completed"
TASKS_DELETED = "Tasks deleted"
NO_TASKS_FOUND = "No tasks found"


def get_task_store(request: Request) -> TaskStore:
    """Get the task store owned by the running application."""
    return request.app.state.task_store


def _parse_id(store: TaskStore, raw: Any) -> TaskId:
    try:
        return store.parse_id(raw)
    except InvalidTaskIdError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc


@router.get("", response_model=list[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)) -> list[Task]:
    """List all tasks in insertion order."""
    return await run_in_threadpool(store.list_tasks)


@router.post("", response_model=Task | list[Task], status_code=status.HTTP_201_CREATED)
async def add_tasks(
    payload: TaskCreateRequest | list[TaskCreateRequest] = Body(...),
    store: TaskStore = Depends(get_task_store),
) -> Task | list[Task]:
    """Create tasks.

    A single object creates one task and returns it. A list creates every
    task atomically, preserving input order, and returns them as a list.
    """
    if isinstance(payload, TaskCreateRequest):
        created = await run_in_threadpool(store.add_batch, [payload.description])
        return created[0]
    descriptions = [item.description for item in payload]
    return await run_in_threadpool(store.add_batch, descriptions)


@router.post("/batch", response_model=list[Task], status_code=status.HTTP_201_CREATED)
async def add_tasks_batch(
    payload: list[TaskCreateRequest], store: TaskStore = Depends(get_task_store)
) -> list[Task]:
    """Create several tasks atomically. Alias of posting a list to the collection."""
    descriptions = [item.description for item in payload]
    return await run_in_threadpool(store.add_batch, descriptions)


# Batch routes are registered before the `/{task_id}` routes so the literal
# paths win over the path parameter.
@router.patch("/batch-complete", response_class=PlainTextResponse)
async def complete_tasks(
    ids: list[Any] = Body(...), store: TaskStore = Depends(get_task_store)
) -> str:
    """Mark every listed task completed."""
    task_ids = {_parse_id(store, raw) for raw in ids}
    updated = await run_in_threadpool(store.complete_batch, task_ids)
    return TASKS_COMPLETED if updated else NO_TASKS_FOUND


@router.delete("/batch-delete", response_class=PlainTextResponse)
async def delete_tasks(
    ids: list[Any] = Body(...), store: TaskStore = Depends(get_task_store)
) -> str:
    """Delete every listed task."""
    task_ids = {_parse_id(store, raw) for raw in ids}
    deleted = await run_in_threadpool(store.delete_batch, task_ids)
    return TASKS_DELETED if deleted else NO_TASKS_FOUND


@router.patch("/{task_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
async def complete_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> Response:
    """Mark one task completed."""
    parsed = _parse_id(store, task_id)
    found = await run_in_threadpool(store.complete, parsed)
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Task '{task_id}' not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> Response:
    """Delete one task."""
    parsed = _parse_id(store, task_id)
    found = await run_in_threadpool(store.delete, parsed)
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Task '{task_id}' not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
