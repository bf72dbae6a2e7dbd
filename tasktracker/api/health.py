"""Health check endpoints."""

from fastapi import APIRouter, Depends

from tasktracker.api.tasks import get_task_store
from tasktracker.services.task_store import TaskStore

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(store: TaskStore = Depends(get_task_store)) -> dict[str, str | int]:
    """Readiness probe, reporting the store's id policy and size."""
    return {"status": "ready", "id_policy": store.id_policy.value, "tasks": len(store)}
