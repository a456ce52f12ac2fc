from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_task_repository, get_user_id
from app.core.prompts import Pillar
from app.repositories.tasks import TaskRepository
from app.schemas.store import StoreResult, TaskCreate, TaskStatus, TaskStatusUpdate

router = APIRouter()


@router.get("/")
async def list_tasks(
    status: Optional[TaskStatus] = None,
    pillar: Optional[Pillar] = None,
    user_id: str = Depends(get_user_id),
    repo: TaskRepository = Depends(get_task_repository),
) -> list[dict]:
    return await repo.find_all(
        user_id=user_id,
        status=status,
        pillar=pillar.value if pillar else None,
    )


@router.post("/", response_model=StoreResult, status_code=201)
async def create_task(
    data: TaskCreate,
    user_id: str = Depends(get_user_id),
    repo: TaskRepository = Depends(get_task_repository),
) -> StoreResult:
    return await repo.create(
        title=data.title,
        user_id=user_id,
        description=data.description,
        pillar=data.pillar,
        priority=data.priority,
        due_date=data.due_date,
        goal_id=data.goal_id,
    )


@router.patch("/{task_id}/status", response_model=StoreResult)
async def update_task_status(
    task_id: str,
    data: TaskStatusUpdate,
    user_id: str = Depends(get_user_id),
    repo: TaskRepository = Depends(get_task_repository),
) -> StoreResult:
    return await repo.update_status(task_id, data.status, user_id=user_id)
