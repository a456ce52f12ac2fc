from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_goal_repository, get_user_id
from app.core.prompts import Pillar
from app.repositories.goals import GoalRepository
from app.schemas.store import GoalCreate, GoalStatus, GoalStatusUpdate, StoreResult

router = APIRouter()


@router.get("/")
async def list_goals(
    status: Optional[GoalStatus] = None,
    pillar: Optional[Pillar] = None,
    user_id: str = Depends(get_user_id),
    repo: GoalRepository = Depends(get_goal_repository),
) -> list[dict]:
    return await repo.find_all(
        user_id=user_id,
        status=status,
        pillar=pillar.value if pillar else None,
    )


@router.post("/", response_model=StoreResult, status_code=201)
async def create_goal(
    data: GoalCreate,
    user_id: str = Depends(get_user_id),
    repo: GoalRepository = Depends(get_goal_repository),
) -> StoreResult:
    return await repo.create(
        title=data.title,
        user_id=user_id,
        description=data.description,
        pillar=data.pillar,
        target_date=data.target_date,
    )


@router.patch("/{goal_id}/status", response_model=StoreResult)
async def update_goal_status(
    goal_id: str,
    data: GoalStatusUpdate,
    user_id: str = Depends(get_user_id),
    repo: GoalRepository = Depends(get_goal_repository),
) -> StoreResult:
    return await repo.update_status(goal_id, data.status, user_id=user_id)
