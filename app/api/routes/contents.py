from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_content_repository, get_user_id
from app.core.prompts import Pillar
from app.repositories.contents import ContentRepository
from app.schemas.store import ContentCreate, StoreResult

router = APIRouter()


@router.get("/")
async def list_contents(
    pillar: Optional[Pillar] = None,
    type: Optional[str] = None,
    user_id: str = Depends(get_user_id),
    repo: ContentRepository = Depends(get_content_repository),
) -> list[dict]:
    return await repo.find_all(
        user_id=user_id,
        pillar=pillar.value if pillar else None,
        type=type,
    )


@router.post("/", response_model=StoreResult, status_code=201)
async def save_content(
    data: ContentCreate,
    user_id: str = Depends(get_user_id),
    repo: ContentRepository = Depends(get_content_repository),
) -> StoreResult:
    return await repo.create(
        content=data.content,
        user_id=user_id,
        pillar=data.pillar,
        type=data.type,
        title=data.title,
        metadata=data.metadata,
    )
