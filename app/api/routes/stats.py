from fastapi import APIRouter, Depends

from app.api.deps import get_stats_repository, get_user_id
from app.repositories.stats import StatsRepository
from app.schemas.store import UserStats

router = APIRouter()


@router.get("/", response_model=UserStats, response_model_by_alias=True)
async def get_stats(
    user_id: str = Depends(get_user_id),
    repo: StatsRepository = Depends(get_stats_repository),
) -> UserStats:
    """
    Estatísticas do dashboard

    Sem Supabase devolve dados simulados; com erro no banco devolve zeros.
    """
    return await repo.get_stats(user_id)
