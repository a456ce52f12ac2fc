"""
Estatísticas do dashboard

Conta tarefas concluídas, conteúdos criados e metas ativas no Supabase.
"""

from loguru import logger

from app.repositories.base import SupabaseRepository
from app.repositories.users import UserRepository
from app.schemas.store import TEST_USER_ID, UserStats

# Estimativa de horas economizadas por tarefa concluída
HOURS_PER_COMPLETED_TASK = 2

# Dados simulados quando o Supabase não está configurado
SIMULATED_STATS = UserStats(
    tasks_completed=12,
    contents_created=8,
    active_goals=3,
    hours_economized=24,
)


class StatsRepository(SupabaseRepository):
    """
    Repositório de estatísticas

    Example:
        >>> repo = StatsRepository(get_supabase_client())
        >>> stats = await repo.get_stats(user_id)
        >>> stats.hours_economized
        12
    """

    def __init__(self, client=None):
        super().__init__(client)
        self.users = UserRepository(client)

    def _count(self, table: str, **filters) -> int:
        query = self.client.table(table).select("*", count="exact", head=True)
        for column, value in filters.items():
            query = query.eq(column, value)
        return query.execute().count or 0

    async def get_stats(self, user_id: str = TEST_USER_ID) -> UserStats:
        """
        Estatísticas do usuário

        Returns:
            UserStats: dados simulados sem Supabase, zeros em caso de erro
        """
        if not self.configured:
            return SIMULATED_STATS.model_copy()

        try:
            await self.users.ensure_exists(user_id)

            tasks_completed = self._count("tasks", user_id=user_id, status="completed")
            contents_created = self._count("contents", user_id=user_id)
            active_goals = self._count("goals", user_id=user_id, status="active")

            logger.debug(
                f"Estatísticas de {user_id}: tarefas={tasks_completed}, "
                f"conteúdos={contents_created}, metas={active_goals}"
            )

            return UserStats(
                tasks_completed=tasks_completed,
                contents_created=contents_created,
                active_goals=active_goals,
                hours_economized=tasks_completed * HOURS_PER_COMPLETED_TASK,
            )

        except Exception as e:
            logger.error(f"Erro ao obter estatísticas: {e}")
            return UserStats()
