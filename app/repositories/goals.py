"""
Acesso à tabela goals
"""

from datetime import date
from typing import Optional

from loguru import logger

from app.repositories.base import SupabaseRepository, compact, now_iso
from app.repositories.users import UserRepository
from app.schemas.store import TEST_USER_ID, GoalStatus, StoreResult


class GoalRepository(SupabaseRepository):
    """Repositório de metas"""

    def __init__(self, client=None):
        super().__init__(client)
        self.users = UserRepository(client)

    async def create(
        self,
        title: str,
        user_id: str = TEST_USER_ID,
        description: Optional[str] = None,
        pillar: Optional[str] = None,
        target_date: Optional[date] = None,
    ) -> StoreResult:
        """
        Cria uma meta (status inicial definido pelo banco: active)

        Returns:
            StoreResult: linha criada ou erro
        """
        if not self.configured:
            return StoreResult()

        try:
            await self.users.ensure_exists(user_id)

            response = (
                self.client.table("goals")
                .insert(
                    compact(
                        {
                            "user_id": user_id,
                            "title": title,
                            "description": description,
                            "pillar": pillar,
                            "target_date": target_date.isoformat() if target_date else None,
                        }
                    )
                )
                .execute()
            )
            goal = response.data[0]
            logger.info(f"Meta criada: {goal.get('id')}")
            return StoreResult(data=goal)

        except Exception as e:
            logger.error(f"Erro ao criar meta: {e}")
            return StoreResult(error=str(e))

    async def update_status(
        self, goal_id: str, status: GoalStatus, user_id: str = TEST_USER_ID
    ) -> StoreResult:
        if not self.configured:
            return StoreResult()

        try:
            timestamp = now_iso()
            update_data = {"status": status, "updated_at": timestamp}
            if status == "completed":
                update_data["completed_at"] = timestamp

            response = (
                self.client.table("goals")
                .update(update_data)
                .eq("id", goal_id)
                .eq("user_id", user_id)
                .execute()
            )
            if not response.data:
                return StoreResult(error=f"Meta não encontrada: {goal_id}")

            logger.info(f"Meta {goal_id} -> {status}")
            return StoreResult(data=response.data[0])

        except Exception as e:
            logger.error(f"Erro ao atualizar meta: {e}")
            return StoreResult(error=str(e))

    async def find_all(
        self,
        user_id: str = TEST_USER_ID,
        status: Optional[GoalStatus] = None,
        pillar: Optional[str] = None,
    ) -> list[dict]:
        """Metas do usuário, mais recentes primeiro"""
        if not self.configured:
            return []

        try:
            query = (
                self.client.table("goals")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
            )
            if status:
                query = query.eq("status", status)
            if pillar:
                query = query.eq("pillar", pillar)

            return query.execute().data or []

        except Exception as e:
            logger.error(f"Erro ao obter metas: {e}")
            return []
