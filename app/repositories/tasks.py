"""
Acesso à tabela tasks
"""

from datetime import date
from typing import Optional

from loguru import logger

from app.repositories.base import SupabaseRepository, compact, now_iso
from app.repositories.users import UserRepository
from app.schemas.store import TEST_USER_ID, StoreResult, TaskPriority, TaskStatus


class TaskRepository(SupabaseRepository):
    """
    Repositório de tarefas

    Example:
        >>> repo = TaskRepository(get_supabase_client())
        >>> result = await repo.create(title="Revisar roteiro", pillar="conteudo")
        >>> await repo.update_status(result.data["id"], "completed")
    """

    def __init__(self, client=None):
        super().__init__(client)
        self.users = UserRepository(client)

    async def create(
        self,
        title: str,
        user_id: str = TEST_USER_ID,
        description: Optional[str] = None,
        pillar: Optional[str] = None,
        priority: TaskPriority = "medium",
        due_date: Optional[date] = None,
        goal_id: Optional[str] = None,
    ) -> StoreResult:
        """
        Cria uma tarefa

        Args:
            title: título da tarefa
            user_id: dono da tarefa
            description: descrição (opcional)
            pillar: pilar (opcional)
            priority: low, medium ou high
            due_date: prazo (opcional)
            goal_id: meta vinculada (opcional)

        Returns:
            StoreResult: linha criada ou erro
        """
        if not self.configured:
            return StoreResult()

        try:
            await self.users.ensure_exists(user_id)

            response = (
                self.client.table("tasks")
                .insert(
                    compact(
                        {
                            "user_id": user_id,
                            "title": title,
                            "description": description,
                            "pillar": pillar,
                            "priority": priority,
                            "due_date": due_date.isoformat() if due_date else None,
                            "goal_id": goal_id,
                        }
                    )
                )
                .execute()
            )
            task = response.data[0]
            logger.info(f"Tarefa criada: {task.get('id')}")
            return StoreResult(data=task)

        except Exception as e:
            logger.error(f"Erro ao criar tarefa: {e}")
            return StoreResult(error=str(e))

    async def update_status(
        self, task_id: str, status: TaskStatus, user_id: str = TEST_USER_ID
    ) -> StoreResult:
        """
        Atualiza o status de uma tarefa do usuário

        completed_at só é preenchido na transição para "completed". Tarefa de
        outro usuário conta como não encontrada.
        """
        if not self.configured:
            return StoreResult()

        try:
            timestamp = now_iso()
            update_data = {"status": status, "updated_at": timestamp}
            if status == "completed":
                update_data["completed_at"] = timestamp

            response = (
                self.client.table("tasks")
                .update(update_data)
                .eq("id", task_id)
                .eq("user_id", user_id)
                .execute()
            )
            if not response.data:
                return StoreResult(error=f"Tarefa não encontrada: {task_id}")

            logger.info(f"Tarefa {task_id} -> {status}")
            return StoreResult(data=response.data[0])

        except Exception as e:
            logger.error(f"Erro ao atualizar tarefa: {e}")
            return StoreResult(error=str(e))

    async def find_all(
        self,
        user_id: str = TEST_USER_ID,
        status: Optional[TaskStatus] = None,
        pillar: Optional[str] = None,
    ) -> list[dict]:
        """Tarefas do usuário, mais recentes primeiro"""
        if not self.configured:
            return []

        try:
            query = (
                self.client.table("tasks")
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
            logger.error(f"Erro ao obter tarefas: {e}")
            return []
