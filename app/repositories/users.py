"""
Acesso à tabela users
"""

from loguru import logger

from app.repositories.base import SupabaseRepository
from app.schemas.store import TEST_USER_ID


class UserRepository(SupabaseRepository):
    """
    Repositório de usuários

    Garante que a linha do usuário existe antes de qualquer escrita que
    dependa dela (tarefas, metas, conteúdos, conversas).
    """

    async def ensure_exists(self, user_id: str = TEST_USER_ID) -> bool:
        """
        Cria o usuário se ele ainda não existe

        Verificação e inserção são chamadas separadas (sem transação).

        Args:
            user_id: identificador do usuário

        Returns:
            bool: True se o usuário existe (ou foi criado)
        """
        if not self.configured:
            return False

        try:
            response = (
                self.client.table("users")
                .select("id")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
            if response.data:
                return True

            self.client.table("users").insert(
                {"id": user_id, "name": "Usuário Teste", "email": "teste@lumi.com"}
            ).execute()
            logger.info(f"Usuário criado: {user_id}")
            return True

        except Exception as e:
            logger.error(f"Erro ao verificar usuário: {e}")
            return False
