"""
Acesso à tabela contents

Conteúdos gerados (legendas, roteiros, resumos...) salvos pelo usuário.
"""

from typing import Any, Optional

from loguru import logger

from app.repositories.base import SupabaseRepository, compact
from app.repositories.users import UserRepository
from app.schemas.store import TEST_USER_ID, StoreResult


class ContentRepository(SupabaseRepository):
    def __init__(self, client=None):
        super().__init__(client)
        self.users = UserRepository(client)

    async def create(
        self,
        content: str,
        user_id: str = TEST_USER_ID,
        pillar: Optional[str] = None,
        type: Optional[str] = None,
        title: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> StoreResult:
        """
        Salva um conteúdo gerado

        Args:
            content: texto do conteúdo
            user_id: dono do conteúdo
            pillar: pilar de origem
            type: tipo livre (legenda, roteiro...)
            title: título
            metadata: dados extras em JSON
        """
        if not self.configured:
            return StoreResult()

        try:
            await self.users.ensure_exists(user_id)

            response = (
                self.client.table("contents")
                .insert(
                    compact(
                        {
                            "user_id": user_id,
                            "pillar": pillar,
                            "type": type,
                            "title": title,
                            "content": content,
                            "metadata": metadata,
                        }
                    )
                )
                .execute()
            )
            saved = response.data[0]
            logger.info(f"Conteúdo salvo: {saved.get('id')}")
            return StoreResult(data=saved)

        except Exception as e:
            logger.error(f"Erro ao salvar conteúdo: {e}")
            return StoreResult(error=str(e))

    async def find_all(
        self,
        user_id: str = TEST_USER_ID,
        pillar: Optional[str] = None,
        type: Optional[str] = None,
    ) -> list[dict]:
        if not self.configured:
            return []

        try:
            query = (
                self.client.table("contents")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
            )
            if pillar:
                query = query.eq("pillar", pillar)
            if type:
                query = query.eq("type", type)

            return query.execute().data or []

        except Exception as e:
            logger.error(f"Erro ao obter conteúdos: {e}")
            return []
