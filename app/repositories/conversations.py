"""
Acesso às tabelas conversations e messages

Mensagens são imutáveis: só existem inserção e leitura.
"""

from typing import Optional

from loguru import logger

from app.repositories.base import SupabaseRepository, compact
from app.repositories.users import UserRepository
from app.schemas.chat import MessageRole
from app.schemas.store import TEST_USER_ID, StoreResult

# ID devolvido quando o Supabase não está configurado
TEMP_CONVERSATION_ID = "temp-conversation-id"


class ConversationRepository(SupabaseRepository):
    """
    Repositório de conversas e mensagens

    Example:
        >>> repo = ConversationRepository(get_supabase_client())
        >>> conversation = await repo.create(pillar="estudo", title="Plano de estudos")
        >>> await repo.save_message(conversation.data["id"], "user", "Oi, Lumi!")
    """

    def __init__(self, client=None):
        super().__init__(client)
        self.users = UserRepository(client)

    async def create(
        self,
        user_id: str = TEST_USER_ID,
        pillar: Optional[str] = None,
        title: Optional[str] = None,
    ) -> StoreResult:
        """Cria uma conversa para o usuário"""
        if not self.configured:
            return StoreResult(data={"id": TEMP_CONVERSATION_ID})

        try:
            await self.users.ensure_exists(user_id)

            response = (
                self.client.table("conversations")
                .insert(compact({"user_id": user_id, "pillar": pillar, "title": title}))
                .execute()
            )
            conversation = response.data[0]
            logger.info(f"Conversa criada: {conversation.get('id')}")
            return StoreResult(data=conversation)

        except Exception as e:
            logger.error(f"Erro ao criar conversa: {e}")
            return StoreResult(error=str(e))

    def _owns(self, conversation_id: str, user_id: str) -> bool:
        response = (
            self.client.table("conversations")
            .select("id")
            .eq("id", conversation_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    async def save_message(
        self,
        conversation_id: str,
        role: MessageRole,
        content: str,
        user_id: str = TEST_USER_ID,
    ) -> StoreResult:
        """Grava uma mensagem em uma conversa do usuário"""
        if not self.configured:
            return StoreResult()

        try:
            if not self._owns(conversation_id, user_id):
                return StoreResult(error=f"Conversa não encontrada: {conversation_id}")

            response = (
                self.client.table("messages")
                .insert(
                    {
                        "conversation_id": conversation_id,
                        "role": role,
                        "content": content,
                    }
                )
                .execute()
            )
            logger.debug(f"Mensagem salva em {conversation_id} ({role})")
            return StoreResult(data=response.data[0])

        except Exception as e:
            logger.error(f"Erro ao salvar mensagem: {e}")
            return StoreResult(error=str(e))

    async def find_all(self, user_id: str = TEST_USER_ID) -> list[dict]:
        """Conversas do usuário, mais recentes primeiro"""
        if not self.configured:
            return []

        try:
            response = (
                self.client.table("conversations")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []

        except Exception as e:
            logger.error(f"Erro ao obter conversas: {e}")
            return []

    async def find_messages(
        self, conversation_id: str, user_id: str = TEST_USER_ID
    ) -> list[dict]:
        """Mensagens da conversa em ordem cronológica (vazio se a conversa não é do usuário)"""
        if not self.configured:
            return []

        try:
            if not self._owns(conversation_id, user_id):
                return []

            response = (
                self.client.table("messages")
                .select("*")
                .eq("conversation_id", conversation_id)
                .order("created_at")
                .execute()
            )
            return response.data or []

        except Exception as e:
            logger.error(f"Erro ao obter mensagens: {e}")
            return []
