"""
Cliente HTTP da interface

A interface Gradio fala com a API pelo mesmo caminho que um navegador
usaria, repassando o cookie de sessão. Respostas inesperadas viram
mensagens legíveis em vez de exceções.
"""

from typing import Optional

import httpx
from loguru import logger

from app.core.config import settings
from app.schemas.store import UserStats

CHAT_PATH = "/api/v1/chat/"
STATS_PATH = "/api/v1/stats/"

DEFAULT_ERROR = "Erro ao processar mensagem"
FALLBACK_MESSAGE = "Desculpe, ocorreu um erro ao processar sua mensagem. Tente novamente."
SERVER_ERROR_MESSAGE = (
    "Erro no servidor. Verifique se a variável OPENAI_API_KEY está configurada corretamente."
)
NOT_FOUND_MESSAGE = "Rota da API não encontrada. Verifique se /api/v1/chat existe."
NON_JSON_SUCCESS_MESSAGE = (
    "A API retornou uma resposta inválida (não é JSON). Verifique os logs do servidor."
)


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def error_message_from(response: httpx.Response) -> str:
    """
    Mensagem legível para uma resposta de erro

    JSON: usa message, depois error. Não-JSON (ex: HTML de erro): mensagem
    genérica por status.
    """
    if _is_json(response):
        try:
            data = response.json()
        except ValueError:
            logger.error("Erro ao fazer parse do JSON de erro")
            return DEFAULT_ERROR
        if isinstance(data, dict):
            return data.get("message") or data.get("error") or DEFAULT_ERROR
        return DEFAULT_ERROR

    logger.error(f"Resposta não-JSON da API: {response.text[:200]}")

    if response.status_code == 500:
        return SERVER_ERROR_MESSAGE
    if response.status_code == 404:
        return NOT_FOUND_MESSAGE
    return f"Erro {response.status_code}: O servidor retornou uma resposta inválida."


class LumiClient:
    """
    Cliente da API da Lumi

    Example:
        >>> client = LumiClient(cookies={"lumi-access-token": token})
        >>> reply = await client.send_chat([{"role": "user", "content": "Oi!"}], "vida")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        cookies: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.api_base_url
        self.cookies = cookies or {}
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            cookies=self.cookies,
            transport=self.transport,
            timeout=None,
        )

    async def send_chat(self, messages: list[dict], pillar: Optional[str] = None) -> str:
        """
        Envia o histórico e devolve o texto a exibir

        Sempre devolve uma string: a resposta da Lumi ou uma mensagem de erro
        legível.
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    CHAT_PATH, json={"messages": messages, "pillar": pillar}
                )
        except httpx.HTTPError as e:
            logger.error(f"Erro ao enviar mensagem: {e}")
            return FALLBACK_MESSAGE

        if not response.is_success:
            return error_message_from(response)

        if not _is_json(response):
            logger.error(f"Resposta de sucesso não é JSON: {response.text[:200]}")
            return NON_JSON_SUCCESS_MESSAGE

        try:
            data = response.json()
        except ValueError:
            return NON_JSON_SUCCESS_MESSAGE

        return data.get("message") or FALLBACK_MESSAGE

    async def load_stats(self) -> UserStats:
        """Estatísticas do dashboard (zeros em caso de falha)"""
        try:
            async with self._client() as client:
                response = await client.get(STATS_PATH)
            response.raise_for_status()
            return UserStats.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Erro ao carregar estatísticas: {e}")
            return UserStats()
