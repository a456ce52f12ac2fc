"""
Gateway de completions

Recebe o histórico + pilar, executa o grafo (persona -> completion) uma única
vez e normaliza a resposta ou o erro do provedor.
"""

from typing import Any

import openai
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from loguru import logger
from pydantic import ValidationError

from app.core.config import settings
from app.core.prompts import DEFAULT_PILLAR_LABEL
from app.exceptions import (
    ChatError,
    ConfigurationError,
    EmptyResponse,
    InternalError,
    InvalidInput,
    InvalidUpstreamRequest,
    RateLimited,
    Unauthorized,
)
from app.graph import create_initial_state, get_chat_graph
from app.schemas.chat import ChatMessage, ChatRequest, ChatResponse


def parse_chat_request(payload: Any) -> ChatRequest:
    """
    Valida o corpo da requisição

    Raises:
        InvalidInput: corpo não é objeto, messages ausente ou não é lista,
            ou alguma mensagem fora do formato {role, content}
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("messages"), list):
        raise InvalidInput()

    try:
        return ChatRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Requisição de chat inválida: {e.error_count()} erro(s)")
        raise InvalidInput() from e


def to_langchain_messages(messages: list[ChatMessage]) -> list[BaseMessage]:
    return [
        HumanMessage(content=m.content) if m.role == "user" else AIMessage(content=m.content)
        for m in messages
    ]


def classify_upstream_error(exc: Exception) -> ChatError:
    """
    Converte o erro do provedor na taxonomia do gateway

    Ordem de verificação:
        1. type == "invalid_request_error" -> InvalidUpstreamRequest (400)
        2. status 401 -> Unauthorized
        3. status 429 -> RateLimited
        4. qualquer outro -> InternalError (500)
    """
    if isinstance(exc, openai.APIError) and exc.type == "invalid_request_error":
        body = exc.body if isinstance(exc.body, dict) else {}
        return InvalidUpstreamRequest(body.get("message") or exc.message)

    status_code = getattr(exc, "status_code", None)
    if status_code == 401:
        return Unauthorized()
    if status_code == 429:
        return RateLimited()

    return InternalError(getattr(exc, "message", None) or str(exc) or None)


async def complete_chat(payload: Any) -> ChatResponse:
    """
    Executa uma completion de chat

    Args:
        payload: corpo JSON já decodificado ({messages, pillar?})

    Returns:
        ChatResponse: resposta, pilar ("geral" sem pilar) e uso de tokens

    Raises:
        ChatError: qualquer falha, já com status HTTP e corpo definidos
    """
    # Step 1 : validação (antes de qualquer chamada externa)
    request = parse_chat_request(payload)

    if not settings.openai_api_key:
        logger.error("OPENAI_API_KEY não configurada")
        raise ConfigurationError()

    logger.info(f"Requisição de chat: pilar={request.pillar}, mensagens={len(request.messages)}")

    # Step 2 : grafo persona -> completion
    initial_state = create_initial_state(
        messages=to_langchain_messages(request.messages),
        pillar=request.pillar,
    )

    try:
        final_state = await get_chat_graph().ainvoke(initial_state)
    except Exception as e:
        logger.error(f"Erro na chamada à OpenAI: {e}")
        raise classify_upstream_error(e) from e

    # Step 3 : resposta
    reply = final_state["messages"][-1]
    content = reply.content if isinstance(reply, AIMessage) else None
    if not content or not isinstance(content, str):
        logger.error("Resposta vazia da OpenAI")
        raise EmptyResponse()

    usage = reply.response_metadata.get("token_usage") or reply.usage_metadata

    return ChatResponse(
        message=content,
        pillar=request.pillar or DEFAULT_PILLAR_LABEL,
        usage=usage,
    )
