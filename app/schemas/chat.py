"""
Schemas de requisição/resposta do chat

Este módulo define os modelos de dados do gateway de completions.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

MessageRole = Literal["user", "assistant"]


class ChatMessage(BaseModel):
    """
    Uma mensagem do histórico enviado pelo cliente

    Attributes:
        role: "user" ou "assistant"
        content: texto da mensagem
    """

    role: MessageRole = Field(..., description="Autor da mensagem")
    content: str = Field(..., description="Texto da mensagem")


class ChatRequest(BaseModel):
    """
    Schema da requisição de chat

    Attributes:
        messages: histórico completo da conversa, em ordem
        pillar: pilar ativo (opcional, qualquer string é aceita)

    Example:
        >>> request = ChatRequest(
        ...     messages=[{"role": "user", "content": "Me ajuda com uma legenda?"}],
        ...     pillar="conteudo",
        ... )
    """

    messages: list[ChatMessage] = Field(
        ...,
        description="Histórico da conversa",
    )

    pillar: Optional[str] = Field(
        default=None,
        description="Identificador do pilar",
        examples=["conteudo", "produtividade", "estudo", "negocios", "vida"],
    )


class ChatResponse(BaseModel):
    """
    Schema da resposta de chat

    Attributes:
        message: resposta da Lumi
        pillar: pilar pedido ou "geral"
        usage: contagem de tokens informada pelo provedor
    """

    message: str = Field(..., description="Resposta da Lumi")

    pillar: str = Field(..., description="Pilar usado", examples=["estudo", "geral"])

    usage: Optional[dict[str, Any]] = Field(
        default=None,
        description="Uso de tokens reportado pela OpenAI",
    )


class ErrorResponse(BaseModel):
    """Corpo JSON de erro do gateway"""

    error: str
    message: Optional[str] = None
