"""
Rota de chat
Encaminha o histórico para o gateway de completions e devolve JSON.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.exceptions import ChatError
from app.schemas.chat import ChatResponse, ErrorResponse
from app.services.completion import complete_chat

router = APIRouter()


@router.post(
    "/",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)  # api/v1/chat
async def chat(request: Request):
    """
    Endpoint de chat

    Corpo: {messages: [{role, content}], pillar?: str}. Toda falha volta
    como {error, message?} com o status correspondente.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        return await complete_chat(payload)
    except ChatError as e:
        logger.error(f"Erro na API de chat ({e.status_code}): {e.error} - {e.message}")
        return JSONResponse(status_code=e.status_code, content=e.to_dict())
