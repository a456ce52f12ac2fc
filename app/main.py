"""
Aplicação FastAPI da Lumi

Este arquivo é o ponto de entrada: logging, middlewares, rotas e a interface
Gradio.

Como executar:
    # Servidor de desenvolvimento (reload automático)
    uv run uvicorn app.main:app --reload

    # Produção
    uv run uvicorn app.main:app --host 0.0.0.0 --port 8000

Documentação da API:
    - Swagger UI: http://localhost:8000/docs
    - ReDoc: http://localhost:8000/redoc
"""

import sys
from contextlib import asynccontextmanager

import gradio as gr
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from loguru import logger

from app.api.routes import api_router
from app.api.routes import auth
from app.core.auth import DASHBOARD_PATH, AccessGateMiddleware
from app.core.config import settings
from app.graph import get_chat_graph
from app.ui.demo import create_demo

logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level="DEBUG" if settings.debug else "INFO",
    colorize=True,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Ciclo de vida da aplicação

    Na subida: valida configurações e compila o grafo de chat.
    """
    # ===== Início =====
    logger.info("=" * 50)
    logger.info("Iniciando o servidor da Lumi...")
    logger.info(f"Ambiente: {settings.environment}")
    logger.info(f"Modo debug: {settings.debug}")
    logger.info("=" * 50)

    _validate_settings()

    get_chat_graph()
    logger.info("Grafo de chat compilado")

    yield

    # ===== Encerramento =====
    logger.info("Encerrando o servidor da Lumi...")


def _validate_settings():
    """
    Verifica as configurações obrigatórias

    Nada aqui impede a subida: sem OPENAI_API_KEY o chat responde 500, sem
    Supabase os dados são simulados.
    """
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY não configurada. O chat vai responder com erro 500.")

    if not settings.store_configured:
        logger.warning("Supabase não configurado. Estatísticas simuladas e escritas ignoradas.")

    if settings.environment == "production" and settings.debug:
        logger.warning("Modo DEBUG ativo em produção!")


app = FastAPI(
    title="Lumi API",
    description="""
    ## Lumi - assistente inteligente de produtividade

    ### Funcionalidades
    - **Chat**: conversa com a Lumi em cinco pilares
    - **Dashboard**: tarefas, metas e conteúdos

    ### Stack
    - LangGraph + OpenAI: chat
    - FastAPI: API
    - Supabase: banco de dados e autenticação
    - Gradio: interface
    """,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# ===== Middlewares =====
# O último adicionado roda primeiro: o CORS responde preflights antes do Access Gate
app.add_middleware(AccessGateMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")
app.include_router(auth.router, tags=["Auth"])


@app.get("/", tags=["Root"])
def root():
    return RedirectResponse(url=DASHBOARD_PATH)


gradio_app = create_demo()
app = gr.mount_gradio_app(app, gradio_app, path=DASHBOARD_PATH)
logger.info(f"Interface Gradio montada em {DASHBOARD_PATH}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
