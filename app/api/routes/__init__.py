"""
Endpoints HTTP

chat.py : gateway de chat
stats.py, tasks.py, goals.py, contents.py, conversations.py : persistência
auth.py : login, cadastro e logout (fora de /api/v1)
"""

from fastapi import APIRouter

from app.api.routes import chat, contents, conversations, goals, health, stats, tasks

api_router = APIRouter()
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])
api_router.include_router(stats.router, prefix="/stats", tags=["Stats"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])
api_router.include_router(goals.router, prefix="/goals", tags=["Goals"])
api_router.include_router(contents.router, prefix="/contents", tags=["Contents"])
api_router.include_router(conversations.router, prefix="/conversations", tags=["Conversations"])
api_router.include_router(health.router, prefix="/health", tags=["Health"])
