from typing import Optional

from fastapi import Depends, Request

from app.core.auth import Session
from app.repositories import get_supabase_client
from app.repositories.contents import ContentRepository
from app.repositories.conversations import ConversationRepository
from app.repositories.goals import GoalRepository
from app.repositories.stats import StatsRepository
from app.repositories.tasks import TaskRepository
from app.schemas.store import TEST_USER_ID


def get_session(request: Request) -> Optional[Session]:
    return getattr(request.state, "session", None)


def get_user_id(session: Optional[Session] = Depends(get_session)) -> str:
    """Usuário da sessão, ou o usuário de teste sem sessão/ID"""
    if session and session.user_id:
        return session.user_id
    return TEST_USER_ID


def get_stats_repository() -> StatsRepository:
    return StatsRepository(get_supabase_client())


def get_task_repository() -> TaskRepository:
    return TaskRepository(get_supabase_client())


def get_goal_repository() -> GoalRepository:
    return GoalRepository(get_supabase_client())


def get_content_repository() -> ContentRepository:
    return ContentRepository(get_supabase_client())


def get_conversation_repository() -> ConversationRepository:
    return ConversationRepository(get_supabase_client())
