"""
Schemas das entidades persistidas no Supabase

As tabelas pertencem ao Supabase; aqui ficam apenas os formatos usados pela
API e pelos repositórios.
"""

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.prompts import Pillar
from app.schemas.chat import MessageRole

# ID do usuário de teste (usado quando não há sessão com usuário)
TEST_USER_ID = "00000000-0000-0000-0000-000000000001"

GoalStatus = Literal["active", "completed", "cancelled"]
TaskStatus = Literal["pending", "in_progress", "completed", "cancelled"]
TaskPriority = Literal["low", "medium", "high"]


class StoreResult(BaseModel):
    """
    Resultado de uma escrita no Supabase

    Attributes:
        data: linha gravada (ou None)
        error: descrição do erro (ou None)
    """

    data: Optional[Any] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


class UserStats(BaseModel):
    """
    Estatísticas exibidas no dashboard

    hoursEconomized é uma estimativa: 2 horas por tarefa concluída.
    """

    model_config = ConfigDict(populate_by_name=True)

    tasks_completed: int = Field(default=0, alias="tasksCompleted")
    contents_created: int = Field(default=0, alias="contentsCreated")
    active_goals: int = Field(default=0, alias="activeGoals")
    hours_economized: int = Field(default=0, alias="hoursEconomized")


# ===== Requisições de escrita =====


class ConversationCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    pillar: Optional[Pillar] = None
    title: Optional[str] = None


class MessageCreate(BaseModel):
    role: MessageRole
    content: str = Field(..., min_length=1)


class ContentCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    pillar: Optional[Pillar] = None
    type: Optional[str] = Field(default=None, examples=["legenda", "roteiro"])
    title: Optional[str] = None
    content: str = Field(..., min_length=1)
    metadata: Optional[dict[str, Any]] = None


class GoalCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    pillar: Optional[Pillar] = None
    target_date: Optional[date] = None


class GoalStatusUpdate(BaseModel):
    status: GoalStatus


class TaskCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    pillar: Optional[Pillar] = None
    priority: TaskPriority = "medium"
    due_date: Optional[date] = None
    goal_id: Optional[str] = None


class TaskStatusUpdate(BaseModel):
    status: TaskStatus
