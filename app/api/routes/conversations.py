from fastapi import APIRouter, Depends

from app.api.deps import get_conversation_repository, get_user_id
from app.repositories.conversations import ConversationRepository
from app.schemas.store import ConversationCreate, MessageCreate, StoreResult

router = APIRouter()


@router.get("/")
async def list_conversations(
    user_id: str = Depends(get_user_id),
    repo: ConversationRepository = Depends(get_conversation_repository),
) -> list[dict]:
    return await repo.find_all(user_id=user_id)


@router.post("/", response_model=StoreResult, status_code=201)
async def create_conversation(
    data: ConversationCreate,
    user_id: str = Depends(get_user_id),
    repo: ConversationRepository = Depends(get_conversation_repository),
) -> StoreResult:
    return await repo.create(user_id=user_id, pillar=data.pillar, title=data.title)


@router.get("/{conversation_id}/messages")
async def list_messages(
    conversation_id: str,
    user_id: str = Depends(get_user_id),
    repo: ConversationRepository = Depends(get_conversation_repository),
) -> list[dict]:
    return await repo.find_messages(conversation_id, user_id=user_id)


@router.post("/{conversation_id}/messages", response_model=StoreResult, status_code=201)
async def save_message(
    conversation_id: str,
    data: MessageCreate,
    user_id: str = Depends(get_user_id),
    repo: ConversationRepository = Depends(get_conversation_repository),
) -> StoreResult:
    return await repo.save_message(conversation_id, data.role, data.content, user_id=user_id)
