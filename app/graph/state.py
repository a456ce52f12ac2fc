from typing import Annotated, Optional, TypedDict

from langchain_core.messages import BaseMessage
from langgraph.graph.message import add_messages


class ChatState(TypedDict):
    messages: Annotated[list[BaseMessage], add_messages]

    # Pilar pedido pelo cliente (pode ser inválido)
    pillar: Optional[str]

    # Instrução de sistema montada pelo nó persona
    system_prompt: Optional[str]


def create_initial_state(
    messages: list[BaseMessage],
    pillar: Optional[str] = None,
) -> ChatState:
    """
    Estado inicial do grafo
    """
    return ChatState(
        messages=messages,
        pillar=pillar,
        system_prompt=None,
    )
