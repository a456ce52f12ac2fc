"""
Grafo LangGraph do chat

persona -> completion. Sem roteamento condicional: toda requisição passa
pelos dois nós uma única vez.
"""

from langgraph.graph import END, START, StateGraph
from loguru import logger

from app.graph.nodes import completion_node, persona_node
from app.graph.state import ChatState

_compiled_graph = None


def create_chat_graph():
    logger.info("Criando o grafo de chat")

    builder = StateGraph(ChatState)

    builder.add_node("persona", persona_node)
    builder.add_node("completion", completion_node)

    builder.add_edge(START, "persona")
    builder.add_edge("persona", "completion")
    builder.add_edge("completion", END)

    return builder.compile()


def get_chat_graph():
    """
    Retorna o grafo compilado (singleton)
    """
    global _compiled_graph

    if _compiled_graph is None:
        _compiled_graph = create_chat_graph()

    return _compiled_graph
