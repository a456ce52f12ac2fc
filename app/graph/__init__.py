"""
Componentes LangGraph do chat

state.py : estado do grafo
nodes.py : nós persona e completion
graph.py : montagem e compilação
"""

from app.graph.state import ChatState, create_initial_state
from app.graph.graph import create_chat_graph, get_chat_graph

__all__ = ["ChatState", "create_initial_state", "create_chat_graph", "get_chat_graph"]
