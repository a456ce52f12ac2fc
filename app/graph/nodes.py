# persona -> completion

from langchain_core.messages import SystemMessage
from langchain_openai import ChatOpenAI
from loguru import logger

from app.core.config import settings
from app.core.prompts import compose_system_prompt
from app.graph.state import ChatState

# Modelo e parâmetros fixos de amostragem
LLM_MODEL = "gpt-4o"
TEMPERATURE = 0.7
TOP_P = 1.0
FREQUENCY_PENALTY = 0.3
PRESENCE_PENALTY = 0.3
MAX_TOKENS = 2000


def get_llm() -> ChatOpenAI:
    """
    Cliente OpenAI (chamada única, sem retry)
    """
    return ChatOpenAI(
        api_key=settings.openai_api_key,
        model=LLM_MODEL,
        temperature=TEMPERATURE,
        top_p=TOP_P,
        frequency_penalty=FREQUENCY_PENALTY,
        presence_penalty=PRESENCE_PENALTY,
        max_tokens=MAX_TOKENS,
        max_retries=0,
    )


async def persona_node(state: ChatState) -> dict:
    """Escolhe a persona do pilar e monta a instrução de sistema"""
    pillar = state.get("pillar")
    system_prompt = compose_system_prompt(pillar)
    logger.debug(f"[Persona] pilar={pillar or 'geral'}, prompt={len(system_prompt)} caracteres")
    return {"system_prompt": system_prompt}


async def completion_node(state: ChatState) -> dict:
    """
    Chama o LLM com a instrução de sistema + histórico

    Erros do provedor não são tratados aqui: sobem até o gateway, que os
    classifica.
    """
    llm = get_llm()

    messages = [SystemMessage(content=state["system_prompt"]), *state["messages"]]

    logger.info(f"[Completion] enviando {len(messages)} mensagens para {LLM_MODEL}")
    response = await llm.ainvoke(messages)

    return {"messages": [response]}
