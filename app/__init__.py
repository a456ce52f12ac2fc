"""
Lumi - assistente inteligente de produtividade

Este pacote serve o gateway de chat da Lumi e os helpers de persistência
(Supabase) através de uma API FastAPI, com uma interface Gradio.

Estrutura:
    app/
    ├── api/routes/     # Endpoints HTTP
    ├── core/           # Configuração, prompts, autenticação
    ├── graph/          # Grafo LangGraph do chat (persona -> completion)
    ├── repositories/   # Acesso ao Supabase
    ├── schemas/        # DTO (Data Transfer Object)
    ├── services/       # Gateway de completions
    └── ui/             # Interface Gradio e cliente HTTP
"""

from dotenv import load_dotenv

load_dotenv(override=True)
