"""
Interface Gradio da Lumi (dashboard + chat)

Montada em /dashboard pelo app FastAPI. Cada evento cria um LumiClient com
o cookie de sessão da requisição; nenhum estado de usuário fica no servidor.
"""

from typing import Optional

import gradio as gr

from app.core.config import settings
from app.core.prompts import Pillar
from app.schemas.store import UserStats
from app.ui.client import LumiClient

GREETING = (
    "Olá! Sou a Lumi, sua assistente inteligente. Estou aqui para ajudar você "
    "em tudo que precisar. Como posso te ajudar hoje?"
)

PILLAR_CHOICES = [
    ("Geral", ""),
    ("Conteúdo", Pillar.CONTEUDO.value),
    ("Produtividade", Pillar.PRODUTIVIDADE.value),
    ("Estudo", Pillar.ESTUDO.value),
    ("Negócios", Pillar.NEGOCIOS.value),
    ("Vida Real", Pillar.VIDA.value),
]

# O tema fica só no navegador
TOGGLE_THEME_JS = """
() => {
    document.body.classList.toggle('dark');
}
"""


def format_stats(stats: UserStats) -> str:
    return (
        f"| Tarefas Concluídas | Conteúdos Criados | Metas Ativas | Horas Economizadas |\n"
        f"|:---:|:---:|:---:|:---:|\n"
        f"| **{stats.tasks_completed}** | **{stats.contents_created}** "
        f"| **{stats.active_goals}** | **{stats.hours_economized}h** |"
    )


def _client_for(request: Optional[gr.Request]) -> LumiClient:
    token = request.cookies.get(settings.session_cookie_name) if request else None
    return LumiClient(cookies={settings.session_cookie_name: token} if token else None)


def _api_messages(history: list[dict]) -> list[dict]:
    # Gradio acrescenta metadata/options; a API só aceita role + content
    return [
        {"role": m["role"], "content": m["content"]}
        for m in history
        if m.get("role") in ("user", "assistant") and isinstance(m.get("content"), str)
    ]


async def load_stats(request: gr.Request) -> str:
    stats = await _client_for(request).load_stats()
    return format_stats(stats)


async def respond(message: str, history: list[dict], pillar: str, request: gr.Request):
    if not message or not message.strip():
        return "", history, gr.update()

    history = history + [{"role": "user", "content": message}]

    client = _client_for(request)
    reply = await client.send_chat(_api_messages(history), pillar or None)
    history.append({"role": "assistant", "content": reply})

    stats = await client.load_stats()
    return "", history, format_stats(stats)


def create_demo() -> gr.Blocks:
    with gr.Blocks(title="Lumi") as demo:
        with gr.Row():
            gr.Markdown("# ✨ Lumi\nBem-vindo de volta à Lumi")
            theme_button = gr.Button("🌓 Tema", size="sm", scale=0)
            gr.Button("Sair", link="/logout", size="sm", scale=0)

        stats_panel = gr.Markdown(format_stats(UserStats()))

        pillar = gr.Radio(choices=PILLAR_CHOICES, value="", label="Seus Pilares")

        chatbot = gr.Chatbot(
            value=[{"role": "assistant", "content": GREETING}],
            type="messages",
            height=480,
            label="Lumi",
        )
        with gr.Row():
            message = gr.Textbox(
                placeholder="Digite sua mensagem...",
                show_label=False,
                scale=8,
            )
            send_button = gr.Button("Enviar", variant="primary", scale=1)

        theme_button.click(None, js=TOGGLE_THEME_JS)
        demo.load(load_stats, outputs=stats_panel)

        inputs = [message, chatbot, pillar]
        outputs = [message, chatbot, stats_panel]
        message.submit(respond, inputs, outputs)
        send_button.click(respond, inputs, outputs)

    return demo
