import json
from types import SimpleNamespace

import httpx
import pytest

from app.core.config import settings
from app.schemas.store import UserStats
from app.ui.client import (
    FALLBACK_MESSAGE,
    NON_JSON_SUCCESS_MESSAGE,
    NOT_FOUND_MESSAGE,
    SERVER_ERROR_MESSAGE,
    LumiClient,
)
from app.ui.demo import _client_for

HISTORY = [{"role": "user", "content": "Oi, Lumi!"}]


def client_with(handler) -> LumiClient:
    return LumiClient(base_url="http://lumi.test", transport=httpx.MockTransport(handler))


def reply(status_code, *, json_body=None, text=None):
    def handler(request):
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text, headers={"content-type": "text/html"})

    return handler


async def test_send_chat_returns_reply_and_forwards_body_and_cookie():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        seen["cookie"] = request.headers.get("cookie")
        return httpx.Response(200, json={"message": "Oi! Como posso ajudar?", "pillar": "vida"})

    client = LumiClient(
        base_url="http://lumi.test",
        cookies={settings.session_cookie_name: "token-123"},
        transport=httpx.MockTransport(handler),
    )

    text = await client.send_chat(HISTORY, "vida")

    assert text == "Oi! Como posso ajudar?"
    assert seen["path"] == "/api/v1/chat/"
    assert seen["body"] == {"messages": HISTORY, "pillar": "vida"}
    assert seen["cookie"] == f"{settings.session_cookie_name}=token-123"


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"error": "API Key inválida", "message": "Verifique sua chave"}, "Verifique sua chave"),
        ({"error": "Mensagens inválidas"}, "Mensagens inválidas"),
        ({}, "Erro ao processar mensagem"),
    ],
)
async def test_send_chat_json_error_prefers_message_then_error(body, expected):
    text = await client_with(reply(400, json_body=body)).send_chat(HISTORY)

    assert text == expected


@pytest.mark.parametrize(
    "status_code, expected",
    [
        (500, SERVER_ERROR_MESSAGE),
        (404, NOT_FOUND_MESSAGE),
        (502, "Erro 502: O servidor retornou uma resposta inválida."),
    ],
)
async def test_send_chat_non_json_error_by_status(status_code, expected):
    handler = reply(status_code, text="<html><body>Bad Gateway</body></html>")

    text = await client_with(handler).send_chat(HISTORY)

    assert text == expected


async def test_send_chat_non_json_success():
    text = await client_with(reply(200, text="<html>ok</html>")).send_chat(HISTORY)

    assert text == NON_JSON_SUCCESS_MESSAGE


async def test_send_chat_connection_failure_returns_fallback():
    def handler(request):
        raise httpx.ConnectError("recusada", request=request)

    text = await client_with(handler).send_chat(HISTORY)

    assert text == FALLBACK_MESSAGE


async def test_load_stats_reads_camel_case_body():
    body = {"tasksCompleted": 6, "contentsCreated": 2, "activeGoals": 1, "hoursEconomized": 12}

    stats = await client_with(reply(200, json_body=body)).load_stats()

    assert stats == UserStats(
        tasks_completed=6, contents_created=2, active_goals=1, hours_economized=12
    )


async def test_load_stats_failure_returns_zeros():
    stats = await client_with(reply(500, text="erro")).load_stats()

    assert stats == UserStats()


def test_dashboard_client_forwards_only_session_cookie():
    request = SimpleNamespace(cookies={"outro": "1", settings.session_cookie_name: "abc"})

    assert _client_for(request).cookies == {settings.session_cookie_name: "abc"}
    assert _client_for(SimpleNamespace(cookies={"tema": "escuro"})).cookies == {}
    assert _client_for(None).cookies == {}
