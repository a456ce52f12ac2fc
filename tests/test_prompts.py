import pytest

from app.core.config import settings
from app.core.prompts import (
    DEFAULT_BASE_PROMPT,
    PILLAR_PROMPTS,
    Pillar,
    compose_system_prompt,
    get_base_prompt,
)


@pytest.fixture(autouse=True)
def default_base_prompt(monkeypatch):
    monkeypatch.setattr(settings, "base_prompt", None)


def test_pillar_identifiers_are_fixed():
    assert [p.value for p in Pillar] == [
        "conteudo",
        "produtividade",
        "estudo",
        "negocios",
        "vida",
    ]
    assert set(PILLAR_PROMPTS) == set(Pillar)


def test_pillar_prompts_are_distinct():
    assert len(set(PILLAR_PROMPTS.values())) == len(PILLAR_PROMPTS)


@pytest.mark.parametrize("pillar", list(Pillar))
def test_compose_uses_pillar_block_then_base(pillar):
    prompt = compose_system_prompt(pillar.value)

    assert PILLAR_PROMPTS[pillar] in prompt
    assert prompt == f"{PILLAR_PROMPTS[pillar]}\n\n{DEFAULT_BASE_PROMPT}"


@pytest.mark.parametrize("pillar", [None, "", "financas", "CONTEUDO"])
def test_compose_without_known_pillar_duplicates_base(pillar):
    prompt = compose_system_prompt(pillar)

    assert prompt == f"{DEFAULT_BASE_PROMPT}\n\n{DEFAULT_BASE_PROMPT}"
    for block in PILLAR_PROMPTS.values():
        assert block not in prompt


def test_base_prompt_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "base_prompt", "Você é a Lumi de teste.")

    assert get_base_prompt() == "Você é a Lumi de teste."
    assert compose_system_prompt("vida").endswith("\n\nVocê é a Lumi de teste.")
    assert compose_system_prompt(None) == "Você é a Lumi de teste.\n\nVocê é a Lumi de teste."


def test_pillar_from_value():
    assert Pillar.from_value("estudo") is Pillar.ESTUDO
    assert Pillar.from_value("desconhecido") is None
    assert Pillar.from_value(None) is None
