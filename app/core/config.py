"""
Configurações da aplicação

Todas as configurações vêm de variáveis de ambiente (ou do arquivo .env).
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Valores usados pelo frontend antigo quando o Supabase não estava configurado
PLACEHOLDER_SUPABASE_URL = "https://placeholder.supabase.co"
PLACEHOLDER_SUPABASE_KEY = "placeholder-key"


class Settings(BaseSettings):
    """
    Configurações da Lumi

    Attributes:
        environment: ambiente de execução (development, production)
        debug: modo debug (logs DEBUG, CORS liberado, reload)
        openai_api_key: credencial da OpenAI
        base_prompt: sobrescreve o prompt base da Lumi
        supabase_url / supabase_key: credenciais do Supabase
        session_cookie_name: cookie que carrega o token de sessão
        api_base_url: endereço da API usado pela interface Gradio
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # ===== LLM =====
    openai_api_key: str = ""
    base_prompt: Optional[str] = None

    # ===== Supabase =====
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
    )

    # ===== Sessão / UI =====
    session_cookie_name: str = "lumi-access-token"
    api_base_url: str = "http://localhost:8000"

    @property
    def store_configured(self) -> bool:
        """Supabase só conta como configurado com URL e chave reais"""
        return bool(
            self.supabase_url
            and self.supabase_key
            and self.supabase_url != PLACEHOLDER_SUPABASE_URL
            and self.supabase_key != PLACEHOLDER_SUPABASE_KEY
        )


settings = Settings()
