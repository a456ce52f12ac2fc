from typing import Optional

from loguru import logger
from supabase import Client

from app.core.config import settings

_supabase_client: Optional[Client] = None


def get_supabase_client() -> Optional[Client]:
    """
    Retorna o cliente Supabase (padrão singleton)

    Retorna None quando o Supabase não está configurado. Esse None é a flag
    de capacidade repassada para todos os repositórios.
    """
    global _supabase_client

    if _supabase_client is None and settings.store_configured:
        try:
            from supabase import create_client

            _supabase_client = create_client(
                settings.supabase_url, settings.supabase_key
            )
            logger.info("Cliente Supabase inicializado")

        except Exception as e:
            logger.warning(f"Falha ao inicializar o Supabase: {e}")
            _supabase_client = None

    return _supabase_client
