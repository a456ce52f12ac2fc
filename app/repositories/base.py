from datetime import datetime, timezone
from typing import Optional

from supabase import Client


class SupabaseRepository:
    """
    Base dos repositórios

    client=None significa Supabase não configurado: leituras devolvem
    vazio/zero e escritas viram no-op bem-sucedido.
    """

    def __init__(self, client: Optional[Client] = None):
        self.client = client

    @property
    def configured(self) -> bool:
        return self.client is not None


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def compact(row: dict) -> dict:
    """Remove campos None antes de gravar (o banco aplica os defaults)"""
    return {k: v for k, v in row.items() if v is not None}
