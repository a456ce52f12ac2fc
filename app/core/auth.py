"""
Sessão e Access Gate

O Access Gate roda antes de toda requisição (exceto arquivos estáticos,
imagens e health check) e decide redirecionamentos só pela presença de uma
sessão válida.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from loguru import logger
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from app.core.config import settings
from app.repositories import get_supabase_client

# Rotas públicas que não precisam de autenticação
PUBLIC_ROUTES: tuple[str, ...] = ("/login",)

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"

# Caminhos ignorados pelo Access Gate
EXCLUDED_PATHS = re.compile(
    r"^/(static/|favicon\.ico$|api/v1/health/?$)|\.(svg|png|jpg|jpeg|gif|webp)$"
)


@dataclass(frozen=True)
class Session:
    """
    Sessão autenticada da requisição atual

    Attributes:
        access_token: token do cookie de sessão
        user_id: ID do usuário no Supabase (None em modo local)
        email: e-mail do usuário (se conhecido)
    """

    access_token: str
    user_id: Optional[str] = None
    email: Optional[str] = None


SessionResolver = Callable[[Optional[str]], Optional[Session]]


def resolve_session(token: Optional[str]) -> Optional[Session]:
    """
    Valida o token do cookie

    Com Supabase configurado, o token é conferido em auth.get_user. Sem
    Supabase (modo local), a presença do cookie já é a sessão.
    """
    if not token:
        return None

    client = get_supabase_client()
    if client is None:
        return Session(access_token=token)

    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Sessão inválida: {e}")
        return None

    if response is None or response.user is None:
        return None

    return Session(
        access_token=token,
        user_id=response.user.id,
        email=response.user.email,
    )


def is_public_route(path: str, public_routes: Sequence[str] = PUBLIC_ROUTES) -> bool:
    return any(path.startswith(route) for route in public_routes)


class AccessGateMiddleware(BaseHTTPMiddleware):
    """
    Middleware de redirecionamento por sessão

    - rota pública + sessão -> /dashboard
    - rota protegida (exceto "/") sem sessão -> /login
    - caso contrário, segue normalmente

    A sessão resolvida fica em request.state.session apenas durante a
    requisição.
    """

    def __init__(
        self,
        app,
        resolver: SessionResolver = resolve_session,
        cookie_name: Optional[str] = None,
        public_routes: Sequence[str] = PUBLIC_ROUTES,
    ):
        super().__init__(app)
        self.resolver = resolver
        self.cookie_name = cookie_name or settings.session_cookie_name
        self.public_routes = tuple(public_routes)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if EXCLUDED_PATHS.search(path):
            return await call_next(request)

        token = request.cookies.get(self.cookie_name)
        session = await run_in_threadpool(self.resolver, token)
        request.state.session = session

        is_public = is_public_route(path, self.public_routes)

        if is_public and session:
            logger.debug(f"[AccessGate] {path}: sessão ativa, indo para o dashboard")
            return RedirectResponse(url=DASHBOARD_PATH)

        if not is_public and not session and path != "/":
            logger.debug(f"[AccessGate] {path}: sem sessão, indo para o login")
            return RedirectResponse(url=LOGIN_PATH)

        return await call_next(request)
