"""
Login e cadastro via Supabase Auth

Cada chamada cria um cliente novo: sign_in_with_password guarda a sessão no
cliente, e o cliente compartilhado dos repositórios não pode carregar a
sessão de um usuário específico.
"""

from loguru import logger
from supabase import Client, create_client

from app.core.auth import Session
from app.core.config import settings
from app.exceptions import AuthError
from app.schemas.store import TEST_USER_ID

MIN_PASSWORD_LENGTH = 6

# Token usado quando o Supabase não está configurado (modo local)
LOCAL_SESSION_TOKEN = "lumi-local-session"


def _auth_client() -> Client:
    return create_client(settings.supabase_url, settings.supabase_key)


def sign_in(email: str, password: str) -> Session:
    """
    Autentica com e-mail e senha

    Returns:
        Session: sessão com o access token do Supabase

    Raises:
        AuthError: credenciais recusadas
    """
    if not settings.store_configured:
        logger.warning("Supabase não configurado: criando sessão local")
        return Session(access_token=LOCAL_SESSION_TOKEN, user_id=TEST_USER_ID, email=email)

    try:
        response = _auth_client().auth.sign_in_with_password(
            {"email": email, "password": password}
        )
    except Exception as e:
        logger.warning(f"Login recusado para {email}: {e}")
        raise AuthError(str(e) or "Erro ao fazer login. Verifique suas credenciais.") from e

    if response.session is None or response.user is None:
        raise AuthError("Erro ao fazer login. Verifique suas credenciais.")

    logger.info(f"Login realizado: {response.user.id}")
    return Session(
        access_token=response.session.access_token,
        user_id=response.user.id,
        email=response.user.email,
    )


def sign_up(name: str, email: str, password: str, confirm_password: str) -> None:
    """
    Cria uma conta

    Raises:
        AuthError: senhas diferentes, senha curta ou recusa do Supabase
    """
    if password != confirm_password:
        raise AuthError("As senhas não coincidem.")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise AuthError("A senha deve ter pelo menos 6 caracteres.")

    if not settings.store_configured:
        logger.warning("Supabase não configurado: cadastro ignorado")
        return

    try:
        response = _auth_client().auth.sign_up(
            {
                "email": email,
                "password": password,
                "options": {"data": {"name": name}},
            }
        )
    except Exception as e:
        logger.warning(f"Cadastro recusado para {email}: {e}")
        raise AuthError(str(e) or "Erro ao criar conta. Tente novamente.") from e

    if response.user is None:
        raise AuthError("Erro ao criar conta. Tente novamente.")

    logger.info(f"Conta criada: {response.user.id}")
