"""
Login, cadastro e logout

Ficam fora de /api/v1: /login é a única rota pública do Access Gate.
"""

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from app.core.auth import DASHBOARD_PATH, LOGIN_PATH
from app.core.config import settings
from app.exceptions import AuthError
from app.services.auth import sign_in, sign_up
from app.ui.login import render_login_page

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
async def login_page() -> HTMLResponse:
    return HTMLResponse(render_login_page())


@router.post("/login")
async def login(email: str = Form(...), password: str = Form(...)):
    """Autentica e grava o token no cookie de sessão"""
    try:
        session = await run_in_threadpool(sign_in, email, password)
    except AuthError as e:
        return HTMLResponse(render_login_page(error=e.message), status_code=401)

    response = RedirectResponse(url=DASHBOARD_PATH, status_code=303)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.access_token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
    )
    return response


@router.post("/login/signup", response_class=HTMLResponse)
async def signup(
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    confirm_password: str = Form(...),
) -> HTMLResponse:
    try:
        await run_in_threadpool(sign_up, name, email, password, confirm_password)
    except AuthError as e:
        return HTMLResponse(render_login_page(error=e.message), status_code=400)

    return HTMLResponse(
        render_login_page(success="Conta criada com sucesso! Você já pode fazer login.")
    )


@router.get("/logout")
async def logout() -> RedirectResponse:
    """Encerra a sessão (remove o cookie)"""
    response = RedirectResponse(url=LOGIN_PATH, status_code=303)
    response.delete_cookie(settings.session_cookie_name)
    return response
