"""
Página de login/cadastro

HTML simples servido pelo FastAPI em /login. Os formulários postam para
/login e /login/signup.
"""

from html import escape
from typing import Optional

LOGIN_PAGE = """<!DOCTYPE html>
<html lang="pt-BR">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Lumi - Entrar</title>
  <style>
    body {{ font-family: system-ui, sans-serif; background: #f8fafc; display: flex;
           justify-content: center; align-items: center; min-height: 100vh; margin: 0; }}
    main {{ width: 100%; max-width: 420px; padding: 16px; }}
    h1 {{ text-align: center; margin-bottom: 4px; }}
    p.subtitle {{ text-align: center; color: #475569; margin-top: 0; }}
    form {{ background: #fff; border: 1px solid #e2e8f0; border-radius: 12px;
            padding: 20px; margin-bottom: 16px; display: grid; gap: 10px; }}
    input {{ padding: 10px; border: 1px solid #cbd5e1; border-radius: 8px; }}
    button {{ padding: 10px; border: 0; border-radius: 8px; color: #fff;
              background: linear-gradient(90deg, #3b82f6, #9333ea); cursor: pointer; }}
    .alert {{ padding: 10px; border-radius: 8px; margin-bottom: 12px; }}
    .error {{ background: #fef2f2; color: #b91c1c; }}
    .success {{ background: #f0fdf4; color: #15803d; }}
  </style>
</head>
<body>
  <main>
    <h1>Bem-vindo à Lumi</h1>
    <p class="subtitle">Seu assistente inteligente completo</p>
    {alerts}
    <form method="post" action="/login">
      <h2>Entrar</h2>
      <input type="email" name="email" placeholder="seu@email.com" required>
      <input type="password" name="password" placeholder="Senha" required>
      <button type="submit">Entrar</button>
    </form>
    <form method="post" action="/login/signup">
      <h2>Criar conta</h2>
      <input type="text" name="name" placeholder="Seu nome" required>
      <input type="email" name="email" placeholder="seu@email.com" required>
      <input type="password" name="password" placeholder="Senha (mínimo de 6 caracteres)" required>
      <input type="password" name="confirm_password" placeholder="Confirme a senha" required>
      <button type="submit">Criar conta</button>
    </form>
  </main>
</body>
</html>
"""


def render_login_page(error: Optional[str] = None, success: Optional[str] = None) -> str:
    alerts = ""
    if error:
        alerts += f'<div class="alert error">{escape(error)}</div>'
    if success:
        alerts += f'<div class="alert success">{escape(success)}</div>'
    return LOGIN_PAGE.format(alerts=alerts)
