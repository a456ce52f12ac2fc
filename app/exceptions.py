from typing import Optional


class AuthError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ChatError(Exception):
    """Falha do gateway de chat já convertida para status HTTP + corpo JSON"""

    status_code = 500
    error = "Erro ao processar mensagem"

    def __init__(self, message: Optional[str] = None):
        self.message = message
        super().__init__(message or self.error)

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body


class InvalidInput(ChatError):
    status_code = 400
    error = "Mensagens inválidas"


class ConfigurationError(ChatError):
    status_code = 500
    error = "API Key da OpenAI não configurada"

    def __init__(self):
        super().__init__(
            "Configure a variável OPENAI_API_KEY nas configurações do projeto"
        )


class EmptyResponse(ChatError):
    status_code = 500

    def __init__(self):
        super().__init__("Resposta vazia da OpenAI")


class InvalidUpstreamRequest(ChatError):
    status_code = 400
    error = "Requisição inválida para OpenAI"


class Unauthorized(ChatError):
    status_code = 401
    error = "API Key inválida"

    def __init__(self):
        super().__init__("Verifique sua chave da OpenAI nas configurações")


class RateLimited(ChatError):
    status_code = 429
    error = "Limite de requisições excedido"

    def __init__(self):
        super().__init__("Aguarde alguns instantes e tente novamente")


class InternalError(ChatError):
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Erro desconhecido")
