"""
Núcleo da aplicação

config.py : configurações (variáveis de ambiente)
prompts.py : pilares e prompts de sistema
auth.py : sessão e Access Gate
"""
