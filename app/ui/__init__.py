"""
Interface da Lumi

demo.py : dashboard + chat (Gradio)
login.py : página de login/cadastro
client.py : cliente HTTP usado pela interface
"""
