# api/domain/erros.py
from __future__ import annotations


class ErroArmazenamento(Exception):
    """Falha de leitura ou escrita no armazenamento de registros.

    Carrega o nome da operacao para que o chamador saiba qual passo falhou
    (ex.: substituir_itens.inserir depois de substituir_itens.remover).
    """

    def __init__(self, operacao: str, mensagem: str) -> None:
        super().__init__(f"{operacao}: {mensagem}")
        self.operacao = operacao
        self.mensagem = mensagem


class AcessoNegado(Exception):
    """Operacao restrita a administradores."""
