# api/domain/usuario/value_objects.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UsuarioAtual:
    """Capacidade recebida do gateway de autenticacao. Nao ha sessao aqui."""

    email: str
    is_admin: bool = False

    @classmethod
    def de_cabecalhos(
        cls,
        email: str | None,
        admin: str | None,
        email_admin_fixo: str = "",
    ) -> UsuarioAtual:
        """Monta a partir de X-User-Email / X-User-Admin.

        O e-mail administrativo configurado e sempre admin, mesmo sem o
        cabecalho de papel.
        """
        email_normalizado = (email or "").strip().lower()
        is_admin = (admin or "").strip().lower() in {"1", "true", "sim"}
        if email_admin_fixo and email_normalizado == email_admin_fixo.strip().lower():
            is_admin = True
        return cls(email=email_normalizado, is_admin=is_admin)
