# api/domain/cargo/rotulo.py
#
# Canonical label of a cargo, used to look it up in the reference table.
#
# Design decisions:
#   - Matching folds case and accents ("Técnico" and "tecnico" are the same
#     word) because cargo names are typed by hand in the admin screen.
#   - Different cargos may map to the same label. Every "Promotor ... Final"
#     variant shares one reference row; reference matching depends on this,
#     so collisions are kept.
#   - normalizar_rotulo is applied to both sides of the lookup (reference
#     labels and derived labels), never stored.
#
# Invariants:
#   - derivar_rotulo and normalizar_rotulo are pure: same input, same output.
#   - derivar_rotulo never returns an empty string for a cargo with a name.
from __future__ import annotations

import re
import unicodedata

from .entities import Cargo
from .enums import GrupoCargo

_CC_PATTERN = re.compile(r"^cc[\s-]?(\d{2})", re.IGNORECASE)

ROTULO_PROCURADOR = "Procurador de Justiça"
ROTULO_PROMOTOR_FINAL = "Promotor de Entrância Final"
ROTULO_PROMOTOR_INTERMEDIARIA = "Promotor de Entrância Intermediária"
ROTULO_PROMOTOR_INICIAL = "Promotor de Entrância Inicial"
ROTULO_PROMOTOR_SUBSTITUTO = "Promotor Substituto"
ROTULO_PROMOTOR_GENERICO = "Promotor de Entrância"
ROTULO_ANALISTA = "Analista Ministerial"
ROTULO_TECNICO = "Técnico Ministerial"
ROTULO_ESTAGIARIO_POS = "Estagiário de Pós Graduação"
ROTULO_ESTAGIARIO_GRADUACAO = "Estagiário de Graduação"


def _sem_acentos(texto: str) -> str:
    decomposto = unicodedata.normalize("NFD", texto)
    return "".join(c for c in decomposto if not unicodedata.combining(c))


def _dobrar(texto: str | None) -> str:
    """Minusculas e sem acentos, para comparacao por substring."""
    return _sem_acentos(texto or "").lower()


def normalizar_rotulo(rotulo: str | None) -> str:
    """'  Técnico  Ministerial - CC ' -> 'tecnico ministerial-cc'."""
    texto = _dobrar(rotulo)
    texto = re.sub(r"[^a-z0-9\s-]", "", texto)
    texto = re.sub(r"\s+", " ", texto)
    texto = re.sub(r"\s*-\s*", "-", texto)
    return texto.strip()


def derivar_rotulo(cargo: Cargo) -> str:
    nome = _dobrar(cargo.nome)
    classe = _dobrar(cargo.classe)

    if cargo.grupo is GrupoCargo.MEMBRO:
        return _rotulo_membro(cargo, nome, classe)

    if cargo.grupo is GrupoCargo.EFETIVO:
        if "analista" in nome:
            return ROTULO_ANALISTA
        if "tecnico" in nome:
            return ROTULO_TECNICO
        return cargo.nome

    if cargo.grupo is GrupoCargo.COMISSIONADO:
        nome_limpo = (cargo.nome or "").strip()
        match = _CC_PATTERN.match(nome_limpo)
        if match:
            return f"CC-{match.group(1)}"
        return nome_limpo

    if cargo.grupo is GrupoCargo.ESTAGIARIO:
        if "pos" in nome or "pos" in classe:
            return ROTULO_ESTAGIARIO_POS
        return ROTULO_ESTAGIARIO_GRADUACAO

    return cargo.nome


def _rotulo_membro(cargo: Cargo, nome: str, classe: str) -> str:
    if "procurador" in nome:
        return ROTULO_PROCURADOR
    if "promotor" not in nome:
        return cargo.nome
    if "final" in classe:
        return ROTULO_PROMOTOR_FINAL
    if "intermedi" in classe:
        return ROTULO_PROMOTOR_INTERMEDIARIA
    if "inicial" in classe:
        return ROTULO_PROMOTOR_INICIAL
    if "substituto" in nome or "substituto" in classe:
        return ROTULO_PROMOTOR_SUBSTITUTO
    return ROTULO_PROMOTOR_GENERICO
