from enum import StrEnum


class GrupoCargo(StrEnum):
    MEMBRO = "MEMBRO"              # Membros (procuradores, promotores)
    EFETIVO = "EFETIVO"            # Servidores efetivos
    COMISSIONADO = "COMISSIONADO"  # Cargos em comissao (CC-NN)
    ESTAGIARIO = "ESTAGIARIO"      # Estagiarios de graduacao e pos


class OrigemCusto(StrEnum):
    CALCULADO = "CALCULADO"
    REFERENCIA = "REFERENCIA"


class RegraAcervo(StrEnum):
    PROPORCIONAL = "PROPORCIONAL"  # (base / 30) * 7
    FIXO = "FIXO"                  # valor fixo por cargo
