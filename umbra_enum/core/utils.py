"""
Umbra Enum - Core Utilities
Funções puras para parsing de argumentos e helpers gerais.
"""

import uuid
from typing import List
from datetime import datetime, timezone

from umbra_enum.errors import InvalidArgument


# ============================================
# Parsing de Argumentos
# ============================================

def split_csv(value: str) -> List[str]:
    """
    Divide uma lista separada por vírgula, sem remover espaços nem itens vazios.

    Exemplos:
        "php,html" -> ["php", "html"]
        "php,"     -> ["php", ""]
    """
    return value.split(',')


def parse_status_codes(value: str) -> List[int]:
    """
    Converte "404,403,500" em [404, 403, 500].

    Tudo ou nada: um único token inválido invalida a lista inteira.

    Args:
        value: String com códigos HTTP separados por vírgula

    Returns:
        List[int]: Códigos na ordem fornecida

    Raises:
        InvalidArgument: se algum token não for um inteiro entre 0 e 65535
    """
    codes = []

    for token in split_csv(value):
        # int() aceitaria " 403" e "4_03"; só dígitos ASCII (com "+" opcional)
        digits = token[1:] if token.startswith("+") else token
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidArgument(f"invalid status code: {token!r}")

        code = int(digits)

        if not 0 <= code <= 65535:
            raise InvalidArgument(f"status code out of range: {code}")

        codes.append(code)

    return codes


# ============================================
# Geração de IDs e Timestamps
# ============================================

def generate_trace_id() -> str:
    """
    Gera um trace_id único para correlação de logs.

    Returns:
        str: UUID v4 como string
    """
    return str(uuid.uuid4())


def get_timestamp_utc() -> str:
    """
    Retorna timestamp atual em formato ISO 8601 UTC.

    Returns:
        str: Timestamp no formato '2025-11-29T15:00:00Z'
    """
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


def ms_to_human_readable(milliseconds: float) -> str:
    """
    Converte milissegundos para formato legível.

    Args:
        milliseconds: Tempo em ms

    Returns:
        str: Tempo formatado
    """
    if milliseconds < 1000:
        return f"{milliseconds:.2f}ms"

    seconds = milliseconds / 1000

    if seconds < 60:
        return f"{seconds:.2f}s"

    minutes = seconds / 60
    return f"{minutes:.2f}min"
