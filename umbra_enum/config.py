"""
================================================================================
                    UMBRA ENUM - Global Configuration (config.py)
================================================================================
Configuração global da enumeração HTTP.
Centraliza todas as configurações em um único lugar.
================================================================================
"""

import os
from typing import Optional, Tuple


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


def _bounded_int(name: str, default: int, low: int, high: int) -> int:
    """Inteiro de variável de ambiente, limitado a [low, high]."""
    value = int(os.getenv(name, default))
    return max(low, min(value, high))


class EnumConfig:
    """
    Configuração global do Umbra Enum.

    Todas as configurações do sistema em um único lugar.
    Pode ser sobrescrita por variáveis de ambiente (prefixo UMBRA_ENUM_).
    """

    # ========================================================================
    #                          CONFIGURAÇÕES GERAIS
    # ========================================================================

    SYSTEM_NAME = "Umbra Enum"
    VERSION = "0.1.0"

    # ========================================================================
    #                          LOGGING
    # ========================================================================

    # Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LOG_LEVEL = os.getenv("UMBRA_ENUM_LOG_LEVEL", "INFO")

    # Arquivo de log opcional (além do stderr)
    LOG_FILE = os.getenv("UMBRA_ENUM_LOG_FILE") or None

    # Logs em JSON em vez do formato legível
    LOG_JSON = os.getenv("UMBRA_ENUM_LOG_JSON", "false").lower() == "true"

    # ========================================================================
    #                          CONCORRÊNCIA
    # ========================================================================

    # Limites rígidos (evita DoS acidental no alvo)
    MIN_THREADS = 1
    MAX_THREADS = 14

    # Requisições simultâneas padrão; fora dos limites vira o limite mais próximo
    DEFAULT_THREADS = _bounded_int("UMBRA_ENUM_THREADS", 10, MIN_THREADS, MAX_THREADS)

    # ========================================================================
    #                          HTTP
    # ========================================================================

    # Status ignorados por padrão
    DEFAULT_IGNORE: Tuple[int, ...] = (404,)

    USER_AGENT = os.getenv("UMBRA_ENUM_USER_AGENT", f"umbra-enum/{VERSION}")

    # Timeout total por requisição em segundos; None = padrão do aiohttp
    REQUEST_TIMEOUT = _optional_float("UMBRA_ENUM_TIMEOUT")

    # ========================================================================
    #                          MÉTODOS AUXILIARES
    # ========================================================================

    @classmethod
    def get_config_summary(cls) -> dict:
        """Retorna um resumo das configurações"""
        return {
            'system': {
                'name': cls.SYSTEM_NAME,
                'version': cls.VERSION,
            },
            'logging': {
                'level': cls.LOG_LEVEL,
                'file': cls.LOG_FILE,
                'json': cls.LOG_JSON,
            },
            'concurrency': {
                'default_threads': cls.DEFAULT_THREADS,
                'min_threads': cls.MIN_THREADS,
                'max_threads': cls.MAX_THREADS,
            },
            'http': {
                'default_ignore': list(cls.DEFAULT_IGNORE),
                'user_agent': cls.USER_AGENT,
                'request_timeout': cls.REQUEST_TIMEOUT,
            },
        }
