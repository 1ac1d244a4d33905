"""
Umbra Enum - Exceptions
Erros fatais da enumeração HTTP.

Falhas de transporte por requisição NÃO estão aqui: elas viram o outcome
sentinela ("failed", 404) dentro do ScanEngine e nunca interrompem o scan.
"""


class EnumError(Exception):
    """Base para todos os erros do Umbra Enum."""


class InvalidUrl(EnumError):
    """URL base não pôde ser interpretada. Abortado antes de qualquer requisição."""

    def __init__(self, raw: str, message: str = None):
        self.raw = raw
        super().__init__(
            message or "Unable to parse provided url. Please check your URL argument."
        )


class WordlistIOError(EnumError):
    """Wordlist ilegível ou com linha que não decodifica em UTF-8."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(message)


class InvalidArgument(EnumError, ValueError):
    """Lista de status ou número de threads mal formados."""


class OutputWriteError(EnumError):
    """Falha ao gravar o relatório em arquivo (linhas já gravadas são mantidas)."""

    def __init__(self, path, message: str, lines_written: int = 0):
        self.path = path
        self.lines_written = lines_written
        super().__init__(message)
