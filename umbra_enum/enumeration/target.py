"""
Umbra Enum - Target Resolver
Normaliza o host informado pelo usuário em uma URL base válida.
"""

from yarl import URL

from umbra_enum.errors import InvalidUrl


SCHEMES = ('http://', 'https://')
DEFAULT_SCHEME = 'http://'


def ensure_scheme(raw: str) -> str:
    """
    Prefixa 'http://' apenas quando nenhum esquema http(s) foi informado.

    Exemplos:
        "10.10.10.10"          -> "http://10.10.10.10"
        "https://example.com"  -> "https://example.com"
    """
    if raw.lower().startswith(SCHEMES):
        return raw
    return DEFAULT_SCHEME + raw


def resolve(raw: str) -> str:
    """
    Valida e canoniza a URL base do scan.

    Args:
        raw: Host, IP ou URL (esquema opcional)

    Returns:
        str: URL canônica, compartilhada (somente leitura) por todas as requisições

    Raises:
        InvalidUrl: se a URL não puder ser interpretada
    """
    candidate = ensure_scheme(raw.strip())

    try:
        url = URL(candidate)
        if not url.raw_host:
            raise InvalidUrl(raw)
        # URL(str) não valida o host; with_host aplica as regras de reg-name
        # (aceita "_", recusa espaço)
        url.with_host(url.raw_host)
    except ValueError:
        raise InvalidUrl(raw) from None

    return str(url)
