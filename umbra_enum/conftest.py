"""Fixtures compartilhadas pelos testes do Umbra Enum."""

import socket

import pytest

from umbra_enum.core.logger import setup_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Logger em WARNING para não poluir a saída dos testes."""
    setup_logger(name='umbra.enum.test', level='WARNING')
    yield


@pytest.fixture
def closed_port() -> int:
    """Porta local sem ninguém escutando (conexão recusada)."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        return sock.getsockname()[1]


@pytest.fixture
def wordlist_file(tmp_path):
    """Cria uma wordlist temporária a partir de uma lista de linhas."""
    def _write(lines, name='words.txt'):
        path = tmp_path / name
        path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
        return path
    return _write
