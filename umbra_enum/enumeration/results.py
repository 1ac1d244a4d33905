"""
Umbra Enum - Results
Outcome de cada requisição, política de status ignorados e armazenamento
ordenado dos resultados aceitos.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from umbra_enum.config import EnumConfig


# ============================================
# Outcome
# ============================================

@dataclass(frozen=True)
class Outcome:
    """Resultado de uma requisição: (caminho exibido, status HTTP)."""
    path: str
    status: int

    def __iter__(self):
        return iter((self.path, self.status))


FAILED_PATH = 'failed'

# Sentinela para falhas de transporte. Como 404 está na lista padrão de
# ignorados, a falha some do relatório a menos que o usuário remova o 404.
FAILED_OUTCOME = Outcome(FAILED_PATH, 404)


# ============================================
# Ignore Policy
# ============================================

class IgnorePolicy:
    """
    Conjunto de status HTTP que não entram no relatório.

    Mantém a ordem de inserção (para exibição) sem duplicatas.
    """

    def __init__(self, statuses: Iterable[int] = ()):
        self._codes: List[int] = []
        self.add_many(statuses)

    def add_many(self, statuses: Iterable[int]) -> None:
        for status in statuses:
            if status not in self._codes:
                self._codes.append(status)

    def seed_default(self) -> None:
        """Garante que os status padrão (404) estão presentes."""
        self.add_many(EnumConfig.DEFAULT_IGNORE)

    def contains(self, status: int) -> bool:
        return status in self._codes

    @property
    def codes(self) -> Tuple[int, ...]:
        return tuple(self._codes)

    def __contains__(self, status: int) -> bool:
        return self.contains(status)

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"IgnorePolicy({self._codes!r})"


# ============================================
# Result Store
# ============================================

class ResultStore:
    """
    Resultados aceitos, indexados pelo caminho exibido.

    Só o consumidor único do scan escreve aqui, um outcome por vez.
    """

    def __init__(self, ignore: Optional[IgnorePolicy] = None):
        if ignore is None:
            ignore = IgnorePolicy()
            ignore.seed_default()
        self.ignore = ignore
        self._found: Dict[str, int] = {}

    def accept(self, outcome: Outcome) -> bool:
        """
        Armazena o outcome se o status não for ignorado.

        Caminho repetido sobrescreve o anterior (o último vence).

        Returns:
            bool: True se o outcome foi armazenado
        """
        if self.ignore.contains(outcome.status):
            return False

        self._found[outcome.path] = outcome.status
        return True

    def items(self) -> List[Tuple[str, int]]:
        """Resultados em ordem alfabética de caminho."""
        return sorted(self._found.items())

    def sorted_view(self) -> List[Tuple[str, int]]:
        """
        Resultados ordenados por status crescente.

        Ordenação estável: empates mantêm a ordem alfabética de caminho.
        """
        return sorted(self.items(), key=lambda item: item[1])

    def get(self, path: str) -> Optional[int]:
        return self._found.get(path)

    def __contains__(self, path: str) -> bool:
        return path in self._found

    def __len__(self) -> int:
        return len(self._found)
