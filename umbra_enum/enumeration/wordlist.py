"""
Umbra Enum - Wordlist
Conjunto ordenado de candidatos (WordSet) e expansão por extensões.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from umbra_enum.core.utils import split_csv
from umbra_enum.errors import WordlistIOError


class WordSet:
    """
    Lista ordenada de caminhos a enumerar.

    Mantém a ordem de inserção e NÃO remove duplicatas: cada entrada gera
    uma requisição. Só deve ser alterada antes do scan começar.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: List[str] = list(words)
        self._extensions: List[str] = []

    # ============================================
    # Carga
    # ============================================

    def load(self, lines: Iterable[str]) -> 'WordSet':
        """Adiciona cada linha como está (sem strip, sem dedup)."""
        self._words.extend(lines)
        return self

    def extend_from_file(self, path: Union[str, Path]) -> 'WordSet':
        """
        Lê a wordlist do disco, uma palavra por linha.

        Apenas o terminador (LF ou CRLF) é removido; linhas em branco viram
        candidatos vazios.

        Args:
            path: Caminho da wordlist

        Raises:
            WordlistIOError: arquivo inexistente/ilegível ou linha que não
                decodifica em UTF-8
        """
        words = []

        try:
            # newline='\n' divide só em '\n'; um '\r' isolado faz parte da palavra
            with open(path, 'r', encoding='utf-8', newline='\n') as f:
                for line in f:
                    if line.endswith('\n'):
                        line = line[:-1]
                        if line.endswith('\r'):
                            line = line[:-1]
                    words.append(line)
        except UnicodeDecodeError:
            raise WordlistIOError(
                path,
                "Error when reading from file. Please check the contents of the provided wordlist."
            ) from None
        except OSError:
            raise WordlistIOError(
                path,
                "Error when handling file. Please check the provided file path."
            ) from None

        # Só altera o WordSet se o arquivo inteiro foi lido
        self._words.extend(words)
        return self

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'WordSet':
        return cls().extend_from_file(path)

    # ============================================
    # Expansão por Extensões
    # ============================================

    def expand_with_extensions(self, extensions: str) -> 'WordSet':
        """
        Adiciona "palavra + extensão" para cada palavra existente.

        "php,.html" -> [".php", ".html"]. As palavras originais continuam no
        conjunto. O número de palavras é capturado ANTES do loop: chamar
        duas vezes compõe (a segunda chamada também expande as variantes
        criadas pela primeira, com todas as extensões acumuladas).

        Args:
            extensions: Lista separada por vírgula, com ou sem ponto
        """
        for extension in split_csv(extensions):
            if not extension.startswith('.'):
                extension = '.' + extension
            self._extensions.append(extension)

        snapshot = len(self._words)
        for index in range(snapshot):
            word = self._words[index]
            for extension in self._extensions:
                self._words.append(word + extension)

        return self

    # ============================================
    # Acesso
    # ============================================

    @property
    def extensions(self) -> Tuple[str, ...]:
        return tuple(self._extensions)

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def is_empty(self) -> bool:
        return not self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, index):
        return self._words[index]

    def __repr__(self) -> str:
        return f"WordSet(words={len(self._words)}, extensions={self._extensions!r})"
