"""
Umbra Enum - Enumeração de diretórios e páginas web

Uso básico:
    import asyncio
    from umbra_enum import WordSet, IgnorePolicy, resolve, http_enum

    words = WordSet.from_file('common.txt').expand_with_extensions('php,html')
    report = asyncio.run(http_enum(resolve('example.com'), words))
    for path, status in report.sorted_view():
        print(path, status)
"""

__version__ = "0.1.0"

from umbra_enum.config import EnumConfig
from umbra_enum.errors import (
    EnumError,
    InvalidUrl,
    WordlistIOError,
    InvalidArgument,
    OutputWriteError,
)
from umbra_enum.enumeration.wordlist import WordSet
from umbra_enum.enumeration.target import resolve
from umbra_enum.enumeration.results import Outcome, IgnorePolicy, ResultStore, FAILED_OUTCOME
from umbra_enum.enumeration.http_enum import ScanEngine, EnumerationReport, http_enum

__all__ = [
    'EnumConfig',
    'EnumError',
    'InvalidUrl',
    'WordlistIOError',
    'InvalidArgument',
    'OutputWriteError',
    'WordSet',
    'resolve',
    'Outcome',
    'IgnorePolicy',
    'ResultStore',
    'FAILED_OUTCOME',
    'ScanEngine',
    'EnumerationReport',
    'http_enum',
]
