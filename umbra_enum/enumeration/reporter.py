"""
Umbra Enum - Reporter
Exibe os resultados no terminal (rich) e grava o relatório em arquivo.
"""

import os
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from umbra_enum.enumeration.http_enum import EnumerationReport
from umbra_enum.enumeration.results import ResultStore
from umbra_enum.errors import OutputWriteError


# ============================================
# Formatação
# ============================================

def status_style(status: int) -> str:
    """
    Cor por faixa de status.

    200 verde (encontrado), 3xx azul (vale investigar), 4xx/5xx vermelho,
    qualquer outro amarelo (incomum).
    """
    if status == 200:
        return 'green'
    if 300 <= status <= 399:
        return 'blue'
    if 400 <= status <= 599:
        return 'red'
    return 'yellow'


def format_terminal_line(path: str, status: int) -> str:
    return f"/{path} --> Status: {status}"


def format_file_line(path: str, status: int) -> str:
    return f"/{path} -> Status: {status}\n"


# ============================================
# Terminal
# ============================================

def display_header(report: EnumerationReport, console: Console):
    """Painel com os parâmetros do scan."""
    extensions = ', '.join(report.extensions) if report.extensions else 'N/A'
    ignoring = ', '.join(str(code) for code in report.ignore.codes)

    info = (
        f"Site: [yellow]{report.target}[/yellow]\n"
        f"Method: [cyan]GET[/cyan]\n"
        f"Ignoring: [cyan][{ignoring}][/cyan]\n"
        f"Extensions: [cyan]{extensions}[/cyan]\n"
        f"Threads: [cyan]{report.concurrency}[/cyan]\n"
        f"Trace ID: [dim]{report.trace_id}[/dim]"
    )

    console.print(Panel.fit(
        f"🔎 [bold cyan]Scan Results[/bold cyan]\n{info}",
        border_style="cyan"
    ))


def display_results(report: EnumerationReport, console: Console):
    """Uma linha colorida por resultado, em ordem crescente de status."""
    display_header(report, console)

    sorted_results = report.sorted_view()

    if not sorted_results:
        console.print("[yellow]ℹ️  No results.[/yellow]")
        return

    for path, status in sorted_results:
        # Text evita markup em "[" do caminho; soft_wrap mantém uma linha por resultado
        console.print(
            Text(format_terminal_line(path, status), style=status_style(status)),
            soft_wrap=True
        )


# ============================================
# Arquivo
# ============================================

def write_results(store: ResultStore, path: Union[str, Path]) -> str:
    """
    Grava os resultados (ordem crescente de status) em `path`.

    Se o arquivo existe, acrescenta ao final; senão, cria. O primeiro erro
    de escrita interrompe a gravação; linhas já gravadas permanecem.

    Returns:
        str: Mensagem de sucesso

    Raises:
        OutputWriteError: se o arquivo não puder ser criado ou escrito
    """
    path = str(path)
    existed = os.path.exists(path)

    try:
        f = open(path, 'a', encoding='utf-8')
    except OSError:
        raise OutputWriteError(
            path,
            "Could not create output file at provided path. Please check your file path."
        ) from None

    lines_written = 0
    with f:
        try:
            for result_path, status in store.sorted_view():
                f.write(format_file_line(result_path, status))
                f.flush()
                lines_written += 1
        except OSError:
            raise OutputWriteError(
                path,
                f"Couldn't write results to {path}",
                lines_written=lines_written
            ) from None

    if existed:
        return f"Successfully wrote results to {path}"
    return f"Successfully created and wrote results to {path}"
