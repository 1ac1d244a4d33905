"""Testes do Reporter: cores, linhas do terminal e gravação em arquivo."""

from pathlib import Path

import pytest
from rich.console import Console

from umbra_enum.enumeration.http_enum import EnumerationReport
from umbra_enum.enumeration.reporter import (
    display_results,
    format_file_line,
    format_terminal_line,
    status_style,
    write_results,
)
from umbra_enum.enumeration.results import IgnorePolicy, Outcome, ResultStore
from umbra_enum.errors import OutputWriteError


def _store(*outcomes: Outcome) -> ResultStore:
    ignore = IgnorePolicy()
    ignore.seed_default()
    store = ResultStore(ignore)
    for outcome in outcomes:
        store.accept(outcome)
    return store


def _report(store: ResultStore, extensions=()) -> EnumerationReport:
    return EnumerationReport(
        target="http://example.com",
        store=store,
        extensions=tuple(extensions),
        candidates=len(store),
        concurrency=10,
        dispatched=len(store),
        failures=0,
        scan_time_s=0.1,
        trace_id="trace-123",
        timestamp="2025-01-01T00:00:00Z",
    )


@pytest.mark.parametrize("status, style", [
    (200, "green"),
    (201, "yellow"),
    (301, "blue"),
    (399, "blue"),
    (403, "red"),
    (599, "red"),
    (101, "yellow"),
    (600, "yellow"),
])
def test_status_style_bands(status: int, style: str) -> None:
    assert status_style(status) == style


def test_line_formats() -> None:
    assert format_terminal_line("admin", 200) == "/admin --> Status: 200"
    assert format_file_line("admin", 200) == "/admin -> Status: 200\n"


def test_display_results_prints_sorted_lines() -> None:
    """Terminal mostra cabeçalho e linhas em ordem crescente de status."""
    store = _store(
        Outcome("zeta", 200),
        Outcome("old   [REDIRECTED TO: /new]", 301),
        Outcome("alpha", 200),
        Outcome("private", 403),
    )
    console = Console(record=True, width=120, color_system=None)

    display_results(_report(store, [".php"]), console)
    text = console.export_text()

    assert "Site: http://example.com" in text
    assert "Method: GET" in text
    assert "Ignoring: [404]" in text
    assert "Extensions: .php" in text
    lines = [line.rstrip() for line in text.splitlines() if "--> Status:" in line]
    assert lines == [
        "/alpha --> Status: 200",
        "/zeta --> Status: 200",
        "/old   [REDIRECTED TO: /new] --> Status: 301",
        "/private --> Status: 403",
    ]


def test_display_results_keeps_long_redirect_on_one_line() -> None:
    """Console de 80 colunas não quebra a linha de um redirect longo."""
    path = "old" + "x" * 40 + "   [REDIRECTED TO: http://example.com/" + "y" * 40 + "]"
    console = Console(record=True, width=80, color_system=None)

    display_results(_report(_store(Outcome(path, 301))), console)

    lines = [line.rstrip() for line in console.export_text().splitlines() if "Status:" in line]
    assert lines == [f"/{path} --> Status: 301"]


def test_display_results_without_extensions() -> None:
    console = Console(record=True, width=120, color_system=None)

    display_results(_report(_store()), console)

    assert "Extensions: N/A" in console.export_text()


def test_write_results_creates_file_in_status_order(tmp_path: Path) -> None:
    """Arquivo novo recebe as linhas ordenadas por status."""
    store = _store(Outcome("b", 301), Outcome("a", 200), Outcome("c", 200))
    path = tmp_path / "out.txt"

    message = write_results(store, path)

    assert message == f"Successfully created and wrote results to {path}"
    assert path.read_text(encoding="utf-8") == (
        "/a -> Status: 200\n"
        "/c -> Status: 200\n"
        "/b -> Status: 301\n"
    )


def test_write_results_appends_to_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("previous\n", encoding="utf-8")

    message = write_results(_store(Outcome("admin", 200)), path)

    assert message == f"Successfully wrote results to {path}"
    assert path.read_text(encoding="utf-8") == "previous\n/admin -> Status: 200\n"


def test_write_results_cannot_create(tmp_path: Path) -> None:
    """Diretório inexistente: erro único, nada é criado."""
    path = tmp_path / "missing" / "out.txt"

    with pytest.raises(OutputWriteError) as excinfo:
        write_results(_store(Outcome("admin", 200)), path)

    assert "Could not create output file" in str(excinfo.value)
    assert not path.exists()


def test_write_results_stops_at_first_write_error(tmp_path: Path, monkeypatch) -> None:
    """Erro no meio da gravação: linhas anteriores ficam, o resto não é escrito."""
    store = _store(Outcome("a", 200), Outcome("b", 200), Outcome("c", 200))
    path = tmp_path / "out.txt"

    import umbra_enum.enumeration.reporter as reporter

    calls = []

    def flaky_format(result_path, status):
        calls.append(result_path)
        if result_path == "b":
            raise OSError("disk full")
        return f"/{result_path} -> Status: {status}\n"

    monkeypatch.setattr(reporter, "format_file_line", flaky_format)

    with pytest.raises(OutputWriteError) as excinfo:
        write_results(store, path)

    assert str(excinfo.value) == f"Couldn't write results to {path}"
    assert excinfo.value.lines_written == 1
    assert calls == ["a", "b"]
    assert path.read_text(encoding="utf-8") == "/a -> Status: 200\n"
