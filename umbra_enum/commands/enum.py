"""
Umbra Enum - Comando: enum
HTTP enumeration (diretórios, páginas).
"""

import asyncio

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn

from umbra_enum.config import EnumConfig
from umbra_enum.core.logger import setup_logger
from umbra_enum.core.utils import generate_trace_id, parse_status_codes, ms_to_human_readable
from umbra_enum.enumeration.http_enum import http_enum
from umbra_enum.enumeration.reporter import display_results, write_results
from umbra_enum.enumeration.results import IgnorePolicy
from umbra_enum.enumeration.target import resolve
from umbra_enum.enumeration.wordlist import WordSet
from umbra_enum.errors import InvalidArgument, InvalidUrl, WordlistIOError, OutputWriteError

console = Console()


def _parse_ignore(ctx, param, value):
    """Callback do click: lista de status inválida é fatal."""
    if value is None:
        return []
    try:
        return parse_status_codes(value)
    except InvalidArgument as e:
        raise click.BadParameter(str(e))


@click.command(name='enum')
@click.argument('url')
@click.option(
    '--wordlist', '-w',
    required=True,
    type=click.Path(dir_okay=False),
    help='Wordlist (uma palavra por linha)'
)
@click.option(
    '--extensions', '-x',
    help='Extensões separadas por vírgula (ex: php,.html,js)'
)
@click.option(
    '--ignore', '-i',
    callback=_parse_ignore,
    help='Status HTTP a ignorar, separados por vírgula. 404 é sempre ignorado'
)
@click.option(
    '--threads', '-t',
    type=click.IntRange(EnumConfig.MIN_THREADS, EnumConfig.MAX_THREADS),
    default=EnumConfig.DEFAULT_THREADS,
    show_default=True,
    help=f'Requisições simultâneas ({EnumConfig.MIN_THREADS} a {EnumConfig.MAX_THREADS})'
)
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False),
    help='Acrescenta o resultado ao arquivo (cria se não existir)'
)
@click.pass_context
def enum_cmd(ctx, url, wordlist, extensions, ignore, threads, output):
    """
    Realiza enumeração HTTP (diretórios, arquivos).

    URL pode omitir o esquema; nesse caso 'http://' é usado.

    Exemplos:

      umbra-enum enum http://10.10.10.10 -w common.txt -t 4

      umbra-enum enum https://example.com -w common.txt -x php,html,js

      umbra-enum enum example.com -w common.txt -i 403,500 -o results.txt
    """
    ctx.ensure_object(dict)

    logger = setup_logger(
        name='umbra.enum',
        level=ctx.obj.get('log_level', EnumConfig.LOG_LEVEL),
        log_file=EnumConfig.LOG_FILE,
        json_format=EnumConfig.LOG_JSON
    )

    trace_id = generate_trace_id()
    logger = logger.bind(trace_id=trace_id)
    logger.debug('config_loaded', config=EnumConfig.get_config_summary())

    # Valida alvo antes de qualquer requisição
    try:
        target = resolve(url)
    except InvalidUrl as e:
        logger.error('invalid_target', target=url)
        console.print(f"[red]❌ Erro:[/red] {e}")
        raise click.Abort()

    try:
        words = WordSet.from_file(wordlist)
    except WordlistIOError as e:
        logger.error('wordlist_unreadable', path=wordlist)
        console.print(f"[red]❌ Erro:[/red] {e}")
        raise click.Abort()

    if extensions:
        words.expand_with_extensions(extensions)

    ignore_policy = IgnorePolicy()
    ignore_policy.seed_default()
    ignore_policy.add_many(ignore)

    if not ctx.obj.get('quiet'):
        console.print()
        console.print(Panel.fit(
            "🔎 [bold cyan]Umbra Enum - A webpage enumeration tool[/bold cyan]\n"
            f"Target: [yellow]{target}[/yellow]\n"
            f"Candidates: [cyan]{len(words)}[/cyan]\n"
            f"Threads: [cyan]{threads}[/cyan]\n"
            f"Trace ID: [dim]{trace_id}[/dim]",
            border_style="cyan"
        ))
        console.print("Starting Scan.")

    try:
        with Progress(
            SpinnerColumn(),
            TimeElapsedColumn(),
            BarColumn(),
            TextColumn("{task.percentage:>3.0f}%"),
            console=console,
            transient=True,
            disable=bool(ctx.obj.get('quiet'))
        ) as progress:
            task = progress.add_task("Enumerando...", total=len(words))

            report = asyncio.run(
                http_enum(
                    target=target,
                    words=words,
                    ignore=ignore_policy,
                    concurrency=threads,
                    trace_id=trace_id,
                    on_dispatch=lambda dispatched: progress.update(task, completed=dispatched)
                )
            )

    except Exception as e:
        logger.error('enum_failed', error=str(e), exc_info=True)
        console.print(f"\n[red]❌ Erro durante scan:[/red] {e}")
        raise click.Abort()

    console.print("Scan Complete")
    console.print(f"Time elapsed: {ms_to_human_readable(report.scan_time_s * 1000)}")
    if report.failures:
        console.print(
            f"[yellow]⚠️  {report.failures}/{report.candidates} requisições falharam "
            f"(erro de transporte, reportadas como 'failed' / 404)[/yellow]"
        )
    display_results(report, console)

    if output:
        try:
            message = write_results(report.store, output)
        except OutputWriteError as e:
            logger.error('output_write_failed', path=output, lines_written=e.lines_written)
            console.print(f"[red]❌ {e}[/red]")
            ctx.exit(1)

        console.print(f"[green]✓[/green] {message}")
