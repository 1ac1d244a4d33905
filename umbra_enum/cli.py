"""
Umbra Enum - CLI Principal
Entry point para todos os comandos do Umbra Enum.
"""

import sys

import click

from umbra_enum import __version__
from umbra_enum.commands import enum
from umbra_enum.config import EnumConfig
from umbra_enum.core.logger import get_logger

# Configuração global
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name='Umbra Enum')
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Ativa modo verbose (DEBUG logs)'
)
@click.option(
    '--quiet', '-q',
    is_flag=True,
    help='Modo silencioso (apenas erros)'
)
@click.pass_context
def cli(ctx, verbose, quiet):
    """
    🔎 Umbra Enum - Enumeração de diretórios e páginas web

    Exemplos de uso:

      umbra-enum enum http://localhost:8080 -w common.txt

      umbra-enum enum example.com -w common.txt -x php,html -t 4

    Use 'umbra-enum COMANDO --help' para ver opções de cada comando.
    """
    if quiet:
        log_level = 'ERROR'
    elif verbose:
        log_level = 'DEBUG'
    else:
        log_level = EnumConfig.LOG_LEVEL

    # Armazena no contexto para os subcomandos usarem
    ctx.ensure_object(dict)
    ctx.obj['log_level'] = log_level
    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet


# ============================================
# Registra comandos
# ============================================

cli.add_command(enum.enum_cmd)


# ============================================
# Entry point
# ============================================

def main():
    """Entry point principal."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        click.echo('\n\n⚠️  Operação cancelada pelo usuário.', err=True)
        sys.exit(130)
    except Exception as e:
        logger = get_logger()
        logger.error('cli_unexpected_error', error=str(e), exc_info=True)
        click.echo(f'\n❌ Erro inesperado: {e}', err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
