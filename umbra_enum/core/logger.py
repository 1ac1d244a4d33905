"""
Umbra Enum - Structured Logging
Sistema de logging com trace_id, níveis estruturados e output colorido.
"""

import sys
import logging
from pathlib import Path
from typing import Optional, Any, Dict
from datetime import datetime, timezone
import structlog
from colorama import Fore, Style, init as colorama_init

# Inicializa colorama para Windows
colorama_init()


# ============================================
# Configuração de Cores por Nível
# ============================================

LOG_COLORS = {
    'debug': Fore.CYAN,
    'info': Fore.GREEN,
    'warning': Fore.YELLOW,
    'error': Fore.RED,
    'critical': Fore.RED + Style.BRIGHT,
}


# ============================================
# Processors Customizados para Structlog
# ============================================

def add_timestamp(logger, method_name, event_dict):
    """Adiciona timestamp UTC no formato ISO 8601."""
    event_dict['timestamp'] = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')
    return event_dict


def add_log_level(logger, method_name, event_dict):
    """Adiciona nível do log."""
    event_dict['level'] = method_name.upper()
    return event_dict


def add_trace_id(logger, method_name, event_dict):
    """Adiciona trace_id se disponível no contexto."""
    if 'trace_id' not in event_dict:
        event_dict['trace_id'] = None
    return event_dict


def colorize_level(logger, method_name, event_dict):
    """Colore o campo 'level' quando a saída é um terminal."""
    if sys.stderr.isatty():
        level = event_dict.get('level', 'INFO')
        color = LOG_COLORS.get(level.lower(), Fore.WHITE)
        event_dict['level'] = f"{color}{level}{Style.RESET_ALL}"
    return event_dict


# ============================================
# Setup do Logger
# ============================================

_global_logger: Optional[structlog.BoundLogger] = None


def setup_logger(
    name: str = 'umbra.enum',
    level: str = 'INFO',
    log_file: Optional[Path] = None,
    json_format: bool = False
) -> structlog.BoundLogger:
    """
    Configura e retorna um logger estruturado.

    Os logs vão para stderr; stdout fica reservado para o relatório.

    Args:
        name: Nome do logger
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path para arquivo de log (opcional)
        json_format: Se True, usa formato JSON; se False, formato legível

    Returns:
        structlog.BoundLogger: Logger configurado
    """
    global _global_logger

    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_timestamp,
        add_log_level,
        add_trace_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(colorize_level)
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _global_logger = structlog.get_logger(name)
    return _global_logger


def get_logger(
    name: str = 'umbra.enum',
    trace_id: Optional[str] = None,
    **kwargs
) -> structlog.BoundLogger:
    """
    Retorna o logger global ou cria um novo.

    Args:
        name: Nome do logger
        trace_id: ID de rastreamento para correlação
        **kwargs: Contexto adicional para bind

    Returns:
        structlog.BoundLogger: Logger configurado
    """
    if _global_logger is None:
        setup_logger(name=name)

    context = {}
    if trace_id:
        context['trace_id'] = trace_id

    context.update(kwargs)

    if context:
        return _global_logger.bind(**context)

    return _global_logger


# ============================================
# Context Manager para Trace ID
# ============================================

class LogContext:
    """
    Context manager para adicionar trace_id automaticamente aos logs.

    Exemplo:
        with LogContext(trace_id='abc-123'):
            logger.info('mensagem')  # Vai incluir trace_id='abc-123'
    """

    def __init__(self, trace_id: Optional[str] = None, **kwargs):
        self.context = kwargs
        if trace_id:
            self.context['trace_id'] = trace_id

    def __enter__(self):
        if self.context:
            structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.context:
            structlog.contextvars.unbind_contextvars(*self.context.keys())
        return False


# ============================================
# Helpers de Logging
# ============================================

def log_scan_start(
    logger: structlog.BoundLogger,
    target: str,
    scan_type: str,
    config: Dict[str, Any]
):
    """
    Log padronizado para início de scan.

    Args:
        logger: Logger instance
        target: Alvo do scan
        scan_type: Tipo de scan (http_enum)
        config: Configurações do scan
    """
    logger.info(
        'scan_started',
        target=target,
        scan_type=scan_type,
        config=config
    )


def log_scan_result(
    logger: structlog.BoundLogger,
    target: str,
    scan_type: str,
    results_count: int,
    duration: float
):
    """Log padronizado para resultado de scan."""
    logger.info(
        'scan_completed',
        target=target,
        scan_type=scan_type,
        results_count=results_count,
        duration_s=round(duration, 2)
    )


def log_scan_error(
    logger: structlog.BoundLogger,
    target: str,
    scan_type: str,
    error: Exception,
    context: Optional[Dict[str, Any]] = None
):
    """
    Log padronizado para erro em scan.

    Args:
        logger: Logger instance
        target: Alvo do scan
        scan_type: Tipo de scan
        error: Exceção capturada
        context: Contexto adicional
    """
    log_data = {
        'target': target,
        'scan_type': scan_type,
        'error_type': type(error).__name__,
        'error_message': str(error),
    }

    if context:
        log_data.update(context)

    logger.error('scan_failed', **log_data)
