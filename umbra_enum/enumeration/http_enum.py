"""
Umbra Enum - HTTP Enumeration
Enumeração de diretórios/páginas via GET com concorrência limitada.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import AsyncIterator, Callable, List, Optional, Sequence, Tuple

import aiohttp

from umbra_enum.config import EnumConfig
from umbra_enum.core.logger import (
    LogContext,
    get_logger,
    log_scan_error,
    log_scan_result,
    log_scan_start,
)
from umbra_enum.core.utils import generate_trace_id, get_timestamp_utc
from umbra_enum.enumeration.results import (
    FAILED_OUTCOME,
    IgnorePolicy,
    Outcome,
    ResultStore,
)
from umbra_enum.errors import InvalidArgument


# ============================================
# Configurações
# ============================================

SCAN_TYPE = 'http_enum'

# Falhas de transporte viram o outcome sentinela. ValueError cobre URLs
# que o yarl recusa ao montar a requisição.
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


# ============================================
# Construção de URL e Classificação
# ============================================

def build_url(base: str, candidate: str) -> str:
    """
    Concatena base + '/' + candidato (sem barra duplicada).

    Nenhum percent-encoding é feito aqui; o aiohttp cuida disso no envio.
    """
    if base.endswith('/'):
        return base + candidate
    return base + '/' + candidate


def _is_utf8(value: str) -> bool:
    # O aiohttp decodifica headers com surrogateescape: bytes inválidos
    # só aparecem na hora de re-encodar.
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def classify(candidate: str, status: int, location: Optional[str] = None) -> Outcome:
    """
    Converte uma resposta HTTP em Outcome.

    - 301 com Location: "<candidato>   [REDIRECTED TO: <location>]"
    - 302 com Location: "<candidato>   [<location>]"
    - Qualquer outro caso: candidato puro, status inalterado

    Args:
        candidate: Caminho requisitado
        status: Status HTTP da resposta
        location: Valor do header Location (ou None)

    Returns:
        Outcome
    """
    if location is not None and _is_utf8(location):
        if status == 301:
            return Outcome(f"{candidate}   [REDIRECTED TO: {location}]", status)
        if status == 302:
            return Outcome(f"{candidate}   [{location}]", status)

    return Outcome(candidate, status)


# ============================================
# Scan Engine
# ============================================

class ScanEngine:
    """
    Dispara um GET por candidato com no máximo `concurrency` em voo.

    Um único dispatcher admite trabalho conforme vagas liberam; os outcomes
    chegam fora de ordem numa fila e são consumidos por um único leitor.
    `dispatched` conta candidatos despachados (não concluídos) e é
    publicado via `on_dispatch` a cada despacho.
    """

    def __init__(
        self,
        base: str,
        concurrency: int = EnumConfig.DEFAULT_THREADS,
        session: Optional[aiohttp.ClientSession] = None,
        on_dispatch: Optional[Callable[[int], None]] = None,
        timeout: Optional[float] = EnumConfig.REQUEST_TIMEOUT,
        user_agent: str = EnumConfig.USER_AGENT,
        trace_id: Optional[str] = None
    ):
        if (
            isinstance(concurrency, bool)
            or not isinstance(concurrency, int)
            or not EnumConfig.MIN_THREADS <= concurrency <= EnumConfig.MAX_THREADS
        ):
            raise InvalidArgument(
                f"concurrency must be in the range of {EnumConfig.MIN_THREADS} to "
                f"{EnumConfig.MAX_THREADS} inclusive, got {concurrency!r}"
            )

        self.base = base
        self.concurrency = concurrency
        self.session = session
        self.on_dispatch = on_dispatch
        self.timeout = timeout
        self.user_agent = user_agent

        self.dispatched = 0
        self.completed = 0
        self.failures = 0

        self.logger = get_logger(trace_id=trace_id)

    def _open_session(self) -> aiohttp.ClientSession:
        kwargs = {'headers': {'User-Agent': self.user_agent}}
        if self.timeout is not None:
            kwargs['timeout'] = aiohttp.ClientTimeout(total=self.timeout)
        return aiohttp.ClientSession(**kwargs)

    async def probe(self, session: aiohttp.ClientSession, candidate: str) -> Outcome:
        """
        Envia um GET (sem seguir redirects) e classifica a resposta.

        Falhas de transporte retornam FAILED_OUTCOME ("failed", 404).
        """
        url = build_url(self.base, candidate)

        try:
            async with session.get(url, allow_redirects=False) as response:
                return classify(candidate, response.status, response.headers.get('Location'))

        except TRANSPORT_ERRORS as e:
            self.failures += 1
            self.logger.debug(
                'probe_transport_failure',
                url=url,
                error_type=type(e).__name__,
                error=str(e)
            )
            return FAILED_OUTCOME

    async def iter_outcomes(self, candidates: Sequence[str]) -> AsyncIterator[Outcome]:
        """
        Gera um Outcome por candidato, na ordem em que as respostas chegam.

        Args:
            candidates: Caminhos a requisitar (precisa suportar len())
        """
        if self.session is not None:
            async for outcome in self._drain(self.session, candidates):
                yield outcome
            return

        async with self._open_session() as session:
            async for outcome in self._drain(session, candidates):
                yield outcome

    async def run(self, candidates: Sequence[str]) -> List[Outcome]:
        """Executa o scan completo e retorna todos os outcomes (sem ordem definida)."""
        return [outcome async for outcome in self.iter_outcomes(candidates)]

    async def _drain(
        self,
        session: aiohttp.ClientSession,
        candidates: Sequence[str]
    ) -> AsyncIterator[Outcome]:
        total = len(candidates)
        semaphore = asyncio.Semaphore(self.concurrency)
        queue: asyncio.Queue = asyncio.Queue()
        pending = set()

        async def probe_and_release(candidate: str):
            try:
                item = await self.probe(session, candidate)
            except Exception as e:
                # Erro inesperado (não de transporte): repassa ao consumidor
                item = e
            finally:
                semaphore.release()
            queue.put_nowait(item)

        async def dispatch():
            try:
                for candidate in candidates:
                    await semaphore.acquire()
                    self.dispatched += 1
                    if self.on_dispatch is not None:
                        self.on_dispatch(self.dispatched)

                    task = asyncio.create_task(probe_and_release(candidate))
                    pending.add(task)
                    task.add_done_callback(pending.discard)
            except Exception as e:
                queue.put_nowait(e)

        dispatcher = asyncio.create_task(dispatch())

        try:
            for _ in range(total):
                item = await queue.get()
                if isinstance(item, Exception):
                    raise item

                self.completed += 1
                yield item

            await dispatcher

        finally:
            leftovers = [task for task in (dispatcher, *pending) if not task.done()]
            for task in leftovers:
                task.cancel()
            if leftovers:
                await asyncio.gather(*leftovers, return_exceptions=True)


# ============================================
# Enumeração Completa (Orquestrador)
# ============================================

@dataclass
class EnumerationReport:
    """Resultado de uma enumeração completa."""
    target: str
    store: ResultStore
    extensions: Tuple[str, ...]
    candidates: int
    concurrency: int
    dispatched: int
    failures: int
    scan_time_s: float
    trace_id: str
    timestamp: str

    @property
    def ignore(self) -> IgnorePolicy:
        return self.store.ignore

    def sorted_view(self) -> List[Tuple[str, int]]:
        return self.store.sorted_view()


async def http_enum(
    target: str,
    words: Sequence[str],
    ignore: Optional[IgnorePolicy] = None,
    concurrency: int = EnumConfig.DEFAULT_THREADS,
    trace_id: Optional[str] = None,
    on_dispatch: Optional[Callable[[int], None]] = None,
    session: Optional[aiohttp.ClientSession] = None
) -> EnumerationReport:
    """
    Enumera `words` sob a URL base `target`.

    Todos os outcomes são coletados antes do relatório ficar disponível;
    cada um passa pela IgnorePolicy ao entrar no ResultStore.

    Args:
        target: URL base já resolvida (ver target.resolve)
        words: Candidatos (normalmente um WordSet já expandido)
        ignore: Status a ignorar (padrão: 404)
        concurrency: Requisições simultâneas (1 a 14)
        trace_id: ID de rastreamento
        on_dispatch: Callback chamado com o total despachado
        session: Sessão aiohttp existente (opcional)

    Returns:
        EnumerationReport
    """
    if not trace_id:
        trace_id = generate_trace_id()

    start_time = time.time()
    store = ResultStore(ignore)
    extensions = tuple(getattr(words, 'extensions', ()))

    # Todo log emitido durante o scan (engine incluído) carrega o trace_id
    with LogContext(trace_id=trace_id):
        logger = get_logger()
        engine = ScanEngine(
            target,
            concurrency=concurrency,
            session=session,
            on_dispatch=on_dispatch,
            trace_id=trace_id
        )

        log_scan_start(
            logger,
            target=target,
            scan_type=SCAN_TYPE,
            config={
                'candidates': len(words),
                'extensions': list(extensions),
                'ignore': list(store.ignore.codes),
                'concurrency': concurrency,
            }
        )

        try:
            async for outcome in engine.iter_outcomes(words):
                if store.accept(outcome):
                    logger.debug('result_accepted', path=outcome.path, status=outcome.status)

        except Exception as e:
            log_scan_error(logger, target, SCAN_TYPE, e, {'dispatched': engine.dispatched})
            raise

        scan_time = round(time.time() - start_time, 2)

        if engine.failures:
            logger.warning(
                'probe_failures',
                target=target,
                failures=engine.failures,
                candidates=len(words)
            )

        log_scan_result(logger, target, SCAN_TYPE, len(store), scan_time)

    return EnumerationReport(
        target=target,
        store=store,
        extensions=extensions,
        candidates=len(words),
        concurrency=concurrency,
        dispatched=engine.dispatched,
        failures=engine.failures,
        scan_time_s=scan_time,
        trace_id=trace_id,
        timestamp=get_timestamp_utc(),
    )
