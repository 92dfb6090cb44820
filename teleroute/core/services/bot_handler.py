"""
Bot handler: the update dispatch engine.

The bot handler keeps an ordered registry of (guard, handler) entries and
runs a loop that pulls updates from an update source, evaluates the guards
in registration order and invokes the first handler whose guard holds.
"""

import asyncio
import inspect
import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from ..domain.updates import Update
from ..exceptions import HandlerStateError
from ..interfaces.dispatching import Handler, IBotHandler, IUpdateSource
from ..interfaces.lifecycle import IComponent
from ..predicates.base import All, PredicateLike

logger = logging.getLogger(__name__)


ErrorHandler = Callable[[Update, Exception], Any]
"""Callback receiving ``(update, error)`` when a handler fails."""


class HandlerState(Enum):
    """Lifecycle states of the bot handler."""
    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class HandlerEntry:
    """A registered handler and the guard that activates it."""

    guard: All
    """Conjunction of the predicates given at registration."""

    handler: Handler
    """Callback invoked with ``(bot, update)``."""

    @property
    def handler_name(self) -> str:
        return getattr(self.handler, '__qualname__', type(self.handler).__name__)


class BotHandler(IComponent, IBotHandler):
    """
    Predicate-routed update dispatcher.

    Updates are considered one at a time, in the order the source yields
    them. For each update the registry is scanned in registration order and
    only the first matching handler runs; updates matching no entry are
    dropped. A failing handler is logged and reported to ``error_handler``
    without stopping the loop.

    By default each handler runs to completion before the next update is
    fetched. With ``max_workers > 0`` handler calls are offloaded to at most
    that many concurrent tasks while guard evaluation stays in source order.

    The handler moves through ``CREATED -> RUNNING -> STOPPED``; it cannot
    be restarted once stopped.
    """

    def __init__(self, bot: Any, updates: IUpdateSource, config: Any = None, *,
                 max_workers: Optional[int] = None,
                 source_error_delay: Optional[float] = None,
                 stop_timeout: Optional[float] = None,
                 error_handler: Optional[ErrorHandler] = None) -> None:
        """
        Args:
            bot: Client handle passed to every handler
            updates: Source the loop pulls updates from
            config: ``DispatcherConfig`` or any object with the same
                attributes; missing attributes keep their defaults
            max_workers: Overrides ``config.max_workers``
            source_error_delay: Overrides ``config.source_error_delay``
            stop_timeout: Overrides ``config.stop_timeout``
            error_handler: Callback receiving ``(update, error)`` on handler failure
        """
        if not isinstance(updates, IUpdateSource):
            raise TypeError(
                f"updates must implement IUpdateSource, got {type(updates).__name__}")

        self._bot = bot
        self._updates = updates
        self._handlers: List[HandlerEntry] = []
        self._lock = threading.Lock()
        self._state = HandlerState.CREATED
        self._error_handler = error_handler

        def setting(value: Any, attribute: str, default: Any) -> Any:
            if value is not None:
                return value
            return getattr(config, attribute, default)

        self._max_workers = 0
        self._source_error_delay = 0.0
        self._stop_timeout = 0.0
        self._apply_settings(
            setting(max_workers, 'max_workers', 0),
            setting(source_error_delay, 'source_error_delay', 1.0),
            setting(stop_timeout, 'stop_timeout', 10.0)
        )

        self._stop_requested = asyncio.Event()
        self._stopped = asyncio.Event()
        self._run_task: Optional[asyncio.Task[Any]] = None
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._tasks: Set[asyncio.Task[Any]] = set()

        # Metrics
        self._metrics: Dict[str, Any] = {
            'updates_received': 0,
            'updates_handled': 0,
            'updates_dropped': 0,
            'handler_errors': 0,
            'guard_errors': 0,
            'source_errors': 0,
            'handlers_count': 0,
            'avg_processing_time': 0.0,
            'processing_times': []
        }

    @property
    def name(self) -> str:
        """Get component name."""
        return "BotHandler"

    @property
    def version(self) -> str:
        """Get component version."""
        return "1.0.0"

    @property
    def bot(self) -> Any:
        """Client handle passed to every handler."""
        return self._bot

    @property
    def state(self) -> HandlerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is HandlerState.RUNNING

    @property
    def handlers(self) -> Tuple[HandlerEntry, ...]:
        """Snapshot of the registry in registration order."""
        with self._lock:
            return tuple(self._handlers)

    def handle(self, handler: Handler, *predicates: PredicateLike) -> HandlerEntry:
        """
        Register a handler guarded by the conjunction of ``predicates``.

        With no predicates the handler matches every update. Registration
        order decides which of several matching handlers runs.

        Args:
            handler: Callback invoked with ``(bot, update)``; may be async
            *predicates: Predicates or plain callables over an update

        Returns:
            The registered entry

        Raises:
            TypeError: If the handler or a predicate is not callable
        """
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")

        entry = HandlerEntry(guard=All(*predicates), handler=handler)

        with self._lock:
            self._handlers.append(entry)
            self._metrics['handlers_count'] = len(self._handlers)

        logger.debug(f"Registered handler {entry.handler_name} with guard {entry.guard!r}")
        return entry

    async def start(self) -> None:
        """
        Run the dispatch loop until stopped or the source is exhausted.

        Raises:
            HandlerStateError: If the handler is already running or stopped
        """
        with self._lock:
            if self._state is not HandlerState.CREATED:
                raise HandlerStateError(self._state.value, "start")
            self._state = HandlerState.RUNNING

        self._run_task = asyncio.current_task()
        if self._max_workers > 0:
            self._semaphore = asyncio.Semaphore(self._max_workers)

        logger.info(f"Starting bot handler with {len(self.handlers)} handlers "
                    f"({self._max_workers or 'inline'} workers)")

        try:
            await self._run()
        finally:
            await self._shutdown()

    async def stop(self) -> None:
        """
        Stop the dispatch loop.

        The update being processed finishes first; a pending fetch is
        cancelled. Returns once the loop has exited and the source is
        closed, unless called from inside a handler, in which case it only
        requests the stop. Stopping twice is a no-op.
        """
        with self._lock:
            state = self._state
            if state is HandlerState.CREATED:
                self._state = HandlerState.STOPPED

        if state is HandlerState.STOPPED:
            return

        if state is HandlerState.CREATED:
            await self._close_source()
            self._stopped.set()
            logger.info("Bot handler stopped before start")
            return

        logger.info("Stopping bot handler...")
        self._stop_requested.set()

        current = asyncio.current_task()
        if current is self._run_task or current in self._tasks:
            return

        await self._stopped.wait()

    async def wait_stopped(self) -> None:
        """Wait until the handler reaches the stopped state."""
        await self._stopped.wait()

    async def configure(self, config: Dict[str, Any]) -> None:
        """
        Configure the bot handler.

        Recognized keys are ``max_workers``, ``source_error_delay`` and
        ``stop_timeout``; other keys are ignored. ``max_workers`` takes
        effect at the next start.
        """
        self._apply_settings(
            config.get('max_workers', self._max_workers),
            config.get('source_error_delay', self._source_error_delay),
            config.get('stop_timeout', self._stop_timeout)
        )
        if self.is_running and 'max_workers' in config:
            logger.warning("max_workers changed while running; it applies to the next start only")

    async def check_health(self) -> Dict[str, Any]:
        """Check bot handler health."""
        return {
            'healthy': self._state is not HandlerState.STOPPED,
            'status': self._state.value,
            'details': {
                'handlers_count': self._metrics['handlers_count'],
                'in_flight': len(self._tasks),
                'max_workers': self._max_workers,
                'updates_received': self._metrics['updates_received'],
                'updates_handled': self._metrics['updates_handled'],
                'updates_dropped': self._metrics['updates_dropped'],
                'handler_errors': self._metrics['handler_errors'],
                'source_errors': self._metrics['source_errors'],
                'avg_processing_time': self._metrics['avg_processing_time']
            }
        }

    async def get_metrics(self) -> Dict[str, Any]:
        """Get bot handler metrics."""
        metrics = self._metrics.copy()
        metrics.pop('processing_times')
        return metrics

    def _apply_settings(self, max_workers: int, source_error_delay: float,
                        stop_timeout: float) -> None:
        if max_workers < 0:
            raise ValueError(f"max_workers cannot be negative, got {max_workers}")
        if source_error_delay < 0:
            raise ValueError(f"source_error_delay cannot be negative, got {source_error_delay}")
        if stop_timeout <= 0:
            raise ValueError(f"stop_timeout must be positive, got {stop_timeout}")

        self._max_workers = int(max_workers)
        self._source_error_delay = float(source_error_delay)
        self._stop_timeout = float(stop_timeout)

    async def _run(self) -> None:
        """Fetch and dispatch updates until stopped or exhausted."""
        stop_waiter = asyncio.ensure_future(self._stop_requested.wait())
        fetch: Optional[asyncio.Future[Optional[Update]]] = None

        try:
            while not self._stop_requested.is_set():
                fetch = asyncio.ensure_future(self._updates.get_update())
                await asyncio.wait({fetch, stop_waiter}, return_when=asyncio.FIRST_COMPLETED)

                if not fetch.done():
                    break

                try:
                    update = fetch.result()
                except (StopAsyncIteration, asyncio.CancelledError):
                    logger.info("Update source ended")
                    break
                except Exception as e:
                    self._metrics['source_errors'] += 1
                    logger.error(f"Update source error: {e}")
                    await self._wait_stop_requested(self._source_error_delay)
                    continue
                finally:
                    fetch = None

                if update is None:
                    logger.info("Update source exhausted")
                    break

                await self._process_update(update, stop_waiter)

        finally:
            for future in (fetch, stop_waiter):
                if future is not None and not future.done():
                    future.cancel()
            await asyncio.gather(*(f for f in (fetch, stop_waiter) if f is not None),
                                 return_exceptions=True)

    async def _wait_stop_requested(self, timeout: float) -> None:
        try:
            await asyncio.wait_for(self._stop_requested.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            pass

    async def _process_update(self, update: Update, stop_waiter: 'asyncio.Future[Any]') -> None:
        """Route a single update to the first matching handler."""
        self._metrics['updates_received'] += 1

        entry = self._match(update)
        if entry is None:
            self._metrics['updates_dropped'] += 1
            logger.debug(f"No handler matched update {update.update_id} ({update.kind.value})")
            return

        if self._semaphore is None:
            await self._invoke(entry, update)
            return

        if not await self._acquire_worker(stop_waiter):
            logger.warning(f"Bot handler stopping with all workers busy; update "
                           f"{update.update_id} for {entry.handler_name} not handled")
            return

        task = asyncio.create_task(self._invoke_and_release(entry, update))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _acquire_worker(self, stop_waiter: 'asyncio.Future[Any]') -> bool:
        """
        Wait for a free worker slot unless a stop is requested first.

        Returns:
            True if a slot was acquired, False if the wait ended on stop
        """
        assert self._semaphore is not None
        acquire = asyncio.ensure_future(self._semaphore.acquire())
        await asyncio.wait({acquire, stop_waiter}, return_when=asyncio.FIRST_COMPLETED)
        if acquire.done():
            return True

        acquire.cancel()
        await asyncio.gather(acquire, return_exceptions=True)
        # The slot may have been granted before the cancellation landed
        if not acquire.cancelled() and acquire.exception() is None:
            self._semaphore.release()
        return False

    def _match(self, update: Update) -> Optional[HandlerEntry]:
        """Find the first entry whose guard holds for the update."""
        with self._lock:
            entries = tuple(self._handlers)

        for entry in entries:
            try:
                if entry.guard(update):
                    return entry
            except Exception as e:
                self._metrics['guard_errors'] += 1
                logger.error(f"Guard of handler {entry.handler_name} raised for update "
                             f"{update.update_id}, treating as no match: {e}")

        return None

    async def _invoke_and_release(self, entry: HandlerEntry, update: Update) -> None:
        try:
            await self._invoke(entry, update)
        finally:
            if self._semaphore is not None:
                self._semaphore.release()

    async def _invoke(self, entry: HandlerEntry, update: Update) -> None:
        """Run a handler, isolating its failures from the loop."""
        start_time = time.time()

        try:
            result = entry.handler(self._bot, update)
            if inspect.isawaitable(result):
                await result
            self._metrics['updates_handled'] += 1

        except Exception as e:
            self._metrics['handler_errors'] += 1
            logger.exception(f"Handler {entry.handler_name} failed for update {update.update_id}: {e}")
            await self._report_error(update, e)

        finally:
            processing_time = time.time() - start_time
            self._metrics['processing_times'].append(processing_time)

            # Keep only last 1000 processing times
            if len(self._metrics['processing_times']) > 1000:
                self._metrics['processing_times'] = self._metrics['processing_times'][-1000:]

            self._metrics['avg_processing_time'] = sum(
                self._metrics['processing_times']) / len(self._metrics['processing_times'])

    async def _report_error(self, update: Update, error: Exception) -> None:
        if self._error_handler is None:
            return

        try:
            result = self._error_handler(update, error)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Error handler failed for update {update.update_id}: {e}")

    async def _shutdown(self) -> None:
        """Drain in-flight handlers, release the source and mark stopped."""
        if self._tasks:
            done, pending = await asyncio.wait(set(self._tasks), timeout=self._stop_timeout)
            if pending:
                logger.warning(f"Cancelling {len(pending)} handlers still running after "
                               f"{self._stop_timeout}s")
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)

        await self._close_source()

        with self._lock:
            self._state = HandlerState.STOPPED
        self._stop_requested.set()
        self._stopped.set()

        logger.info("Bot handler stopped")

    async def _close_source(self) -> None:
        try:
            await self._updates.close()
        except Exception as e:
            logger.error(f"Failed to close update source: {e}")
