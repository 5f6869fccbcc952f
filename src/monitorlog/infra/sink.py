from __future__ import annotations

"""
Sequential Append Sink.

Per-instance single-writer queue. Callers enqueue plain lines without
blocking; one daemon worker thread drains the queue in FIFO order and
performs the physical appends, so lines land in the file in the exact
order they were requested and never interleave within one instance.

Failures are absorbed by the worker: each append produces an AppendResult,
failed results are handed to an optional callback, and the worker keeps
draining subsequent lines. Nothing raises into the producer.
"""

import atexit
import logging
import queue
import threading
import weakref
from typing import Callable, Optional

from monitorlog.domain.results import AppendResult, append_failed
from monitorlog.infra.fs import append_line

logger = logging.getLogger(__name__)

Writer = Callable[[str, str], AppendResult]
FailureCallback = Callable[[AppendResult], None]

_STOP = object()
_EXIT_FLUSH_TIMEOUT: float = 5.0

# Seconds a worker waits on an empty queue before exiting
_IDLE_TIMEOUT: float = 1.0

# Sinks still able to hold unwritten lines at interpreter exit
_LIVE_SINKS: "weakref.WeakSet[SequentialAppendSink]" = weakref.WeakSet()


class SequentialAppendSink:
    """
    Order-preserving, non-blocking line appender bound to one file.

    Args:
        path: Destination file. Created with its parents on first write.
        on_failure: Called from the worker thread for every failed append.
        writer: Physical append primitive (defaults to infra.fs.append_line).
        name: Worker thread name, for diagnostics.
        idle_timeout: Seconds of inactivity after which the worker exits;
            the next append starts a new one.
    """

    def __init__(
            self,
            path: str,
            on_failure: Optional[FailureCallback] = None,
            writer: Writer = append_line,
            name: str = "monitorlog-sink",
            idle_timeout: Optional[float] = None,
    ):
        self._path = path
        self._on_failure = on_failure
        self._writer = writer
        self._name = name
        self._idle_timeout = idle_timeout if idle_timeout is not None else _IDLE_TIMEOUT

        self._queue: "queue.Queue[object]" = queue.Queue(-1)
        self._lock = threading.Lock()
        self._idle = threading.Condition()
        self._pending = 0
        self._thread: Optional[threading.Thread] = None
        self._closed = False

        self._failures = 0
        self._last_result: Optional[AppendResult] = None

        _LIVE_SINKS.add(self)

    # -------------------------------------------------------------------------
    # STATE
    # -------------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Lines requested but not yet written (or failed)."""
        with self._idle:
            return self._pending

    @property
    def failures(self) -> int:
        with self._idle:
            return self._failures

    @property
    def last_result(self) -> Optional[AppendResult]:
        with self._idle:
            return self._last_result

    @property
    def worker_alive(self) -> bool:
        with self._lock:
            return self._thread is not None and self._thread.is_alive()

    # -------------------------------------------------------------------------
    # PRODUCER API
    # -------------------------------------------------------------------------

    def append(self, line: str) -> bool:
        """
        Schedule a line after every line previously scheduled on this sink.

        Returns:
            bool: False if the sink is closed and the line was dropped.
        """
        with self._lock:
            if self._closed:
                return False
            self._ensure_worker()
            with self._idle:
                self._pending += 1
            self._queue.put_nowait(line)
        return True

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Block until every scheduled line has been handled.

        Args:
            timeout: Maximum wait in seconds; None waits indefinitely.

        Returns:
            bool: True if the queue drained within the timeout.
        """
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout)

    def close(self, timeout: Optional[float] = None) -> None:
        """Drain pending lines, then stop the worker. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            thread = self._thread

        if thread is None:
            return

        self.flush(timeout)
        self._queue.put_nowait(_STOP)
        thread.join(timeout)
        logger.debug(f"Append worker for '{self._path}' stopped.")

    # -------------------------------------------------------------------------
    # WORKER
    # -------------------------------------------------------------------------

    def _ensure_worker(self) -> None:
        """Lazily start the drain thread (caller holds self._lock)."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._drain, name=self._name, daemon=True)
        self._thread.start()
        logger.debug(f"Append worker for '{self._path}' started.")

    def _drain(self) -> None:
        while True:
            try:
                item = self._queue.get(timeout=self._idle_timeout)
            except queue.Empty:
                # append() enqueues under self._lock, so an empty queue seen
                # here stays empty until a new worker is started
                with self._lock:
                    if self._queue.empty():
                        self._thread = None
                        logger.debug(f"Append worker for '{self._path}' idle, exiting.")
                        return
                continue
            if item is _STOP:
                return
            self._write(str(item))

    def _write(self, line: str) -> None:
        try:
            result = self._writer(self._path, line)
        except Exception as e:
            # Writers report through AppendResult; this only guards custom ones
            result = append_failed(self._path, e)

        with self._idle:
            self._last_result = result
            if not result.ok:
                self._failures += 1

        if not result.ok:
            self._report(result)

        with self._idle:
            self._pending -= 1
            if self._pending == 0:
                self._idle.notify_all()

    def _report(self, result: AppendResult) -> None:
        if self._on_failure is None:
            return
        try:
            self._on_failure(result)
        except Exception as e:
            logger.debug(f"Append failure callback raised: {e}")


# -----------------------------------------------------------------------------
# SHUTDOWN
# -----------------------------------------------------------------------------

def flush_all(timeout: float = _EXIT_FLUSH_TIMEOUT) -> None:
    """Give every live sink a bounded chance to write its pending lines."""
    for sink in list(_LIVE_SINKS):
        if sink.pending and not sink.flush(timeout):
            logger.warning(f"Dropping {sink.pending} unwritten line(s) for '{sink.path}'.")


atexit.register(flush_all)
