"""
Asynchronous file handle handlers

Each handler owns one worker thread fed by a FIFO queue, so callers never
wait on I/O. Entries reach the handle in the order they were appended.
The queue is unbounded: a destination that stays slow grows its backlog
instead of blocking callers.
"""

from __future__ import annotations

import io
import queue
import sys
import threading
from pathlib import Path
from typing import IO, Optional, Union

from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.formatters.base_formatter import BaseFormatter
from logfacade.handlers.base_handler import BaseHandler

_STOP = object()


class FileHandleHandler(BaseHandler):
    """
    Write formatted entries to a file handle on a background worker.

    The handle is held for the lifetime of the handler and released by
    ``close()``, which waits for queued entries to be written first.

    Thread Safety:
        ``append`` may be called from any thread.
    """

    def __init__(
        self,
        handle: IO,
        config: Optional[LogConfiguration] = None,
        formatter: Optional[BaseFormatter] = None,
        log_everything: bool = False,
        name: Optional[str] = None,
    ):
        """
        Initialize file handle handler.

        Args:
            handle: Open text or binary file object
            config: Configuration used to build the default formatter
            formatter: Log formatter
            log_everything: Receive every entry regardless of level policy
            name: Name used for the worker thread
        """
        super().__init__(config, formatter, log_everything)
        self._handle: Optional[IO] = handle
        self._binary = isinstance(handle, (io.RawIOBase, io.BufferedIOBase))
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._state_lock = threading.Lock()
        self._closed = False
        self._broken = False
        self._worker_thread = threading.Thread(
            target=self._process_queue,
            name=f"{name or type(self).__name__}-{self.handler_id}-worker",
            daemon=True
        )
        self._worker_thread.start()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def broken(self) -> bool:
        """True once a write failed; later entries are dropped."""
        return self._broken

    def append(self, entry: LogEntry) -> None:
        """Queue the entry for formatting and writing; returns immediately."""
        with self._state_lock:
            if self._closed:
                return
            self._queue.put(entry)

    def _process_queue(self) -> None:
        """Format and write queued entries (worker thread)."""
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._write_entry(item)
            finally:
                # Always mark task as done to prevent queue.join() deadlock
                self._queue.task_done()

    def _write_entry(self, entry: LogEntry) -> None:
        if self._broken or self._handle is None:
            return
        try:
            text = self.formatter.format(entry)
        except Exception as e:
            print(f"Handler format error: {e}", file=sys.stderr)
            return
        if text is None:
            return
        line = text + "\n"
        try:
            if self._binary:
                self._handle.write(line.encode("utf-8"))
            else:
                self._handle.write(line)
            self._handle.flush()
        except Exception as e:
            self._broken = True
            print(f"Handler write error, dropping further entries: {e}", file=sys.stderr)

    def flush(self) -> None:
        """
        Wait until every queued entry has been written.

        Returns early if the worker has exited, so a dead consumer never
        leaves the caller waiting.
        """
        done = self._queue.all_tasks_done
        with done:
            while self._queue.unfinished_tasks and self._worker_thread.is_alive():
                done.wait(0.1)

    def close(self) -> None:
        """
        Stop the worker and release the handle.

        Entries queued before the call are written first; the handle is
        released only after the worker has exited.
        """
        with self._state_lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        self._worker_thread.join()
        handle, self._handle = self._handle, None
        if handle is not None:
            self._release(handle)

    def _release(self, handle: IO) -> None:
        try:
            handle.close()
        except (OSError, ValueError) as e:
            print(f"Handler close error: {e}", file=sys.stderr)


class StdErrHandler(FileHandleHandler):
    """
    Write entries to standard error on a background worker.

    Bound to ``sys.stderr``; passing any other handle is an error.
    """

    def __init__(
        self,
        config: Optional[LogConfiguration] = None,
        formatter: Optional[BaseFormatter] = None,
        log_everything: bool = False,
        handle: Optional[IO] = None,
    ):
        """
        Initialize standard error handler.

        Raises:
            TypeError: If ``handle`` is given and is not sys.stderr
        """
        if handle is not None and handle is not sys.stderr:
            raise TypeError("StdErrHandler always writes to sys.stderr; use FileHandleHandler for other handles")
        super().__init__(sys.stderr, config, formatter, log_everything, name="stderr")

    def _release(self, handle: IO) -> None:
        # never close the process's stderr
        try:
            handle.flush()
        except (OSError, ValueError) as e:
            print(f"Handler flush error: {e}", file=sys.stderr)


class FileHandler(FileHandleHandler):
    """Open a log file and write entries to it on a background worker."""

    def __init__(
        self,
        filepath: Union[str, Path],
        config: Optional[LogConfiguration] = None,
        formatter: Optional[BaseFormatter] = None,
        log_everything: bool = False,
        mode: str = "a",
        encoding: str = "utf-8",
    ):
        """
        Initialize file handler.

        Args:
            filepath: Path to log file; parent directories are created
            config: Configuration used to build the default formatter
            formatter: Log formatter
            log_everything: Receive every entry regardless of level policy
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
        """
        self.filepath = Path(filepath)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        handle = open(self.filepath, mode, encoding=encoding)
        super().__init__(handle, config, formatter, log_everything, name=self.filepath.name)
