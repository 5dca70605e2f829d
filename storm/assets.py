"""Loading binary assets from the file system on a background thread."""

from __future__ import annotations

import errno
import os
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Union

_QUEUE_CAPACITY = 256
_POLL_INTERVAL = 0.001


class LoaderError(Enum):
    """General categories of failure when loading an asset."""

    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    CONNECTION_REFUSED = "connection refused"
    CONNECTION_RESET = "connection reset"
    CONNECTION_ABORTED = "connection aborted"
    NOT_CONNECTED = "not connected"
    ADDR_IN_USE = "address in use"
    ADDR_NOT_AVAILABLE = "address not available"
    BROKEN_PIPE = "broken pipe"
    ALREADY_EXISTS = "already exists"
    WOULD_BLOCK = "would block"
    INVALID_INPUT = "invalid input"
    INVALID_DATA = "invalid data"
    TIMED_OUT = "timed out"
    WRITE_ZERO = "write zero"
    INTERRUPTED = "interrupted"
    UNSUPPORTED = "unsupported"
    UNEXPECTED_EOF = "unexpected end of file"
    OUT_OF_MEMORY = "out of memory"
    OTHER = "other"


@dataclass(frozen=True)
class Asset:
    """A binary blob read from an external source, or the reason it could not be read."""

    relative_path: str
    result: Union[bytes, LoaderError]

    @classmethod
    def new_ok(cls, relative_path: str, contents: bytes) -> Asset:
        return cls(relative_path, bytes(contents))

    @classmethod
    def new_err(cls, relative_path: str, error: LoaderError) -> Asset:
        if not isinstance(error, LoaderError):
            raise TypeError(f"expected a LoaderError, got {error!r}")
        return cls(relative_path, error)

    def is_ok(self) -> bool:
        return not isinstance(self.result, LoaderError)


_BY_TYPE: tuple[tuple[type[BaseException], LoaderError], ...] = (
    (FileNotFoundError, LoaderError.NOT_FOUND),
    (PermissionError, LoaderError.PERMISSION_DENIED),
    (ConnectionRefusedError, LoaderError.CONNECTION_REFUSED),
    (ConnectionResetError, LoaderError.CONNECTION_RESET),
    (ConnectionAbortedError, LoaderError.CONNECTION_ABORTED),
    (BrokenPipeError, LoaderError.BROKEN_PIPE),
    (FileExistsError, LoaderError.ALREADY_EXISTS),
    (BlockingIOError, LoaderError.WOULD_BLOCK),
    (TimeoutError, LoaderError.TIMED_OUT),
    (InterruptedError, LoaderError.INTERRUPTED),
    (EOFError, LoaderError.UNEXPECTED_EOF),
    (MemoryError, LoaderError.OUT_OF_MEMORY),
)


def _errno_table() -> dict[int, LoaderError]:
    names = {
        "ENOTCONN": LoaderError.NOT_CONNECTED,
        "EADDRINUSE": LoaderError.ADDR_IN_USE,
        "EADDRNOTAVAIL": LoaderError.ADDR_NOT_AVAILABLE,
        "EINVAL": LoaderError.INVALID_INPUT,
        "ENOMEM": LoaderError.OUT_OF_MEMORY,
        "ENOSYS": LoaderError.UNSUPPORTED,
        "ENOTSUP": LoaderError.UNSUPPORTED,
        "EOPNOTSUPP": LoaderError.UNSUPPORTED,
    }
    table: dict[int, LoaderError] = {}
    for name, kind in names.items():
        code = getattr(errno, name, None)
        if code is not None:
            table.setdefault(code, kind)
    return table


_BY_ERRNO = _errno_table()


def loader_error_from_os_error(error: BaseException) -> LoaderError:
    """Classify an exception raised while reading into a LoaderError."""
    for exc_type, kind in _BY_TYPE:
        if isinstance(error, exc_type):
            return kind
    if isinstance(error, OSError) and error.errno is not None:
        return _BY_ERRNO.get(error.errno, LoaderError.OTHER)
    return LoaderError.OTHER


def loader_error_from_http_status(status: int) -> LoaderError:
    """Classify a failed HTTP status code into a LoaderError."""
    if status == 400:
        return LoaderError.INVALID_INPUT
    if status in (401, 402, 403):
        return LoaderError.PERMISSION_DENIED
    if status == 404:
        return LoaderError.NOT_FOUND
    return LoaderError.OTHER


def read_asset(relative_path: str | os.PathLike[str]) -> Asset:
    """Read a whole file, relative to the current working directory."""
    path = os.fspath(relative_path)
    try:
        with open(path, "rb") as file:
            contents = file.read()
    except OSError as error:
        return Asset.new_err(path, loader_error_from_os_error(error))
    return Asset.new_ok(path, contents)


class AssetLoader:
    """Reads requested assets on a worker thread and hands back results in order."""

    def __init__(self) -> None:
        self._requests: queue.Queue[str] = queue.Queue(maxsize=_QUEUE_CAPACITY)
        self._results: queue.Queue[Asset] = queue.Queue(maxsize=_QUEUE_CAPACITY)
        self._stopping = threading.Event()
        self._thread = threading.Thread(target=self._work, name="asset-loader", daemon=True)
        self._thread.start()

    def _work(self) -> None:
        while not self._stopping.is_set():
            try:
                path = self._requests.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            asset = read_asset(path)
            while not self._stopping.is_set():
                try:
                    self._results.put(asset, timeout=_POLL_INTERVAL)
                    break
                except queue.Full:
                    continue

    def push_read(self, relative_path: str | os.PathLike[str]) -> None:
        """Queue a read; its result later comes out of try_pop_read."""
        if self._stopping.is_set():
            raise RuntimeError("asset loader is closed")
        self._requests.put(os.fspath(relative_path))

    def try_pop_read(self) -> Asset | None:
        """Return the next finished read, or None if none is ready."""
        try:
            return self._results.get_nowait()
        except queue.Empty:
            return None

    def close(self) -> None:
        """Stop the worker thread. Further reads are refused."""
        self._stopping.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> AssetLoader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()