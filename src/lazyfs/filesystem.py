"""Filesystem facade binding backend operations to keys."""

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from lazyfs.config import FilesystemConfig
from lazyfs.exceptions import FileNotFound
from lazyfs.file import File
from lazyfs.observability import OperationContext, Timer, emit_counter, emit_timer
from lazyfs.protocols import Backend, StreamHandle, supports_metadata, supports_size

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Filesystem:
    """Key-addressed facade over a single storage backend.

    Every call is forwarded to the backend as-is; caching lives in File.
    The facade does not own the backend and has no teardown of its own.

    Example:
        fs = Filesystem(backend)
        report = fs.get("reports/q3.pdf")
        data = report.get_content()
    """

    def __init__(self, backend: Backend, config: FilesystemConfig | None = None) -> None:
        """Bind the facade to a backend.

        Args:
            backend: Storage backend implementing the Backend protocol
            config: Facade settings; defaults apply when omitted
        """
        self._backend = backend
        self.config = config or FilesystemConfig()
        self._metadata_supported = supports_metadata(backend)
        self._size_supported = supports_size(backend)

    @property
    def backend(self) -> Backend:
        """The bound backend."""
        return self._backend

    def is_metadata_supported(self) -> bool:
        """Whether the backend accepts auxiliary metadata."""
        return self._metadata_supported

    def is_size_supported(self) -> bool:
        """Whether the backend reports sizes without a full read."""
        return self._size_supported

    def _call(self, operation: str, key: str, func: Callable[[], T]) -> T:
        labels = {"backend": type(self._backend).__name__}
        with OperationContext(key, operation):
            try:
                with Timer() as timer:
                    result = func()
            except Exception as e:
                logger.debug(
                    "Backend %s failed: %s",
                    operation,
                    type(e).__name__,
                    extra={"duration_ms": timer.duration_ms},
                )
                raise

            logger.debug("Backend %s", operation, extra={"duration_ms": timer.duration_ms})
        if self.config.emit_metrics:
            emit_counter(f"lazyfs.backend.{operation}", labels)
            emit_timer(f"lazyfs.backend.{operation}.duration_ms", timer.duration_ms, labels)
        return result

    def has(self, key: str) -> bool:
        """Check whether the backend stores an object under the key."""
        return self._call("exists", key, lambda: self._backend.exists(key))

    def read(self, key: str) -> bytes:
        """Read an object.

        Raises:
            FileNotFound: If the key has no object
        """
        return self._call("read", key, lambda: self._backend.read(key))

    def write(self, key: str, content: bytes, overwrite: bool = False) -> int:
        """Write an object and return the number of bytes written.

        Raises:
            FileAlreadyExists: If overwrite is false and the key exists
        """
        return self._call("write", key, lambda: self._backend.write(key, content, overwrite))

    def delete(self, key: str) -> bool:
        """Delete an object.

        Raises:
            FileNotFound: If the key has no object
            StorageFailure: If the backend cannot remove it
        """
        return self._call("delete", key, lambda: self._backend.delete(key))

    def create_stream(self, key: str) -> StreamHandle:
        """Create a backend stream for the key."""
        return self._call("create_stream", key, lambda: self._backend.create_stream(key))

    def size(self, key: str) -> int:
        """Size of the object in bytes.

        Uses the backend's size capability when available, otherwise reads
        the whole object.
        """
        if self._size_supported:
            return self._call("size", key, lambda: self._backend.size(key))  # type: ignore[attr-defined]
        return len(self.read(key))

    def set_metadata(self, key: str, metadata: Mapping[str, Any] | None) -> bool:
        """Forward metadata to the backend if it is non-empty and supported.

        Returns:
            True if the metadata was forwarded
        """
        if not metadata or not self._metadata_supported:
            return False
        self._call(
            "set_metadata",
            key,
            lambda: self._backend.set_metadata(key, metadata),  # type: ignore[attr-defined]
        )
        return True

    def create_file(self, key: str) -> File:
        """Create a file handle bound to this facade. No backend call."""
        return File(key, self)

    def get(self, key: str, create: bool = False) -> File:
        """Get a file handle for the key.

        Args:
            key: Backend key
            create: Return a handle even if nothing is stored yet

        Raises:
            FileNotFound: If create is false and the key has no object
        """
        if not create and not self.has(key):
            raise FileNotFound(key)
        return self.create_file(key)
