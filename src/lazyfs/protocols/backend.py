"""Backend protocol for storage adapters."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StreamHandle(Protocol):
    """Opaque incremental read/write resource owned by a backend."""

    def open(self, mode: str) -> bool:
        ...

    def read(self, count: int) -> bytes:
        ...

    def write(self, data: bytes) -> int:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class Backend(Protocol):
    """Protocol for storage backends (local disk, object storage, memory)."""

    def exists(self, key: str) -> bool:
        """Check whether an object is stored under the key."""
        ...

    def read(self, key: str) -> bytes:
        """Read an object. Raises FileNotFound if absent."""
        ...

    def write(self, key: str, content: bytes, overwrite: bool) -> int:
        """Write an object and return the number of bytes written.

        Raises FileAlreadyExists when overwrite is false and the key exists.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete an object. Raises FileNotFound if absent."""
        ...

    def create_stream(self, key: str) -> StreamHandle:
        """Create a stream over the object stored under the key."""
        ...
