"""Pytest configuration and fixtures."""

from collections.abc import Mapping
from typing import Any

import pytest

from lazyfs.exceptions import FileAlreadyExists, FileNotFound, StorageFailure
from lazyfs.filesystem import Filesystem


class MemoryStream:
    """Stream stub; the core only hands it back to callers."""

    def __init__(self, key: str) -> None:
        self.key = key

    def open(self, mode: str) -> bool:
        return True

    def read(self, count: int) -> bytes:
        return b""

    def write(self, data: bytes) -> int:
        return len(data)

    def close(self) -> None:
        pass


class MemoryBackend:
    """In-memory backend that records every call it receives."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})
        self.calls: list[tuple[str, str]] = []

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    def exists(self, key: str) -> bool:
        self.calls.append(("exists", key))
        return key in self.files

    def read(self, key: str) -> bytes:
        self.calls.append(("read", key))
        if key not in self.files:
            raise FileNotFound(key)
        return self.files[key]

    def write(self, key: str, content: bytes, overwrite: bool) -> int:
        self.calls.append(("write", key))
        if not overwrite and key in self.files:
            raise FileAlreadyExists(key)
        self.files[key] = content
        return len(content)

    def delete(self, key: str) -> bool:
        self.calls.append(("delete", key))
        if key not in self.files:
            raise FileNotFound(key)
        del self.files[key]
        return True

    def create_stream(self, key: str) -> MemoryStream:
        self.calls.append(("create_stream", key))
        return MemoryStream(key)


class MetadataMemoryBackend(MemoryBackend):
    """Memory backend with the metadata capability."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        super().__init__(files)
        self.metadata: list[tuple[str, dict[str, Any]]] = []

    def set_metadata(self, key: str, metadata: Mapping[str, Any]) -> None:
        self.calls.append(("set_metadata", key))
        self.metadata.append((key, dict(metadata)))


class SizedMemoryBackend(MemoryBackend):
    """Memory backend with the size capability."""

    def size(self, key: str) -> int:
        self.calls.append(("size", key))
        if key not in self.files:
            raise FileNotFound(key)
        return len(self.files[key])


class BrokenBackend(MemoryBackend):
    """Memory backend whose reads, writes and deletes fail."""

    def read(self, key: str) -> bytes:
        self.calls.append(("read", key))
        raise StorageFailure("disk unavailable", key=key)

    def write(self, key: str, content: bytes, overwrite: bool) -> int:
        self.calls.append(("write", key))
        raise StorageFailure("quota exceeded", key=key)

    def delete(self, key: str) -> bool:
        self.calls.append(("delete", key))
        raise StorageFailure("permission denied", key=key)


@pytest.fixture
def backend():
    """Plain backend holding a.txt = b"hi"."""
    return MemoryBackend({"a.txt": b"hi"})


@pytest.fixture
def empty_backend():
    """Plain backend with nothing stored."""
    return MemoryBackend()


@pytest.fixture
def metadata_backend():
    """Metadata-capable backend holding a.txt = b"hi"."""
    return MetadataMemoryBackend({"a.txt": b"hi"})


@pytest.fixture
def sized_backend():
    """Size-capable backend holding a.txt = b"hello"."""
    return SizedMemoryBackend({"a.txt": b"hello"})


@pytest.fixture
def broken_backend():
    """Backend that stores a.txt but fails on access."""
    return BrokenBackend({"a.txt": b"hi"})


@pytest.fixture
def fs(backend):
    """Filesystem over the plain backend."""
    return Filesystem(backend)


@pytest.fixture
def metadata_fs(metadata_backend):
    """Filesystem over the metadata-capable backend."""
    return Filesystem(metadata_backend)


@pytest.fixture
def metrics():
    """Collect metric events emitted during a test."""
    from lazyfs.observability import register_metric_callback, unregister_metric_callback

    received: list[tuple[str, float, dict]] = []

    def callback(name: str, value: float, labels: dict) -> None:
        received.append((name, value, labels))

    register_metric_callback(callback)
    yield received
    unregister_metric_callback(callback)
