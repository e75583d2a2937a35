"""Lazy file handle over a single backend key."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from lazyfs.exceptions import FileNotFound
from lazyfs.protocols import StreamHandle

if TYPE_CHECKING:
    from lazyfs.filesystem import Filesystem


class File:
    """Points to a file in a filesystem.

    Content is read from the backend on first access and then memoized. The
    cache is never invalidated: set_content replaces it, and neither delete
    nor changes made behind the handle's back clear it. Not safe for
    concurrent mutation; callers sharing a handle across threads must
    serialize access themselves.
    """

    def __init__(self, key: str, filesystem: "Filesystem") -> None:
        """Initialize a handle.

        Args:
            key: Backend key, fixed for the lifetime of the handle
            filesystem: Facade to delegate storage operations to (not owned)
        """
        self._key = key
        self._filesystem = filesystem
        self.name = key
        self._content: bytes | None = None
        # None until a size is written, computed or set
        self._size: int | None = None

    def __repr__(self) -> str:
        return f"File(key={self._key!r}, name={self.name!r})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def filesystem(self) -> "Filesystem":
        return self._filesystem

    def get_content(self, metadata: Mapping[str, Any] | None = None) -> bytes:
        """Return the file content, reading it from the backend once.

        Args:
            metadata: Sent to the backend before the read, if it supports
                metadata. Ignored when the content is already cached.

        Raises:
            FileNotFound: If the backend has no object under the key
        """
        if self._content is not None:
            return self._content

        self._set_metadata(metadata)
        self._content = self._filesystem.read(self._key)
        return self._content

    def set_content(self, content: bytes, metadata: Mapping[str, Any] | None = None) -> int:
        """Replace the content and write it through to the backend.

        The cached content is updated before the write, so it holds the new
        bytes even if the backend write raises.

        Returns:
            Number of bytes written by the backend
        """
        self._content = content
        # Falls back to len(content) if the write raises
        self._size = None
        self._set_metadata(metadata)

        self._size = self._filesystem.write(self._key, content, overwrite=True)
        return self._size

    def get_size(self) -> int:
        """Size in bytes; 0 when the file does not exist."""
        if self._size is not None:
            return self._size

        try:
            content = self.get_content()
        except FileNotFound:
            return 0

        self._size = len(content)
        return self._size

    def set_size(self, size: int) -> None:
        """Override the cached size, e.g. with Filesystem.size(key)."""
        self._size = size

    def exists(self) -> bool:
        """Check the backend; cached state is not consulted."""
        return self._filesystem.has(self._key)

    def delete(self, metadata: Mapping[str, Any] | None = None) -> bool:
        """Delete the file from the backend.

        Cached content and size are kept.

        Raises:
            FileNotFound: If the backend has no object under the key
            StorageFailure: If the backend cannot delete it
        """
        self._set_metadata(metadata)
        return self._filesystem.delete(self._key)

    def create_stream(self) -> StreamHandle:
        return self._filesystem.create_stream(self._key)

    def _set_metadata(self, metadata: Mapping[str, Any] | None) -> bool:
        return self._filesystem.set_metadata(self._key, metadata)
