"""lazyfs exceptions."""


class LazyFsError(Exception):
    """Base exception for lazyfs."""

    pass


class ConfigError(LazyFsError):
    """Configuration error."""

    pass


class FileNotFound(LazyFsError):
    """No object is stored under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"File not found: {key}")
        self.key = key


class FileAlreadyExists(LazyFsError):
    """A write without overwrite targeted an existing key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"File already exists: {key}")
        self.key = key


class StorageFailure(LazyFsError):
    """Backend-side fault (I/O, permission, quota)."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
