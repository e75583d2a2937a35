"""lazyfs - Lazy, backend-agnostic file handles."""

from lazyfs.config import Config, FilesystemConfig, LoggingConfig
from lazyfs.exceptions import (
    ConfigError,
    FileAlreadyExists,
    FileNotFound,
    LazyFsError,
    StorageFailure,
)
from lazyfs.file import File
from lazyfs.filesystem import Filesystem
from lazyfs.observability import (
    LogLevel,
    OperationContext,
    StorageFormatter,
    Timer,
    configure_logging,
    current_operation,
    register_metric_callback,
    unregister_metric_callback,
)
from lazyfs.protocols import (
    Backend,
    MetadataSupporter,
    SizeCalculator,
    StreamHandle,
    supports_metadata,
    supports_size,
)

__version__ = "0.1.0"
__all__ = [
    # Core
    "File",
    "Filesystem",
    # Protocols
    "Backend",
    "MetadataSupporter",
    "SizeCalculator",
    "StreamHandle",
    "supports_metadata",
    "supports_size",
    # Errors
    "ConfigError",
    "FileAlreadyExists",
    "FileNotFound",
    "LazyFsError",
    "StorageFailure",
    # Config
    "Config",
    "FilesystemConfig",
    "LoggingConfig",
    # Observability
    "LogLevel",
    "OperationContext",
    "StorageFormatter",
    "Timer",
    "configure_logging",
    "current_operation",
    "register_metric_callback",
    "unregister_metric_callback",
]
