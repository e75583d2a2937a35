"""Protocol interfaces for pluggable storage backends."""

from lazyfs.protocols.backend import Backend, StreamHandle
from lazyfs.protocols.capabilities import (
    MetadataSupporter,
    SizeCalculator,
    supports_metadata,
    supports_size,
)

__all__ = [
    "Backend",
    "MetadataSupporter",
    "SizeCalculator",
    "StreamHandle",
    "supports_metadata",
    "supports_size",
]
