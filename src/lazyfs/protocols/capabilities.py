"""Optional backend capabilities.

A backend opts in to a capability by implementing its methods; detection is
structural, so no registration or base class is needed.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetadataSupporter(Protocol):
    """Backend that accepts auxiliary metadata for a key."""

    def set_metadata(self, key: str, metadata: Mapping[str, Any]) -> None:
        """Attach metadata to be used by the next operation on the key."""
        ...


@runtime_checkable
class SizeCalculator(Protocol):
    """Backend that can report an object's length without reading it."""

    def size(self, key: str) -> int:
        """Return the size in bytes. Raises FileNotFound if absent."""
        ...


def supports_metadata(backend: object) -> bool:
    """Check whether a backend implements MetadataSupporter."""
    return isinstance(backend, MetadataSupporter)


def supports_size(backend: object) -> bool:
    """Check whether a backend implements SizeCalculator."""
    return isinstance(backend, SizeCalculator)
