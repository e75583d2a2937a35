"""Tests for the error taxonomy."""

import pytest

from lazyfs.exceptions import (
    ConfigError,
    FileAlreadyExists,
    FileNotFound,
    LazyFsError,
    StorageFailure,
)


@pytest.mark.parametrize(
    "error",
    [
        FileNotFound("a.txt"),
        FileAlreadyExists("a.txt"),
        StorageFailure("boom"),
        ConfigError("bad"),
    ],
)
def test_all_errors_share_base(error):
    """Every error derives from LazyFsError."""
    assert isinstance(error, LazyFsError)


def test_file_not_found_carries_key():
    """FileNotFound keeps the key and names it in the message."""
    error = FileNotFound("docs/a.txt")
    assert error.key == "docs/a.txt"
    assert str(error) == "File not found: docs/a.txt"


def test_storage_failure_key_optional():
    """StorageFailure may omit the key."""
    assert StorageFailure("quota exceeded").key is None
    assert StorageFailure("quota exceeded", key="a.txt").key == "a.txt"
