"""Structural interfaces consumed by schemas."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileLike(Protocol):
    """Uploaded file as handed over by a file picker or upload transport.

    Attributes:
        name: Client-side file name.
        size: Size in bytes.
        type: MIME type, empty when unknown.
    """

    name: str
    size: int
    type: str
