"""Uploaded file model."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class UploadedFile(BaseModel):
    """Metadata of an uploaded file; satisfies `FileLike`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    size: int = Field(ge=0)
    type: str = ""

    @classmethod
    def from_path(cls, path: Path) -> UploadedFile:
        """Describe a file on disk.

        Args:
            path (Path): Existing file path.

        Returns:
            UploadedFile: Name, size from `stat` and MIME type guessed from the extension.
        """
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, size=path.stat().st_size, type=mime_type or "")
