"""
Resume Store — holds the single profile document for the process lifetime.

The document comes either from an in-memory mapping (the bundled example
by default) or from a JSON file. It is validated and cached on the first
successful load; every later call returns the same instance.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from src.models.resume import ResumeDocument
from src.storage.sample_resume import SAMPLE_RESUME
from src.tools.errors import DocumentUnavailable

logger = logging.getLogger(__name__)


class ResumeStore:
    """Read-only source of the resume document."""

    def __init__(
        self,
        data: Mapping[str, Any] | ResumeDocument | None = None,
        path: str | Path | None = None,
    ) -> None:
        if data is not None and path is not None:
            raise ValueError("Pass either data or path, not both")
        self._path = Path(path) if path is not None else None
        self._data = data if data is not None or path is not None else SAMPLE_RESUME
        self._document: ResumeDocument | None = None

    @classmethod
    def from_path(cls, path: str | Path | None) -> "ResumeStore":
        """Store backed by a JSON file, or the bundled example when path is empty."""
        return cls(path=path) if path else cls()

    @property
    def source(self) -> str:
        return str(self._path) if self._path else "in-memory"

    def load(self) -> ResumeDocument:
        """Return the resume document, loading it on first use.

        Raises:
            DocumentUnavailable: the file is missing, unreadable, not UTF-8, not JSON,
                or does not match the resume schema.
        """
        if self._document is None:
            self._document = self._build()
            logger.info(
                "Loaded resume for %s from %s",
                self._document.personal_info.name, self.source,
            )
        return self._document

    def _build(self) -> ResumeDocument:
        if isinstance(self._data, ResumeDocument):
            return self._data

        raw = self._read_file() if self._path else self._data
        try:
            return ResumeDocument.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "document"
            raise DocumentUnavailable(f"{location}: {first['msg']}") from e

    def _read_file(self) -> Any:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise DocumentUnavailable(f"file not found: {self._path}") from e
        except UnicodeDecodeError as e:
            raise DocumentUnavailable(f"{self._path} is not valid UTF-8") from e
        except json.JSONDecodeError as e:
            raise DocumentUnavailable(f"invalid JSON in {self._path}: {e.msg} (line {e.lineno})") from e
        except OSError as e:
            raise DocumentUnavailable(f"cannot read {self._path}: {e.strerror or e}") from e
