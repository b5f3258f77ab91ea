"""
File access used by the profile renderer and picture updates.

Pictures are plain text files (ASCII art). A picture that cannot be read is
shown as nothing rather than treated as an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)


class FileStore(Protocol):
    def read_text_file(self, path: str) -> Optional[List[str]]:
        ...

    def exists(self, path: str) -> bool:
        ...


class LocalFileStore:
    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = root

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if self.root is not None and not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate

    def read_text_file(self, path: str) -> Optional[List[str]]:
        try:
            text = self._resolve(path).read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not read picture %s: %s", path, exc)
            return None
        return text.splitlines()

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()


class InMemoryFileStore:
    """Dictionary-backed store, handy for tests and demos."""

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self._files: Dict[str, str] = dict(files or {})

    def write(self, path: str, text: str) -> None:
        self._files[path] = text

    def read_text_file(self, path: str) -> Optional[List[str]]:
        text = self._files.get(path)
        if text is None:
            return None
        return text.splitlines()

    def exists(self, path: str) -> bool:
        return path in self._files
