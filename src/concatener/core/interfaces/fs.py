from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from concatener.core.models import Pattern, TokenKind


@runtime_checkable
class FileCollectorProtocol(Protocol):
    def collect(self, directory: Path, *, recursive: bool, pattern: Optional[Pattern] = None) -> List[Path]:
        """Return regular files under *directory*, optionally filtered by name."""
        ...

    def list_entries(self, directory: Path) -> List[Path]:
        """Return the direct children of *directory* (files and directories)."""
        ...


@runtime_checkable
class InputResolverProtocol(Protocol):
    def classify(self, token: str) -> TokenKind:
        ...

    def resolve(self, token: str, recursive: bool) -> List[Path]:
        """Turn one raw input token into the list of files it names."""
        ...
