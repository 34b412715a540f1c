from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressListenerProtocol(Protocol):
    """Receives the resolved file total and one tick per written file."""

    def files_found(self, total: int) -> None:
        ...

    def file_done(self, index: int, path: Path) -> None:
        ...
