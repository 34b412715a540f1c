from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from concatener.core.errors import DirectoryReadError
from concatener.core.interfaces import FileCollectorProtocol
from concatener.core.models import Pattern
from concatener.logging.helpers import get_logger


class FileCollector(FileCollectorProtocol):
    """Enumerate regular files in a directory, shallow or depth-first.

    Recursion uses an explicit stack of pending directories. Symlinks are
    followed when testing for files and directories; there is no cycle
    detection. Entry order is whatever the OS yields, callers sort.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.collector')

    def _scan(self, directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                return list(it)
        except OSError as exc:
            raise DirectoryReadError(directory, exc.strerror or str(exc)) from exc

    def list_entries(self, directory: Path) -> List[Path]:
        return [directory / entry.name for entry in self._scan(directory)]

    def collect(self, directory: Path, *, recursive: bool, pattern: Optional[Pattern] = None) -> List[Path]:
        files: List[Path] = []
        pending: List[Path] = [directory]
        while pending:
            current = pending.pop()
            subdirs: List[Path] = []
            for entry in self._scan(current):
                entry_path = current / entry.name
                try:
                    is_file = entry.is_file()
                    is_dir = not is_file and recursive and entry.is_dir()
                except OSError as exc:
                    raise DirectoryReadError(current, exc.strerror or str(exc)) from exc
                if is_file:
                    if pattern is None or pattern.matches(entry.name):
                        files.append(entry_path)
                elif is_dir:
                    subdirs.append(entry_path)
            # Reversed so the first enumerated subdirectory is visited first.
            pending.extend(reversed(subdirs))
        self._log.debug('collected %d file(s) under %s (recursive=%s)', len(files), directory, recursive)
        return files
