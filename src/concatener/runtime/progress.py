from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from concatener.core.interfaces import ProgressListenerProtocol
from concatener.logging.helpers import get_logger


class LoggingProgress(ProgressListenerProtocol):
    """Progress listener that reports through the 'concatener.progress' logger."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('progress')
        self._total = 0

    def files_found(self, total: int) -> None:
        self._total = total
        self._log.info('found %d file(s) to concatenate', total)

    def file_done(self, index: int, path: Path) -> None:
        self._log.debug('[%d/%d] %s', index + 1, self._total, path)
