from __future__ import annotations

"""File readers that turn a resolved path into decoded text."""

import logging
from pathlib import Path
from typing import Optional

from concatener.core.errors import FileReadError
from concatener.core.interfaces import TextDecoderProtocol
from concatener.core.models import DecodeResult
from concatener.io.decoding import EncodingDecoder
from concatener.logging.helpers import get_logger, trace_io


class DecodingTextReader:
    """Reads a whole file as bytes and hands it to the decoder."""

    def __init__(self, *, decoder: Optional[TextDecoderProtocol] = None, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.readers')
        self._decoder: TextDecoderProtocol = decoder or EncodingDecoder(logger=self._log)

    def read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(path, exc.strerror or str(exc)) from exc

    def read(self, path: Path) -> DecodeResult:
        raw = self.read_bytes(path)
        result = self._decoder.detect(raw)
        trace_io(self._log, 'decoded file', path=str(path), size=len(raw), encoding=result.encoding)
        return result

    def read_text(self, path: Path) -> str:
        return self.read(path).text
