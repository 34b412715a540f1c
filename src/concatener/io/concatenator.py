from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence

from concatener.constants import OUTPUT_ENCODING, OUTPUT_SEPARATOR, TRAILING_WHITESPACE
from concatener.core.errors import OutputWriteError
from concatener.core.interfaces import ProgressListenerProtocol
from concatener.core.report import ConcatReport
from concatener.io.readers import DecodingTextReader
from concatener.logging.helpers import get_logger


class Concatenator:
    """Write sorted files into one UTF-8 output, joined by single newlines.

    Each file's decoded text loses its trailing whitespace before it is
    written; nothing follows the last file. The output is truncated up front
    and left as-is if a later file fails.
    """

    def __init__(
        self,
        *,
        reader: Optional[DecodingTextReader] = None,
        progress: Optional[ProgressListenerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('io.concat')
        self._reader = reader or DecodingTextReader(logger=self._log)
        self._progress = progress

    def _open_output(self, output_path: Path) -> BinaryIO:
        try:
            return open(output_path, 'wb')
        except OSError as exc:
            raise OutputWriteError(output_path, exc.strerror or str(exc)) from exc

    def concatenate(
        self,
        files: Sequence[Path],
        output_path: Path,
        *,
        report: Optional[ConcatReport] = None,
    ) -> ConcatReport:
        report = report if report is not None else ConcatReport()
        report.output_path = output_path
        report.files_total = len(files)
        if self._progress is not None:
            self._progress.files_found(len(files))

        self._log.debug('writing %d file(s) to %s', len(files), output_path)
        out = self._open_output(output_path)
        try:
            self._write_files(out, files, output_path, report)
        except BaseException:
            self._discard(out, output_path)
            raise
        self._close(out, output_path)

        return report

    def _write_files(self, out: BinaryIO, files: Sequence[Path], output_path: Path, report: ConcatReport) -> None:
        try:
            last = len(files) - 1
            for idx, fp in enumerate(files):
                result = self._reader.read(fp)
                chunk = result.text.rstrip(TRAILING_WHITESPACE).encode(OUTPUT_ENCODING)
                if idx < last:
                    chunk += OUTPUT_SEPARATOR
                out.write(chunk)

                report.files_written += 1
                report.bytes_written += len(chunk)
                report.add_encoding(result.encoding)
                if self._progress is not None:
                    self._progress.file_done(idx, fp)
            out.flush()
        except OSError as exc:
            raise OutputWriteError(output_path, exc.strerror or str(exc)) from exc

    @staticmethod
    def _close(out: BinaryIO, output_path: Path) -> None:
        try:
            out.close()
        except OSError as exc:
            raise OutputWriteError(output_path, exc.strerror or str(exc)) from exc

    def _discard(self, out: BinaryIO, output_path: Path) -> None:
        """Close *out* while another error propagates; that error is the one reported."""
        try:
            out.close()
        except OSError as exc:
            self._log.debug('closing %s after a failed run also failed: %s', output_path, exc)
