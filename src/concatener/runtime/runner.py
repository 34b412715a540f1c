from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from concatener.core.errors import ConcatenerError
from concatener.core.interfaces import InputResolverProtocol, ProgressListenerProtocol
from concatener.core.models import ConcatRequest
from concatener.core.report import ConcatReport, StageTimer
from concatener.io.concatenator import Concatenator
from concatener.logging.helpers import get_logger
from concatener.processing.input_resolver import InputResolver
from concatener.utils.paths import fs_sort_key


class ConcatRunner:
    """Resolve every input token, sort the aggregate and concatenate it.

    Results of all tokens are appended as-is: overlapping tokens produce the
    same file more than once. The combined list is then sorted by path bytes,
    which alone decides the output order.
    """

    def __init__(
        self,
        *,
        resolver: Optional[InputResolverProtocol] = None,
        concatenator: Optional[Concatenator] = None,
        progress: Optional[ProgressListenerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('runner')
        self._resolver: InputResolverProtocol = resolver or InputResolver()
        self._concatenator = concatenator or Concatenator(progress=progress)

    def resolve_all(self, inputs: List[str], recursive: bool) -> List[Path]:
        files: List[Path] = []
        for token in inputs:
            try:
                files.extend(self._resolver.resolve(token, recursive))
            except ConcatenerError as exc:
                exc.add_context(f'failed to resolve input: {token}')
                raise
        files.sort(key=fs_sort_key)
        return files

    def run(self, request: ConcatRequest) -> ConcatReport:
        report = ConcatReport(inputs=list(request.inputs), output_path=request.output_path)

        with StageTimer(report, 'resolve'):
            files = self.resolve_all(list(request.inputs), request.recursive)

        if not files:
            self._log.warning('⚠  no input files found to concatenate')
            report.finish()
            return report

        with StageTimer(report, 'concat'):
            try:
                self._concatenator.concatenate(files, request.output_path, report=report)
            except ConcatenerError as exc:
                exc.add_context(f'failed to concatenate files to: {request.output_path}')
                raise

        report.finish()
        self._log.info('✔ concatenated %d files to %s', report.files_written, request.output_path)
        return report
