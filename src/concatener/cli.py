from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Sequence

from concatener.constants import ENV_JSON_LOGS
from concatener.core.errors import ConcatenerError
from concatener.core.report import ConcatReport
from concatener.logging.factory import DefaultLoggerFactory
from concatener.logging.helpers import get_logger
from concatener.parsing.parser import parse_request
from concatener.runtime.progress import LoggingProgress
from concatener.runtime.runner import ConcatRunner

logger = get_logger('concatener')


def _configure_logging(enable_json: bool, level: int) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('concatener')


class Concatener:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> ConcatReport:
        """Run the tool with an argv-like sequence and return the run report.

        Raises ConcatenerError on any resolution or I/O failure.
        """
        request, ns = parse_request(argv)

        json_logs = ns.json_logs or os.getenv(ENV_JSON_LOGS) == '1'
        level = logging.DEBUG if ns.verbose else logging.WARNING if ns.quiet else logging.INFO
        _configure_logging(json_logs, level)

        runner = ConcatRunner(progress=LoggingProgress(), logger=get_logger('runner'))
        report = runner.run(request)
        logger.debug('run report: %s', report.to_json(indent=0), extra={'context': report.to_dict()})
        return report


def main() -> NoReturn:
    """Entry point for the `concatener` console script."""
    try:
        Concatener.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except ConcatenerError as exc:
        logger.error('✘ %s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
