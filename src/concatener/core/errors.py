from __future__ import annotations

"""Error taxonomy shared by resolution and concatenation.

Every failure is fatal to the run. Each exception carries the path (or raw
input token) that triggered it so the CLI can report it verbatim.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class ConcatenerError(Exception):
    """Base class for all errors raised by concatener."""

    def __init__(self, message: str, *, path: PathLike | None = None) -> None:
        super().__init__(message)
        self.path = path

    def add_context(self, context: str) -> None:
        """Prefix the message with *context* (input token or output path)."""
        message = str(self.args[0]) if self.args else ''
        self.args = (f'{context}: {message}',) + tuple(self.args[1:])


class InputNotFound(ConcatenerError):
    """Input token is neither a file, a directory nor a wildcard pattern."""

    def __init__(self, token: str) -> None:
        super().__init__(f'input path does not exist: {token}', path=token)


class DirectoryReadError(ConcatenerError):
    def __init__(self, directory: PathLike, reason: str = '') -> None:
        msg = f'failed to read directory: {directory}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg, path=directory)


class FileReadError(ConcatenerError):
    def __init__(self, file_path: PathLike, reason: str = '') -> None:
        msg = f'failed to read file: {file_path}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg, path=file_path)


class OutputWriteError(ConcatenerError):
    def __init__(self, output_path: PathLike, reason: str = '') -> None:
        msg = f'failed to write output file: {output_path}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg, path=output_path)
