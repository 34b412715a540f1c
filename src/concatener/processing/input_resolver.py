from __future__ import annotations

"""
Input resolution: one raw token in, a list of regular files out.

Tokens are classified by an ordered table of predicates; the first one that
holds decides how the token is expanded:

    1. DIRECTORY_PATTERN  wildcard and separator   ('docs/*.md')
    2. DIRECTORY          existing directory       ('docs')
    3. BARE_PATTERN       wildcard, no separator   ('*.md')
    4. FILE               existing regular file    ('README.md')
    5. MISSING            anything else            -> InputNotFound

Wildcards never go through a glob primitive. Every level is listed through
the FileCollector and filtered with the pattern matcher, so a non-recursive
pattern only ever sees the one directory it names.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from concatener.core.errors import InputNotFound
from concatener.core.interfaces import FileCollectorProtocol, InputResolverProtocol
from concatener.core.models import TokenKind
from concatener.io.collector import FileCollector
from concatener.logging.helpers import get_logger
from concatener.processing.pattern_matcher import has_wildcard, parse_pattern
from concatener.utils.paths import expand_home, has_separator, split_last_separator, split_segments

Predicate = Callable[[str], bool]
Handler = Callable[[str, bool], List[Path]]

_CURRENT_DIR = Path('.')


class InputResolver(InputResolverProtocol):
    def __init__(
        self,
        *,
        collector: Optional[FileCollectorProtocol] = None,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._collector: FileCollectorProtocol = collector or FileCollector(logger=logger)
        self._env = env
        self._log = logger or get_logger('resolver')
        self._rules: Tuple[Tuple[TokenKind, Predicate], ...] = (
            (TokenKind.DIRECTORY_PATTERN, lambda t: has_wildcard(t) and has_separator(t)),
            (TokenKind.DIRECTORY, lambda t: Path(t).is_dir()),
            (TokenKind.BARE_PATTERN, has_wildcard),
            (TokenKind.FILE, lambda t: Path(t).is_file()),
        )
        self._handlers: Dict[TokenKind, Handler] = {
            TokenKind.DIRECTORY_PATTERN: self._resolve_directory_pattern,
            TokenKind.DIRECTORY: self._resolve_directory,
            TokenKind.BARE_PATTERN: self._resolve_wildcard,
            TokenKind.FILE: lambda t, _recursive: [Path(t)],
        }

    # -------- InputResolverProtocol --------

    def classify(self, token: str) -> TokenKind:
        """Return the shape of an already home-expanded *token*."""
        if not token:
            return TokenKind.MISSING
        for kind, predicate in self._rules:
            if predicate(token):
                return kind
        return TokenKind.MISSING

    def resolve(self, token: str, recursive: bool) -> List[Path]:
        expanded = expand_home(token, self._env)
        kind = self.classify(expanded)
        handler = self._handlers.get(kind)
        if handler is None:
            raise InputNotFound(token)
        files = handler(expanded, recursive)
        self._log.debug('%s resolved as %s: %d file(s)', token, kind.value, len(files))
        return files

    # -------- Handlers --------

    def _resolve_directory_pattern(self, token: str, recursive: bool) -> List[Path]:
        dir_part, pattern_part = split_last_separator(token)
        directory = Path(dir_part) if dir_part is not None else _CURRENT_DIR
        if directory.is_dir():
            return self._collector.collect(directory, recursive=recursive, pattern=parse_pattern(pattern_part))
        # The wildcard sits in the directory part, e.g. 'src/*/main.py'.
        return self._resolve_wildcard(token, recursive)

    def _resolve_directory(self, token: str, recursive: bool) -> List[Path]:
        return self._collector.collect(Path(token), recursive=recursive)

    def _resolve_wildcard(self, token: str, recursive: bool) -> List[Path]:
        """Generic wildcard resolution over the directories named by *token*.

        Without a separator the search root is the current directory. With
        one, a shallow search expands the directory part segment by segment;
        a recursive search walks the directory part only when it names an
        existing directory as written. A missing directory yields no files
        rather than an error.
        """
        base, file_pattern = split_last_separator(token)
        pattern = parse_pattern(file_pattern)
        if base is None:
            roots = [_CURRENT_DIR]
        elif recursive:
            roots = [Path(base)] if Path(base).is_dir() else []
        else:
            roots = self._expand_directories(base)
        files: List[Path] = []
        for root in roots:
            files.extend(self._collector.collect(root, recursive=recursive, pattern=pattern))
        return files

    def _expand_directories(self, base: str) -> List[Path]:
        """Expand a directory expression that may contain wildcards."""
        if not has_wildcard(base):
            directory = Path(base)
            return [directory] if directory.is_dir() else []

        segments = split_segments(base)
        if segments and segments[0] == '':
            current = [Path(base[0])]
            segments = segments[1:]
        else:
            current = [_CURRENT_DIR]

        for segment in segments:
            if segment in ('', '.'):
                continue
            if has_wildcard(segment):
                pattern = parse_pattern(segment)
                current = [
                    entry
                    for parent in current
                    for entry in self._collector.list_entries(parent)
                    if pattern.matches(entry.name) and entry.is_dir()
                ]
            else:
                current = [parent / segment for parent in current if (parent / segment).is_dir()]
            if not current:
                break
        return current
