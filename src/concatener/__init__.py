from __future__ import annotations

__version__ = '0.1.0'

from concatener.cli import Concatener
from concatener.core.errors import (
    ConcatenerError,
    DirectoryReadError,
    FileReadError,
    InputNotFound,
    OutputWriteError,
)
from concatener.core.models import ConcatRequest
from concatener.core.report import ConcatReport
from concatener.io.collector import FileCollector
from concatener.io.concatenator import Concatenator
from concatener.io.decoding import EncodingDecoder
from concatener.processing.input_resolver import InputResolver
from concatener.processing.pattern_matcher import matches, parse_pattern
from concatener.runtime.runner import ConcatRunner
from concatener.utils.paths import expand_home

__all__ = [
    'Concatener',
    'ConcatRequest',
    'ConcatReport',
    'ConcatRunner',
    'ConcatenerError',
    'Concatenator',
    'DirectoryReadError',
    'EncodingDecoder',
    'FileCollector',
    'FileReadError',
    'InputNotFound',
    'InputResolver',
    'OutputWriteError',
    'expand_home',
    'matches',
    'parse_pattern',
]
