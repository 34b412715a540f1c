from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union


@dataclass(frozen=True)
class ConcatRequest:
    """Validated CLI input consumed by the runner."""
    output_path: Path
    recursive: bool = False
    inputs: Tuple[str, ...] = ()


class TokenKind(enum.Enum):
    """Shapes an input token can take, in dispatch priority order."""
    DIRECTORY_PATTERN = 'directory_pattern'
    DIRECTORY = 'directory'
    BARE_PATTERN = 'bare_pattern'
    FILE = 'file'
    MISSING = 'missing'


# --------------------------------------------------------------------------- #
#  Wildcard patterns                                                          #
# --------------------------------------------------------------------------- #
@dataclass(frozen=True)
class MatchAll:
    def matches(self, filename: str) -> bool:
        return True


@dataclass(frozen=True)
class Contains:
    substr: str

    def matches(self, filename: str) -> bool:
        return self.substr in filename


@dataclass(frozen=True)
class Suffix:
    suffix: str

    def matches(self, filename: str) -> bool:
        return filename.endswith(self.suffix)


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def matches(self, filename: str) -> bool:
        return filename.startswith(self.prefix)


@dataclass(frozen=True)
class Exact:
    name: str

    def matches(self, filename: str) -> bool:
        return filename == self.name


Pattern = Union[MatchAll, Contains, Suffix, Prefix, Exact]


@dataclass(frozen=True)
class DecodeResult:
    text: str
    encoding: str
