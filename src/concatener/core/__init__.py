from __future__ import annotations

"""Public surface for concatener.core.

This module exposes the data model, the error taxonomy and the protocol
types so downstream consumers have a stable import location:

    from concatener.core import InputNotFound, ConcatRequest, TextDecoderProtocol
"""

from concatener.core.errors import (
    ConcatenerError,
    DirectoryReadError,
    FileReadError,
    InputNotFound,
    OutputWriteError,
)
from concatener.core.interfaces import (
    FileCollectorProtocol,
    InputResolverProtocol,
    ProgressListenerProtocol,
    TextDecoderProtocol,
)
from concatener.core.models import (
    ConcatRequest,
    Contains,
    DecodeResult,
    Exact,
    MatchAll,
    Pattern,
    Prefix,
    Suffix,
    TokenKind,
)

__all__ = [
    # Errors
    "ConcatenerError",
    "DirectoryReadError",
    "FileReadError",
    "InputNotFound",
    "OutputWriteError",
    # Protocols
    "FileCollectorProtocol",
    "InputResolverProtocol",
    "ProgressListenerProtocol",
    "TextDecoderProtocol",
    # Models
    "ConcatRequest",
    "Contains",
    "DecodeResult",
    "Exact",
    "MatchAll",
    "Pattern",
    "Prefix",
    "Suffix",
    "TokenKind",
]
