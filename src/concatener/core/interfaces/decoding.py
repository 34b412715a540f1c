from __future__ import annotations
"""Text decoding protocol definitions."""

from typing import Protocol, runtime_checkable

from concatener.core.models import DecodeResult


@runtime_checkable
class TextDecoderProtocol(Protocol):
    """Turns raw bytes into text. Implementations must never raise."""

    def decode(self, raw: bytes) -> str:
        ...

    def detect(self, raw: bytes) -> DecodeResult:
        ...
