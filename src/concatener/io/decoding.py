from __future__ import annotations

"""
Best-effort byte → text decoding.

`EncodingDecoder` walks an ordered tuple of probes and keeps the first one
that decodes the buffer without error:

  1. byte-order mark (UTF-16-LE, UTF-16-BE, UTF-8)
  2. strict UTF-8
  3. strict UTF-16-LE, then UTF-16-BE
  4. strict Windows-1252
  5. strict ISO-8859 variants
  6. strict legacy CJK / Cyrillic encodings
  7. UTF-8 with U+FFFD substitution (always succeeds)

This is a fixed-order heuristic, not charset detection: when two encodings
both accept a buffer, the earlier one wins even if it is the wrong one.
"""

import codecs
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from concatener.core.interfaces import TextDecoderProtocol
from concatener.core.models import DecodeResult
from concatener.logging.helpers import get_logger

ISO_8859_ENCODINGS: Tuple[str, ...] = (
    'iso8859-2',   # Central European
    'iso8859-4',   # Baltic
    'iso8859-5',   # Cyrillic
    'iso8859-6',   # Arabic
    'iso8859-7',   # Greek
    'iso8859-8',   # Hebrew
    'iso8859-10',  # Nordic
    'iso8859-13',  # Baltic Rim
    'iso8859-14',  # Celtic
    'iso8859-15',  # Latin-9
    'iso8859-16',  # South-Eastern European
)

LEGACY_ENCODINGS: Tuple[str, ...] = (
    'koi8-r',
    'koi8-u',
    'big5',
    'gb18030',
    'shift_jis',
    'euc-jp',
    'euc-kr',
)

FALLBACK_ENCODING = 'utf-8-replace'


@dataclass(frozen=True)
class Probe:
    """One cascade step: returns decoded text, or None to pass."""
    name: str
    run: Callable[[bytes], Optional[str]]


def strict_probe(encoding: str) -> Probe:
    def _run(raw: bytes) -> Optional[str]:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            return None

    return Probe(codecs.lookup(encoding).name, _run)


def _bom_utf16_le(raw: bytes) -> Optional[str]:
    if raw.startswith(codecs.BOM_UTF16_LE):
        return raw[len(codecs.BOM_UTF16_LE):].decode('utf-16-le', errors='replace')
    return None


def _bom_utf16_be(raw: bytes) -> Optional[str]:
    if raw.startswith(codecs.BOM_UTF16_BE):
        return raw[len(codecs.BOM_UTF16_BE):].decode('utf-16-be', errors='replace')
    return None


def _bom_utf8(raw: bytes) -> Optional[str]:
    if not raw.startswith(codecs.BOM_UTF8):
        return None
    try:
        return raw[len(codecs.BOM_UTF8):].decode('utf-8')
    except UnicodeDecodeError:
        return None


def _lossy_utf8(raw: bytes) -> str:
    return raw.decode('utf-8', errors='replace')


def default_probes() -> Tuple[Probe, ...]:
    return (
        Probe('utf-16-le-bom', _bom_utf16_le),
        Probe('utf-16-be-bom', _bom_utf16_be),
        Probe('utf-8-bom', _bom_utf8),
        strict_probe('utf-8'),
        strict_probe('utf-16-le'),
        strict_probe('utf-16-be'),
        strict_probe('cp1252'),
        *(strict_probe(enc) for enc in ISO_8859_ENCODINGS),
        *(strict_probe(enc) for enc in LEGACY_ENCODINGS),
    )


class EncodingDecoder(TextDecoderProtocol):
    def __init__(self, *, probes: Optional[Sequence[Probe]] = None, logger: Optional[logging.Logger] = None) -> None:
        self._probes: Tuple[Probe, ...] = tuple(probes) if probes is not None else default_probes()
        self._log = logger or get_logger('io.decoding')

    @property
    def probes(self) -> Tuple[Probe, ...]:
        return self._probes

    def detect(self, raw: bytes) -> DecodeResult:
        for probe in self._probes:
            text = probe.run(raw)
            if text is not None:
                return DecodeResult(text=text, encoding=probe.name)
        self._log.debug('no probe accepted %d byte(s); decoding lossily', len(raw))
        return DecodeResult(text=_lossy_utf8(raw), encoding=FALLBACK_ENCODING)

    def decode(self, raw: bytes) -> str:
        return self.detect(raw).text
