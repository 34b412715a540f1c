# -*- coding: utf-8 -*-
"""Tests for the byte → text decoding cascade and the file reader."""
from __future__ import annotations

import codecs
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

from concatener.core.errors import FileReadError  # noqa: E402
from concatener.io.decoding import (  # noqa: E402
    FALLBACK_ENCODING,
    ISO_8859_ENCODINGS,
    LEGACY_ENCODINGS,
    EncodingDecoder,
    default_probes,
    strict_probe,
)
from concatener.io.readers import DecodingTextReader  # noqa: E402


class BomTests(unittest.TestCase):
    def setUp(self) -> None:
        self.decoder = EncodingDecoder()

    def test_utf16_le_bom_is_stripped(self) -> None:
        raw = codecs.BOM_UTF16_LE + "Grüße\n".encode("utf-16-le")
        result = self.decoder.detect(raw)
        self.assertEqual(result.text, "Grüße\n")
        self.assertEqual(result.encoding, "utf-16-le-bom")

    def test_utf16_be_bom_is_stripped(self) -> None:
        raw = codecs.BOM_UTF16_BE + "Grüße".encode("utf-16-be")
        result = self.decoder.detect(raw)
        self.assertEqual(result.text, "Grüße")
        self.assertEqual(result.encoding, "utf-16-be-bom")

    def test_utf8_bom_is_stripped(self) -> None:
        result = self.decoder.detect(codecs.BOM_UTF8 + "héllo".encode("utf-8"))
        self.assertEqual(result.text, "héllo")
        self.assertEqual(result.encoding, "utf-8-bom")

    def test_invalid_utf8_after_bom_falls_through(self) -> None:
        result = self.decoder.detect(codecs.BOM_UTF8 + b"\xff")
        self.assertNotEqual(result.encoding, "utf-8-bom")
        self.assertEqual(result.encoding, "utf-16-le")

    def test_utf16_bom_with_dangling_byte_is_lossy(self) -> None:
        raw = codecs.BOM_UTF16_LE + "ok".encode("utf-16-le") + b"\x00"
        self.assertEqual(self.decoder.decode(raw), "ok�")


class CascadeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.decoder = EncodingDecoder()

    def test_plain_utf8(self) -> None:
        result = self.decoder.detect("naïve ✓".encode("utf-8"))
        self.assertEqual((result.text, result.encoding), ("naïve ✓", "utf-8"))

    def test_empty_buffer(self) -> None:
        result = self.decoder.detect(b"")
        self.assertEqual((result.text, result.encoding), ("", "utf-8"))

    def test_utf16_le_without_bom(self) -> None:
        result = self.decoder.detect("é".encode("utf-16-le"))
        self.assertEqual((result.text, result.encoding), ("é", "utf-16-le"))

    def test_utf16_be_without_bom(self) -> None:
        # As little-endian this is a lone low surrogate.
        result = self.decoder.detect(b"\x00\xdc")
        self.assertEqual((result.text, result.encoding), ("Ü", "utf-16-be"))

    def test_windows_1252(self) -> None:
        result = self.decoder.detect(b"caf\xe9!")
        self.assertEqual((result.text, result.encoding), ("café!", "cp1252"))

    def test_iso_8859_after_windows_1252_rejects(self) -> None:
        # 0x81 is undefined in Windows-1252.
        result = self.decoder.detect(b"\x81ab")
        self.assertEqual((result.text, result.encoding), ("\x81ab", "iso8859-2"))

    def test_never_raises(self) -> None:
        for raw in (bytes(range(256)), b"\xff" * 7, b"\x00", b"\xd8\x00\xd8\x00"):
            self.assertIsInstance(self.decoder.decode(raw), str)

    def test_fallback_replaces_invalid_sequences(self) -> None:
        result = EncodingDecoder(probes=()).detect(b"ok\xff")
        self.assertEqual((result.text, result.encoding), ("ok�", FALLBACK_ENCODING))

    def test_probe_order_decides_ties(self) -> None:
        decoder = EncodingDecoder(probes=(strict_probe("koi8-r"), strict_probe("cp1252")))
        self.assertEqual(decoder.detect(b"\xe9").encoding, "koi8-r")

    def test_default_probe_order(self) -> None:
        names = [p.name for p in default_probes()]
        self.assertEqual(
            names[:7],
            ["utf-16-le-bom", "utf-16-be-bom", "utf-8-bom", "utf-8", "utf-16-le", "utf-16-be", "cp1252"],
        )
        self.assertEqual(len(names), 7 + len(ISO_8859_ENCODINGS) + len(LEGACY_ENCODINGS))
        self.assertEqual(names[7], "iso8859-2")
        self.assertEqual(names[-1], codecs.lookup("euc-kr").name)


class ReaderTests(unittest.TestCase):
    def test_reads_and_decodes(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "legacy.txt"
            path.write_bytes(b"caf\xe9!")
            self.assertEqual(DecodingTextReader().read_text(path), "café!")

    def test_missing_file_raises_file_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            missing = Path(td) / "missing.txt"
            with self.assertRaises(FileReadError) as ctx:
                DecodingTextReader().read(missing)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIn("missing.txt", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
