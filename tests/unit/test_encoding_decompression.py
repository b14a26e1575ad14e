"""Tests for expanding ^GFA payloads back into packed bytes."""

import numpy as np
import pytest

from zplgfa.encoding.compression import (
    decompress_hex,
    decompress_uncompressed_hex,
    get_compressed_hex,
)
from zplgfa.exceptions import InvalidPayload, InvalidRowAlignment


class TestDecompressHex:
    """Test the run-length decoder."""

    @pytest.mark.parametrize(
        ("payload", "row_bytes", "expected"),
        [
            (",", 1, b"\x00"),
            ("!", 1, b"\xff"),
            ("01", 1, b"\x01"),
            ("JF01", 3, b"\xff\xff\x01"),
            ("LF01", 4, b"\xff\xff\xff\x01"),
            ("01!", 3, b"\x01\xff\xff"),
            ("F,", 10, b"\xf0" + b"\x00" * 9),
            ("gG01", 11, b"\x00" * 10 + b"\x01"),
            (",:!1234:", 2, bytes([0, 0, 0, 0, 0xFF, 0xFF, 0x12, 0x34, 0x12, 0x34])),
        ],
    )
    def test_known_payloads(self, payload, row_bytes, expected):
        assert decompress_hex(payload, row_bytes) == expected

    def test_summed_repeat_counts(self):
        # "zz" is 800 repeats
        assert decompress_hex("zzF", 400) == b"\xff" * 400

    def test_empty_payload(self):
        assert decompress_hex("", 3) == b""

    @pytest.mark.parametrize("row_bytes", [1, 2, 3, 7, 16])
    def test_inverts_compression(self, row_bytes):
        rng = np.random.default_rng(1234)
        # Sparse random data gives a mix of runs, literals and row tokens
        rows = []
        for _ in range(40):
            choice = rng.integers(0, 4)
            if choice == 0 and rows:
                rows.append(rows[-1])
            elif choice == 1:
                rows.append(bytes(row_bytes))
            else:
                values = rng.choice([0x00, 0xFF, 0x0F, 0x01], size=row_bytes)
                rows.append(bytes(int(v) for v in values))
        data = b"".join(rows)

        assert decompress_hex(get_compressed_hex(data, row_bytes), row_bytes) == data

    def test_inverts_capped_runs(self):
        data = b"\x12" + b"\x00" * 300 + b"\x34" + b"\xff" * 250
        row_bytes = len(data)

        assert decompress_hex(get_compressed_hex(data, row_bytes), row_bytes) == data

    @pytest.mark.parametrize(
        ("payload", "match"),
        [
            (":", "before any row"),
            ("0:", "not at a row start"),
            ("G:", "not at a row start"),
            ("0#", "Unexpected character"),
            ("0a", "Unexpected character"),
            ("0 ", "Unexpected character"),
            ("G,", "Repeat count before"),
            ("IF", "overflows"),
            ("0", "ends mid-row"),
            ("00G", "ends with a repeat count"),
        ],
    )
    def test_malformed_payload_raises(self, payload, match):
        with pytest.raises(InvalidPayload, match=match):
            decompress_hex(payload, 1)

    def test_zero_row_width_raises(self):
        with pytest.raises(InvalidRowAlignment):
            decompress_hex(",", 0)


class TestDecompressUncompressedHex:
    """Test plain hex decoding."""

    def test_decode(self):
        assert decompress_uncompressed_hex("FFFF01") == b"\xff\xff\x01"

    @pytest.mark.parametrize("payload", ["F", "GG", "0X"])
    def test_invalid_hex_raises(self, payload):
        with pytest.raises(InvalidPayload):
            decompress_uncompressed_hex(payload)
