"""ZPL ^GFA run-length compression.

Rows are emitted top to bottom with no separators. Each row is one of:

- ``:`` the row is byte-identical to the previous row
- ``,`` the row (or the rest of it) is all 0 nibbles
- ``!`` the row (or the rest of it) is all F nibbles
- a sequence of hex digits, each optionally preceded by a repeat count
  written with the low (G-Y = 1-19) and high (g-z = 20-400) alphabets
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidPayload, InvalidRepeatCount, InvalidRowAlignment
from ..models.bitmap import PackedBitmap

_LOGGER = logging.getLogger(__name__)

ROW_REPEAT_CODE = ":"
ALL_ZERO_CODE = ","
ALL_ONE_CODE = "!"

# Index 0 is a blank placeholder: a zero digit emits nothing
REPEAT_LOW_CODES = " GHIJKLMNOPQRSTUVWXY"
REPEAT_HIGH_CODES = " ghijklmnopqrstuvwxyz"

MAX_REPEAT_COUNT = 419

# Run scanning stops once a run exceeds this many nibbles
RUN_SCAN_LIMIT = 400

_HEX_DIGITS = "0123456789ABCDEF"

_HEX_VALUES = {char: value for value, char in enumerate(_HEX_DIGITS)}
_REPEAT_VALUES = {
    **{char: index for index, char in enumerate(REPEAT_LOW_CODES) if index},
    **{char: index * 20 for index, char in enumerate(REPEAT_HIGH_CODES) if index},
}


def get_repeat_code(repeat_count: int) -> str:
    """Encode a run length as 0-2 repeat count characters.

    Args:
        repeat_count: Run length (0-419)

    Returns:
        High alphabet character for the twenties (if any) followed by the
        low alphabet character for the units (if any)

    Raises:
        InvalidRepeatCount: If repeat_count is outside 0-419
    """
    if not 0 <= repeat_count <= MAX_REPEAT_COUNT:
        raise InvalidRepeatCount(
            f"Repeat count out of range: {repeat_count} (must be 0-{MAX_REPEAT_COUNT})"
        )

    high, low = divmod(repeat_count, 20)

    code = ""
    if high > 0:
        code += REPEAT_HIGH_CODES[high]
    if low > 0:
        code += REPEAT_LOW_CODES[low]
    return code


def classify_row(row: bytes | memoryview, previous_row: bytes | memoryview | None) -> str | None:
    """Pick a single-character token for a row, if one applies.

    Checked in order: identical to previous row, all 0x00, all 0xFF.

    Args:
        row: Current row bytes
        previous_row: Row above, or None for the first row

    Returns:
        Row token, or None when the row needs nibble encoding
    """
    data = bytes(row)

    if previous_row is not None and data == bytes(previous_row):
        return ROW_REPEAT_CODE
    if data == bytes(len(data)):
        return ALL_ZERO_CODE
    if data == b"\xff" * len(data):
        return ALL_ONE_CODE
    return None


def _split_nibbles(row: bytes | memoryview) -> list[int]:
    nibbles = []
    for byte in row:
        nibbles.append(byte >> 4)
        nibbles.append(byte & 0x0F)
    return nibbles


def _run_length(nibbles: list[int], start: int) -> int:
    value = nibbles[start]
    count = 0
    for index in range(start, len(nibbles)):
        if count > RUN_SCAN_LIMIT or nibbles[index] != value:
            break
        count += 1
    return count


def encode_row_nibbles(row: bytes | memoryview) -> str:
    """Run-length encode one row nibble by nibble.

    Runs of 3 or more identical nibbles become a repeat code plus hex digit;
    shorter runs are written digit by digit. A run of 0 or F reaching the
    end of the row is written as ``,`` or ``!``.

    Args:
        row: Row bytes that did not match a row token

    Returns:
        Encoded row text
    """
    nibbles = _split_nibbles(row)
    nibble_count = len(nibbles)

    parts: list[str] = []
    index = 0
    while index < nibble_count:
        value = nibbles[index]
        repeat_count = _run_length(nibbles, index)

        if repeat_count > 2:
            if index + repeat_count == nibble_count and value in (0x0, 0xF):
                parts.append(ALL_ZERO_CODE if value == 0x0 else ALL_ONE_CODE)
                break
            parts.append(get_repeat_code(repeat_count))
            parts.append(_HEX_DIGITS[value])
            index += repeat_count
        else:
            parts.append(_HEX_DIGITS[value])
            index += 1

    return "".join(parts)


def get_compressed_hex(data: bytes | bytearray | memoryview, row_bytes: int) -> str:
    """Compress packed 1bpp data into ZPL ^GFA run-length text.

    Args:
        data: Packed bytes, row-major
        row_bytes: Bytes per row

    Returns:
        Compressed payload

    Raises:
        InvalidRowAlignment: If len(data) is not a multiple of row_bytes
    """
    bitmap = PackedBitmap(data=bytes(data), row_bytes=row_bytes)

    parts: list[str] = []
    previous_row = None
    for row in bitmap.rows():
        token = classify_row(row, previous_row)
        parts.append(token if token is not None else encode_row_nibbles(row))
        previous_row = row

    payload = "".join(parts)

    _LOGGER.debug(
        "Compressed %d rows (%d bytes) into %d characters",
        bitmap.row_count,
        bitmap.total_bytes,
        len(payload),
    )

    return payload


def get_uncompressed_hex(data: bytes | bytearray | memoryview) -> str:
    """Write every byte as two uppercase hex digits."""
    return bytes(data).hex().upper()


def _pack_nibbles(nibbles: list[int]) -> bytes:
    return bytes((nibbles[i] << 4) | nibbles[i + 1] for i in range(0, len(nibbles), 2))


def decompress_hex(payload: str, row_bytes: int) -> bytes:
    """Expand a ZPL ^GFA run-length payload back into packed bytes.

    Args:
        payload: Compressed payload
        row_bytes: Bytes per row

    Returns:
        Packed 1bpp data

    Raises:
        InvalidRowAlignment: If row_bytes is less than 1
        InvalidPayload: If the payload is malformed or ends mid-row
    """
    if row_bytes < 1:
        raise InvalidRowAlignment(f"row_bytes must be at least 1, got {row_bytes}")

    nibble_count = row_bytes * 2
    output = bytearray()
    previous_row: bytes | None = None
    current: list[int] = []
    pending_count = 0

    for position, char in enumerate(payload):
        if char in _REPEAT_VALUES:
            pending_count += _REPEAT_VALUES[char]
            continue

        if char in _HEX_VALUES:
            repeat_count = pending_count or 1
            pending_count = 0
            if len(current) + repeat_count > nibble_count:
                raise InvalidPayload(
                    f"Run of {repeat_count} at position {position} overflows "
                    f"row of {nibble_count} nibbles"
                )
            current.extend([_HEX_VALUES[char]] * repeat_count)
        elif char == ROW_REPEAT_CODE:
            if pending_count or current:
                raise InvalidPayload(f"Row repeat at position {position} is not at a row start")
            if previous_row is None:
                raise InvalidPayload("Row repeat before any row was decoded")
            current = _split_nibbles(previous_row)
        elif char in (ALL_ZERO_CODE, ALL_ONE_CODE):
            if pending_count:
                raise InvalidPayload(f"Repeat count before {char!r} at position {position}")
            fill = 0x0 if char == ALL_ZERO_CODE else 0xF
            current.extend([fill] * (nibble_count - len(current)))
        else:
            raise InvalidPayload(f"Unexpected character {char!r} at position {position}")

        if len(current) == nibble_count:
            previous_row = _pack_nibbles(current)
            output += previous_row
            current = []

    if pending_count:
        raise InvalidPayload("Payload ends with a repeat count and no hex digit")
    if current:
        raise InvalidPayload(
            f"Payload ends mid-row ({len(current)}/{nibble_count} nibbles)"
        )

    return bytes(output)


def decompress_uncompressed_hex(payload: str) -> bytes:
    """Decode a plain hex payload.

    Raises:
        InvalidPayload: If payload is not an even-length hex string
    """
    try:
        return bytes.fromhex(payload)
    except ValueError as err:
        raise InvalidPayload(f"Invalid hex payload: {err}") from err
