"""Segments of encoded data and the text segmenter.

A segment is a run of characters encoded in a single mode: a 4-bit mode
indicator, a character count whose width depends on the symbol version, and
the payload bits.
"""

import re
from enum import Enum
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from anaconda_qr.bitbuffer import BitBuffer
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.tables import MAX_VERSION

ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

_NUMERIC_RE = re.compile(r"[0-9]*")
_ALPHANUMERIC_RE = re.compile(r"[A-Z0-9 $%*+./:-]*")
_ALPHANUMERIC_INDEX = {ch: i for i, ch in enumerate(ALPHANUMERIC_CHARSET)}


class Mode(Enum):
    """Segment mode with its indicator and character count widths.

    The widths apply to versions 1-9, 10-26 and 27-40 respectively.
    """

    NUMERIC = (0x1, (10, 12, 14))
    ALPHANUMERIC = (0x2, (9, 11, 13))
    BYTE = (0x4, (8, 16, 16))
    KANJI = (0x8, (8, 10, 12))
    ECI = (0x7, (0, 0, 0))

    @property
    def mode_bits(self) -> int:
        return self.value[0]

    def num_char_count_bits(self, version: int) -> int:
        return self.value[1][(version + 7) // 17]


class QrSegment(NamedTuple):
    mode: Mode
    num_chars: int
    data: Tuple[int, ...]

    @classmethod
    def make_bytes(cls, data: Union[bytes, bytearray, Sequence[int]]) -> "QrSegment":
        bb = BitBuffer()
        for b in data:
            bb.append_bits(b, 8)
        return cls(Mode.BYTE, len(data), tuple(bb))

    @classmethod
    def make_numeric(cls, digits: str) -> "QrSegment":
        if not is_numeric(digits):
            raise InvalidArgumentError("String contains non-numeric characters")
        bb = BitBuffer()
        i = 0
        while i < len(digits):
            n = min(len(digits) - i, 3)
            bb.append_bits(int(digits[i : i + n]), n * 3 + 1)
            i += n
        return cls(Mode.NUMERIC, len(digits), tuple(bb))

    @classmethod
    def make_alphanumeric(cls, text: str) -> "QrSegment":
        if not is_alphanumeric(text):
            raise InvalidArgumentError(
                "String contains characters not encodable in alphanumeric mode"
            )
        bb = BitBuffer()
        for i in range(0, len(text) - 1, 2):
            temp = _ALPHANUMERIC_INDEX[text[i]] * 45
            temp += _ALPHANUMERIC_INDEX[text[i + 1]]
            bb.append_bits(temp, 11)
        if len(text) % 2 > 0:
            bb.append_bits(_ALPHANUMERIC_INDEX[text[-1]], 6)
        return cls(Mode.ALPHANUMERIC, len(text), tuple(bb))

    @classmethod
    def make_eci(cls, assign_val: int) -> "QrSegment":
        """Extended Channel Interpretation designator (e.g. 26 for UTF-8)."""
        bb = BitBuffer()
        if assign_val < 0:
            raise InvalidArgumentError("ECI assignment value out of range")
        elif assign_val < (1 << 7):
            bb.append_bits(assign_val, 8)
        elif assign_val < (1 << 14):
            bb.append_bits(0b10, 2)
            bb.append_bits(assign_val, 14)
        elif assign_val < 1000000:
            bb.append_bits(0b110, 3)
            bb.append_bits(assign_val, 21)
        else:
            raise InvalidArgumentError("ECI assignment value out of range")
        return cls(Mode.ECI, 0, tuple(bb))


def is_numeric(text: str) -> bool:
    return _NUMERIC_RE.fullmatch(text) is not None


def is_alphanumeric(text: str) -> bool:
    return _ALPHANUMERIC_RE.fullmatch(text) is not None


def _narrowest_mode(text: str) -> Mode:
    if is_numeric(text):
        return Mode.NUMERIC
    if is_alphanumeric(text):
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def _make_segment(mode: Mode, text: str) -> QrSegment:
    if mode is Mode.NUMERIC:
        return QrSegment.make_numeric(text)
    if mode is Mode.ALPHANUMERIC:
        return QrSegment.make_alphanumeric(text)
    return QrSegment.make_bytes(text.encode("utf-8"))


def _split_runs(text: str) -> List[QrSegment]:
    runs: List[Tuple[Mode, str]] = []
    for ch in text:
        mode = _narrowest_mode(ch)
        if runs and runs[-1][0] is mode:
            runs[-1] = (mode, runs[-1][1] + ch)
        else:
            runs.append((mode, ch))
    return [_make_segment(mode, run) for mode, run in runs]


def make_segments(text: str) -> List[QrSegment]:
    """Split text into segments for encoding.

    Two candidates are built: one segment per maximal run of the narrowest
    mode, and a single segment in the narrowest mode covering the whole text.
    The candidate with fewer bits at the widest character count fields
    (version 40) wins, the single segment on a tie. Bytes are UTF-8.
    """
    if not text:
        return []
    whole = [_make_segment(_narrowest_mode(text), text)]
    runs = _split_runs(text)
    if len(runs) == 1:
        return whole

    whole_bits = get_total_bits(whole, MAX_VERSION)
    runs_bits = get_total_bits(runs, MAX_VERSION)
    if runs_bits is not None and (whole_bits is None or runs_bits < whole_bits):
        return runs
    return whole


def get_total_bits(segments: Sequence[QrSegment], version: int) -> Optional[int]:
    """Number of bits needed to encode the segments at the given version.

    Returns None if a segment has too many characters for its count field.
    """
    result = 0
    for seg in segments:
        ccbits = seg.mode.num_char_count_bits(version)
        if seg.num_chars >= (1 << ccbits):
            return None
        result += 4 + ccbits + len(seg.data)
    return result
