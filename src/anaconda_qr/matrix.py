"""Module grid construction: function patterns and data placement."""

from typing import List
from typing import Sequence

from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.masking import mask_pattern
from anaconda_qr.tables import alignment_pattern_positions
from anaconda_qr.tables import symbol_size

FORMAT_GENERATOR = 0x537
FORMAT_MASK = 0x5412
VERSION_GENERATOR = 0x1F25


def _get_bit(x: int, i: int) -> bool:
    return (x >> i) & 1 != 0


def format_bits(ecl: Ecc, mask: int) -> int:
    """15-bit format information: BCH(15,5) code of level and mask, XOR-masked."""
    if not 0 <= mask <= 7:
        raise InvalidArgumentError(f"Mask {mask} out of range [0, 7]")
    data = ecl.format_bits << 3 | mask
    rem = data
    for _ in range(10):
        rem = (rem << 1) ^ ((rem >> 9) * FORMAT_GENERATOR)
    return (data << 10 | rem) ^ FORMAT_MASK


def version_bits(version: int) -> int:
    """18-bit version information (versions 7 and up)."""
    if not 7 <= version <= 40:
        raise InvalidArgumentError(f"No version information for version {version}")
    rem = version
    for _ in range(12):
        rem = (rem << 1) ^ ((rem >> 11) * VERSION_GENERATOR)
    return version << 12 | rem


class ModuleMatrix:
    """A size x size grid of modules plus the cells reserved for function patterns.

    Coordinates are ``(x, y)`` with x the column and y the row; the grids are
    stored row-major, so cell ``(x, y)`` is ``modules[y][x]``.
    """

    def __init__(self, version: int) -> None:
        self.version = version
        self.size = symbol_size(version)
        self.modules: List[List[bool]] = [[False] * self.size for _ in range(self.size)]
        self.is_function: List[List[bool]] = [
            [False] * self.size for _ in range(self.size)
        ]

    def copy(self) -> "ModuleMatrix":
        other = ModuleMatrix.__new__(ModuleMatrix)
        other.version = self.version
        other.size = self.size
        other.modules = [row[:] for row in self.modules]
        other.is_function = [row[:] for row in self.is_function]
        return other

    def set_function(self, x: int, y: int, dark: bool) -> None:
        self.modules[y][x] = dark
        self.is_function[y][x] = True

    def draw_function_patterns(self) -> None:
        size = self.size

        # Timing patterns
        for i in range(size):
            self.set_function(6, i, i % 2 == 0)
            self.set_function(i, 6, i % 2 == 0)

        # Finder patterns with separators, overwriting part of the timing
        self._draw_finder_pattern(3, 3)
        self._draw_finder_pattern(size - 4, 3)
        self._draw_finder_pattern(3, size - 4)

        positions = alignment_pattern_positions(self.version)
        num_align = len(positions)
        skips = ((0, 0), (0, num_align - 1), (num_align - 1, 0))
        for i in range(num_align):
            for j in range(num_align):
                if (i, j) not in skips:
                    self._draw_alignment_pattern(positions[i], positions[j])

        # Reserve the format areas, the real bits are drawn once a mask is known
        self.draw_format_bits(Ecc.LOW, 0)
        self._draw_version()

    def _draw_finder_pattern(self, x: int, y: int) -> None:
        for dy in range(-4, 5):
            for dx in range(-4, 5):
                xx, yy = x + dx, y + dy
                if 0 <= xx < self.size and 0 <= yy < self.size:
                    self.set_function(xx, yy, max(abs(dx), abs(dy)) not in (2, 4))

    def _draw_alignment_pattern(self, x: int, y: int) -> None:
        for dy in range(-2, 3):
            for dx in range(-2, 3):
                self.set_function(x + dx, y + dy, max(abs(dx), abs(dy)) != 1)

    def draw_format_bits(self, ecl: Ecc, mask: int) -> None:
        bits = format_bits(ecl, mask)
        size = self.size

        # First copy, around the top left finder
        for i in range(0, 6):
            self.set_function(8, i, _get_bit(bits, i))
        self.set_function(8, 7, _get_bit(bits, 6))
        self.set_function(8, 8, _get_bit(bits, 7))
        self.set_function(7, 8, _get_bit(bits, 8))
        for i in range(9, 15):
            self.set_function(14 - i, 8, _get_bit(bits, i))

        # Second copy, split between the other two finders
        for i in range(0, 8):
            self.set_function(size - 1 - i, 8, _get_bit(bits, i))
        for i in range(8, 15):
            self.set_function(8, size - 15 + i, _get_bit(bits, i))
        self.set_function(8, size - 8, True)  # dark module

    def _draw_version(self) -> None:
        if self.version < 7:
            return
        bits = version_bits(self.version)
        for i in range(18):
            bit = _get_bit(bits, i)
            a = self.size - 11 + i % 3
            b = i // 3
            self.set_function(a, b, bit)
            self.set_function(b, a, bit)

    def draw_codewords(self, codewords: Sequence[int]) -> None:
        """Place codeword bits in the zigzag order, skipping function modules.

        Modules left over after the last bit (the remainder bits) stay light.
        """
        size = self.size
        total_bits = len(codewords) * 8
        i = 0
        for right in range(size - 1, 0, -2):
            # Column 6 is the vertical timing pattern
            if right <= 6:
                right -= 1
            upward = (right + 1) & 2 == 0
            for vert in range(size):
                y = size - 1 - vert if upward else vert
                for j in range(2):
                    x = right - j
                    if not self.is_function[y][x] and i < total_bits:
                        self.modules[y][x] = _get_bit(codewords[i >> 3], 7 - (i & 7))
                        i += 1
        if i != total_bits:
            raise InvalidArgumentError(
                f"{total_bits} codeword bits do not fit in a version {self.version} symbol"
            )

    def apply_mask(self, mask: int) -> None:
        """XOR the mask pattern onto every non-function module.

        Applying the same mask twice restores the original grid.
        """
        pattern = mask_pattern(mask)
        for y in range(self.size):
            row = self.modules[y]
            function_row = self.is_function[y]
            for x in range(self.size):
                if not function_row[x] and pattern(x, y):
                    row[x] = not row[x]
