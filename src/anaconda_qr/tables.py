"""Version-dependent constants from ISO/IEC 18004.

Rows are indexed by ``version - 1`` and columns by ``Ecc.ordinal``
(LOW, MEDIUM, QUARTILE, HIGH).
"""

from functools import lru_cache
from typing import Tuple

from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import InvalidArgumentError

MIN_VERSION = 1
MAX_VERSION = 40

ECC_CODEWORDS_PER_BLOCK = (
    (7, 10, 13, 17), (10, 16, 22, 28), (15, 26, 18, 22), (20, 18, 26, 16),
    (26, 24, 18, 22), (18, 16, 24, 28), (20, 18, 18, 26), (24, 22, 22, 26),
    (30, 22, 20, 24), (18, 26, 24, 28), (20, 30, 28, 24), (24, 22, 26, 28),
    (26, 22, 24, 22), (30, 24, 20, 24), (22, 24, 30, 24), (24, 28, 24, 30),
    (28, 28, 28, 28), (30, 26, 28, 28), (28, 26, 26, 26), (28, 26, 30, 28),
    (28, 26, 28, 30), (28, 28, 30, 24), (30, 28, 30, 30), (30, 28, 30, 30),
    (26, 28, 30, 30), (28, 28, 28, 30), (30, 28, 30, 30), (30, 28, 30, 30),
    (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30),
    (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30),
    (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30),
)  # fmt: skip

NUM_ERROR_CORRECTION_BLOCKS = (
    (1, 1, 1, 1), (1, 1, 1, 1), (1, 1, 2, 2), (1, 2, 2, 4), (1, 2, 4, 4),
    (2, 4, 4, 4), (2, 4, 6, 5), (2, 4, 6, 6), (2, 5, 8, 8), (4, 5, 8, 8),
    (4, 5, 8, 11), (4, 8, 10, 11), (4, 9, 12, 16), (4, 9, 16, 16), (6, 10, 12, 18),
    (6, 10, 17, 16), (6, 11, 16, 19), (6, 13, 18, 21), (7, 14, 21, 25), (8, 16, 20, 25),
    (8, 17, 23, 25), (9, 17, 23, 34), (9, 18, 25, 30), (10, 20, 27, 32), (12, 21, 29, 35),
    (12, 23, 34, 37), (12, 25, 34, 40), (13, 26, 35, 42), (14, 28, 38, 45), (15, 29, 40, 48),
    (16, 31, 43, 51), (17, 33, 45, 54), (18, 35, 48, 57), (19, 37, 51, 60), (19, 38, 53, 63),
    (20, 40, 56, 66), (21, 43, 59, 70), (22, 45, 62, 74), (24, 47, 65, 77), (25, 49, 68, 81),
)  # fmt: skip


def check_version(version: int) -> None:
    if not MIN_VERSION <= version <= MAX_VERSION:
        raise InvalidArgumentError(
            f"Version {version} out of range [{MIN_VERSION}, {MAX_VERSION}]"
        )


def symbol_size(version: int) -> int:
    check_version(version)
    return version * 4 + 17


def ecc_codewords_per_block(version: int, ecl: Ecc) -> int:
    check_version(version)
    return ECC_CODEWORDS_PER_BLOCK[version - 1][ecl.ordinal]


def num_error_correction_blocks(version: int, ecl: Ecc) -> int:
    check_version(version)
    return NUM_ERROR_CORRECTION_BLOCKS[version - 1][ecl.ordinal]


@lru_cache(maxsize=None)
def num_raw_data_modules(version: int) -> int:
    """Modules available for data and ECC bits once function patterns are drawn.

    Includes the remainder bits, so the result need not be a multiple of 8.
    """
    check_version(version)
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
        if version >= 7:
            result -= 36
    return result


def num_raw_codewords(version: int) -> int:
    return num_raw_data_modules(version) // 8


@lru_cache(maxsize=None)
def num_data_codewords(version: int, ecl: Ecc) -> int:
    """Data codewords (not ECC, not remainder bits) a symbol can hold."""
    return num_raw_codewords(version) - ecc_codewords_per_block(
        version, ecl
    ) * num_error_correction_blocks(version, ecl)


@lru_cache(maxsize=None)
def alignment_pattern_positions(version: int) -> Tuple[int, ...]:
    """Row/column centres of the alignment patterns, ascending.

    Every combination of two positions holds a pattern, except the three
    that collide with the finder patterns.
    """
    check_version(version)
    if version == 1:
        return ()
    num_align = version // 7 + 2
    if version == 32:
        step = 26
    else:
        step = (version * 4 + num_align * 2 + 1) // (num_align * 2 - 2) * 2
    positions = [version * 4 + 10 - i * step for i in range(num_align - 1)]
    positions.append(6)
    return tuple(reversed(positions))
