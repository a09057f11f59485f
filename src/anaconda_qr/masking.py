"""Mask patterns, penalty scoring and mask selection."""

import logging
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING
from typing import Callable
from typing import Deque
from typing import List
from typing import Optional
from typing import Sequence

from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from anaconda_qr.matrix import ModuleMatrix

logger = logging.getLogger(__name__)

PENALTY_N1 = 3
PENALTY_N2 = 3
PENALTY_N3 = 40
PENALTY_N4 = 10

# Indexed by mask id; x is the column and y the row
MASK_PATTERNS: Sequence[Callable[[int, int], bool]] = (
    lambda x, y: (x + y) % 2 == 0,
    lambda x, y: y % 2 == 0,
    lambda x, y: x % 3 == 0,
    lambda x, y: (x + y) % 3 == 0,
    lambda x, y: (x // 3 + y // 2) % 2 == 0,
    lambda x, y: x * y % 2 + x * y % 3 == 0,
    lambda x, y: (x * y % 2 + x * y % 3) % 2 == 0,
    lambda x, y: ((x + y) % 2 + x * y % 3) % 2 == 0,
)


def check_mask(mask: int) -> None:
    if not 0 <= mask <= 7:
        raise InvalidArgumentError(f"Mask {mask} out of range [0, 7]")


def mask_pattern(mask: int) -> Callable[[int, int], bool]:
    check_mask(mask)
    return MASK_PATTERNS[mask]


class _FinderPenalty:
    """Tracks the run lengths along one row or column to spot 1:1:3:1:1 patterns.

    The area outside the symbol counts as light, so the first and the last
    light runs are extended by the symbol size.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.run_history: Deque[int] = deque([0] * 7, 7)

    def add_history(self, run_length: int) -> None:
        if self.run_history[0] == 0:
            run_length += self.size  # light border before the first run
        self.run_history.appendleft(run_length)

    def count_patterns(self) -> int:
        rh = self.run_history
        n = rh[1]
        core = n > 0 and rh[2] == rh[4] == rh[5] == n and rh[3] == n * 3
        return (1 if core and rh[0] >= n * 4 and rh[6] >= n else 0) + (
            1 if core and rh[6] >= n * 4 and rh[0] >= n else 0
        )

    def terminate_and_count(self, run_color: bool, run_length: int) -> int:
        if run_color:
            self.add_history(run_length)
            run_length = 0
        run_length += self.size  # light border after the last run
        self.add_history(run_length)
        return self.count_patterns()


def _line_penalty(line: Sequence[bool], size: int) -> int:
    """Rules 1 and 3 for a single row or column."""
    result = 0
    run_color = False
    run_length = 0
    finder = _FinderPenalty(size)
    for color in line:
        if color == run_color:
            run_length += 1
            if run_length == 5:
                result += PENALTY_N1
            elif run_length > 5:
                result += 1
        else:
            finder.add_history(run_length)
            if not run_color:
                result += finder.count_patterns() * PENALTY_N3
            run_color = color
            run_length = 1
    result += finder.terminate_and_count(run_color, run_length) * PENALTY_N3
    return result


def penalty_score(modules: Sequence[Sequence[bool]]) -> int:
    """Total penalty of a masked grid; lower is better."""
    size = len(modules)
    result = 0

    # Runs of the same color and finder-like patterns, by row then by column
    for row in modules:
        result += _line_penalty(row, size)
    for x in range(size):
        result += _line_penalty([modules[y][x] for y in range(size)], size)

    # 2x2 blocks of the same color
    for y in range(size - 1):
        for x in range(size - 1):
            color = modules[y][x]
            if color == modules[y][x + 1] == modules[y + 1][x] == modules[y + 1][x + 1]:
                result += PENALTY_N2

    # Balance of dark and light modules
    dark = sum(row.count(True) for row in modules)
    total = size * size
    # Smallest k such that (45-5k)% <= dark/total <= (55+5k)%
    k = (abs(dark * 20 - total * 10) + total - 1) // total - 1
    result += k * PENALTY_N4
    return result


def _masked_penalty(matrix: "ModuleMatrix", ecl: Ecc, mask: int) -> int:
    candidate = matrix.copy()
    candidate.apply_mask(mask)
    candidate.draw_format_bits(ecl, mask)
    return penalty_score(candidate.modules)


def evaluate_masks(matrix: "ModuleMatrix", ecl: Ecc, parallel: bool = False) -> List[int]:
    """Penalty of each of the 8 masks, applied to independent copies of the grid."""
    if parallel:
        with ThreadPoolExecutor(max_workers=len(MASK_PATTERNS)) as executor:
            futures = [
                executor.submit(_masked_penalty, matrix, ecl, mask)
                for mask in range(len(MASK_PATTERNS))
            ]
            return [future.result() for future in futures]
    return [_masked_penalty(matrix, ecl, mask) for mask in range(len(MASK_PATTERNS))]


def select_mask(
    matrix: "ModuleMatrix",
    ecl: Ecc,
    mask: Optional[int] = None,
    parallel: bool = False,
) -> int:
    """Return the forced mask, or the one with the lowest penalty (lowest id on ties)."""
    if mask is not None:
        check_mask(mask)
        return mask
    penalties = evaluate_masks(matrix, ecl, parallel=parallel)
    logger.debug("Mask penalties: %s", penalties)
    best = min(range(len(penalties)), key=lambda i: (penalties[i], i))
    logger.debug("Selected mask %d", best)
    return best


def finalize(matrix: "ModuleMatrix", ecl: Ecc, mask: int) -> None:
    """Write the final format information and apply the winning mask."""
    matrix.draw_format_bits(ecl, mask)
    matrix.apply_mask(mask)
