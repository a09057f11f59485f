import logging
from typing import List
from typing import Optional
from typing import Sequence
from typing import Union

from anaconda_qr import masking
from anaconda_qr.codewords import add_ecc_and_interleave
from anaconda_qr.codewords import make_data_codewords
from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.exceptions import ModuleIndexError
from anaconda_qr.matrix import ModuleMatrix
from anaconda_qr.segment import QrSegment
from anaconda_qr.segment import make_segments
from anaconda_qr.tables import MAX_VERSION
from anaconda_qr.tables import MIN_VERSION
from anaconda_qr.version import check_version_bounds
from anaconda_qr.version import select_version

logger = logging.getLogger(__name__)


class QRCode:
    """An immutable, fully built QR Code symbol.

    Instances are created by :func:`encode_text`, :func:`encode_binary` or
    :func:`encode_segments`. Modules are addressed as ``(x, y)``, with the
    origin at the top left corner; a dark module is ``True``.
    """

    __slots__ = ("_version", "_size", "_error_correction_level", "_mask", "_modules")

    def __init__(
        self,
        version: int,
        error_correction_level: Ecc,
        mask: int,
        modules: Sequence[Sequence[bool]],
    ) -> None:
        size = len(modules)
        if size != version * 4 + 17 or any(len(row) != size for row in modules):
            raise InvalidArgumentError(
                f"Module grid is not {version * 4 + 17}x{version * 4 + 17}"
            )
        object.__setattr__(self, "_version", version)
        object.__setattr__(self, "_size", size)
        object.__setattr__(self, "_error_correction_level", error_correction_level)
        object.__setattr__(self, "_mask", mask)
        object.__setattr__(
            self, "_modules", tuple(tuple(bool(m) for m in row) for row in modules)
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"QRCode(version={self._version}, size={self._size}, "
            f"error_correction_level={self._error_correction_level.name}, "
            f"mask={self._mask})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QRCode):
            return NotImplemented
        return (
            self._version == other._version
            and self._error_correction_level is other._error_correction_level
            and self._mask == other._mask
            and self._modules == other._modules
        )

    def __hash__(self) -> int:
        return hash((self._version, self._error_correction_level, self._mask, self._modules))

    @property
    def version(self) -> int:
        return self._version

    @property
    def size(self) -> int:
        return self._size

    @property
    def error_correction_level(self) -> Ecc:
        return self._error_correction_level

    @property
    def mask(self) -> int:
        return self._mask

    def get_module(self, x: int, y: int) -> bool:
        """Color of the module at column x, row y (True means dark)."""
        if not (0 <= x < self._size and 0 <= y < self._size):
            raise ModuleIndexError(
                f"Module ({x}, {y}) outside symbol of size {self._size}"
            )
        return self._modules[y][x]

    def to_matrix(self) -> List[List[bool]]:
        return [list(row) for row in self._modules]

    def rows(self, dark: str = "#", light: str = ".") -> List[str]:
        """One string per row, top to bottom, for display or comparison."""
        return ["".join(dark if m else light for m in row) for row in self._modules]


def encode_text(text: str, ecl: Ecc = Ecc.LOW) -> QRCode:
    """Encode text with the segments chosen by :func:`make_segments`."""
    return encode_segments(make_segments(text), ecl)


def encode_binary(data: Union[bytes, bytearray], ecl: Ecc = Ecc.LOW) -> QRCode:
    """Encode raw bytes as a single byte-mode segment."""
    return encode_segments([QrSegment.make_bytes(data)], ecl)


def encode_segments(
    segments: Sequence[QrSegment],
    ecl: Ecc = Ecc.LOW,
    min_version: int = MIN_VERSION,
    max_version: int = MAX_VERSION,
    mask: Optional[int] = None,
    boost_ecl: bool = True,
    parallel_masks: bool = False,
) -> QRCode:
    """Encode segments at the smallest version in range that holds them.

    Args:
        segments: Segments to encode, in order
        ecl: Minimum error correction level
        min_version: Smallest version to consider
        max_version: Largest version to consider
        mask: Mask id to force, or None (or -1) to pick the lowest penalty
        boost_ecl: Raise the error correction level when the version allows it
        parallel_masks: Score the candidate masks in a thread pool

    Raises:
        InvalidArgumentError: Version bounds or mask out of range
        DataTooLongError: The segments do not fit in any version in range
    """
    check_version_bounds(min_version, max_version)
    if mask == -1:
        mask = None
    if mask is not None:
        masking.check_mask(mask)

    version, ecl, _ = select_version(
        segments, ecl, min_version, max_version, boost_ecl=boost_ecl
    )
    data_codewords = make_data_codewords(segments, version, ecl)
    all_codewords = add_ecc_and_interleave(data_codewords, version, ecl)

    matrix = ModuleMatrix(version)
    matrix.draw_function_patterns()
    matrix.draw_codewords(all_codewords)

    mask = masking.select_mask(matrix, ecl, mask, parallel=parallel_masks)
    masking.finalize(matrix, ecl, mask)
    logger.debug("Encoded version %d-%s with mask %d", version, ecl.name, mask)

    return QRCode(version, ecl, mask, matrix.modules)
