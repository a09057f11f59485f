"""Choose the smallest version that holds the data, then boost the ECC level."""

import logging
from typing import NamedTuple
from typing import Sequence

from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import DataTooLongError
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.segment import QrSegment
from anaconda_qr.segment import get_total_bits
from anaconda_qr.tables import MAX_VERSION
from anaconda_qr.tables import MIN_VERSION
from anaconda_qr.tables import num_data_codewords

logger = logging.getLogger(__name__)


class VersionSelection(NamedTuple):
    version: int
    ecl: Ecc
    data_used_bits: int


def check_version_bounds(min_version: int, max_version: int) -> None:
    if not MIN_VERSION <= min_version <= max_version <= MAX_VERSION:
        raise InvalidArgumentError(
            f"Invalid version bounds [{min_version}, {max_version}]"
        )


def select_version(
    segments: Sequence[QrSegment],
    ecl: Ecc,
    min_version: int = MIN_VERSION,
    max_version: int = MAX_VERSION,
    boost_ecl: bool = True,
) -> VersionSelection:
    check_version_bounds(min_version, max_version)

    for version in range(min_version, max_version + 1):
        data_capacity_bits = num_data_codewords(version, ecl) * 8
        data_used_bits = get_total_bits(segments, version)
        if data_used_bits is not None and data_used_bits <= data_capacity_bits:
            break
    else:
        raise DataTooLongError(
            f"Data does not fit in versions {min_version}-{max_version} "
            f"at error correction level {ecl.name}"
        )
    logger.debug("Selected version %d (%d data bits)", version, data_used_bits)

    if boost_ecl:
        # Capacity is recomputed per level, the requested level is the floor
        for new_ecl in Ecc:
            if new_ecl.ordinal <= ecl.ordinal:
                continue
            if data_used_bits <= num_data_codewords(version, new_ecl) * 8:
                logger.debug(
                    "Boosting error correction %s -> %s", ecl.name, new_ecl.name
                )
                ecl = new_ecl

    return VersionSelection(version, ecl, data_used_bits)
