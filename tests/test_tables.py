import pytest

from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.tables import alignment_pattern_positions
from anaconda_qr.tables import ecc_codewords_per_block
from anaconda_qr.tables import num_data_codewords
from anaconda_qr.tables import num_error_correction_blocks
from anaconda_qr.tables import num_raw_codewords
from anaconda_qr.tables import num_raw_data_modules
from anaconda_qr.tables import symbol_size


@pytest.mark.parametrize("version, size", [(1, 21), (2, 25), (7, 45), (40, 177)])
def test_symbol_size(version: int, size: int) -> None:
    assert symbol_size(version) == size


@pytest.mark.parametrize("version", [0, 41, -3])
def test_version_out_of_range(version: int) -> None:
    with pytest.raises(InvalidArgumentError):
        symbol_size(version)


@pytest.mark.parametrize(
    "version, modules", [(1, 208), (2, 359), (7, 1568), (40, 29648)]
)
def test_num_raw_data_modules(version: int, modules: int) -> None:
    assert num_raw_data_modules(version) == modules


@pytest.mark.parametrize(
    "version, ecl, expected",
    [
        (1, Ecc.LOW, 19),
        (1, Ecc.MEDIUM, 16),
        (1, Ecc.QUARTILE, 13),
        (1, Ecc.HIGH, 9),
        (5, Ecc.QUARTILE, 62),
        (10, Ecc.MEDIUM, 216),
        (40, Ecc.LOW, 2956),
        (40, Ecc.HIGH, 1276),
    ],
)
def test_num_data_codewords(version: int, ecl: Ecc, expected: int) -> None:
    assert num_data_codewords(version, ecl) == expected


def test_capacity_decreases_with_level() -> None:
    for version in range(1, 41):
        capacities = [num_data_codewords(version, level) for level in Ecc]
        assert capacities == sorted(capacities, reverse=True)


def test_blocks_fill_raw_codewords() -> None:
    for version in range(1, 41):
        for level in Ecc:
            num_blocks = num_error_correction_blocks(version, level)
            ecc_total = ecc_codewords_per_block(version, level) * num_blocks
            data = num_data_codewords(version, level)
            assert data + ecc_total == num_raw_codewords(version)


@pytest.mark.parametrize(
    "version, positions",
    [
        (1, ()),
        (2, (6, 18)),
        (6, (6, 34)),
        (7, (6, 22, 38)),
        (14, (6, 26, 46, 66)),
        (32, (6, 34, 60, 86, 112, 138)),
        (40, (6, 30, 58, 86, 114, 142, 170)),
    ],
)
def test_alignment_pattern_positions(version: int, positions: tuple) -> None:
    assert alignment_pattern_positions(version) == positions
