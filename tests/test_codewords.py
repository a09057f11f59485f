import pytest

from anaconda_qr import galois
from anaconda_qr.codewords import add_ecc_and_interleave
from anaconda_qr.codewords import assemble_bits
from anaconda_qr.codewords import make_data_codewords
from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import DataTooLongError
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.segment import QrSegment

HELLO_WORLD_1M = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
HELLO_WORLD_1M_ECC = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


@pytest.fixture()
def hello_world():
    return [QrSegment.make_alphanumeric("HELLO WORLD")]


def test_data_codewords_medium(hello_world) -> None:
    assert make_data_codewords(hello_world, 1, Ecc.MEDIUM) == bytes(HELLO_WORLD_1M)


def test_data_codewords_quartile(hello_world) -> None:
    assert make_data_codewords(hello_world, 1, Ecc.QUARTILE) == bytes(
        HELLO_WORLD_1M[:13]
    )


def test_empty_data_is_all_padding() -> None:
    data = make_data_codewords([], 1, Ecc.LOW)
    assert len(data) == 19
    assert data[0] == 0
    assert list(data[1:5]) == [0xEC, 0x11, 0xEC, 0x11]


def test_short_terminator_at_capacity() -> None:
    # 41 digits use 151 of the 152 bits available at 1-L
    bb = assemble_bits([QrSegment.make_numeric("1" * 41)], 1, Ecc.LOW)
    assert bb.bit_length() == 152


def test_full_capacity_has_no_pad_bytes() -> None:
    bb = assemble_bits([QrSegment.make_bytes(b"a" * 17)], 1, Ecc.LOW)
    assert bb.bit_length() == 152
    # Low nibble of the last "a" followed by the 4-bit terminator
    assert bb.to_bytes()[-1] == 0x10


def test_over_capacity() -> None:
    with pytest.raises(DataTooLongError):
        assemble_bits([QrSegment.make_bytes(b"a" * 18)], 1, Ecc.LOW)


def test_single_block_ecc() -> None:
    result = add_ecc_and_interleave(HELLO_WORLD_1M, 1, Ecc.MEDIUM)
    assert result == HELLO_WORLD_1M + HELLO_WORLD_1M_ECC


def test_interleave_short_and_long_blocks() -> None:
    # 5-Q: two blocks of 15 data codewords, then two of 16; 18 ECC each
    data = list(range(62))
    result = add_ecc_and_interleave(data, 5, Ecc.QUARTILE)
    assert len(result) == 134
    assert result[:8] == [0, 15, 30, 46, 1, 16, 31, 47]
    assert result[60:62] == [45, 61]
    assert sorted(result[:62]) == data

    blocks = [data[0:15], data[15:30], data[30:46], data[46:62]]
    eccs = [galois.reed_solomon_encode(block, 18) for block in blocks]
    assert result[62:66] == [ecc[0] for ecc in eccs]
    assert result[-4:] == [ecc[-1] for ecc in eccs]


def test_wrong_data_length() -> None:
    with pytest.raises(InvalidArgumentError):
        add_ecc_and_interleave([0] * 15, 1, Ecc.MEDIUM)
