import pytest

from anaconda_qr import encode_text
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.render import BOTH_DARK
from anaconda_qr.render import BOTH_LIGHT
from anaconda_qr.render import TOP_DARK
from anaconda_qr.render import qr_to_terminal


@pytest.fixture()
def qr():
    return encode_text("HELLO WORLD")


def test_quiet_zone_dimensions(qr) -> None:
    lines = qr_to_terminal(qr).split("\n")
    full_size = qr.size + 8
    assert len(lines) == (full_size + 1) // 2
    assert all(len(line) == full_size for line in lines)
    assert set(lines[0]) == {BOTH_LIGHT}


def test_no_quiet_zone(qr) -> None:
    lines = qr_to_terminal(qr, quiet_zone=0).split("\n")
    assert len(lines) == 11
    assert lines[0][0] == BOTH_DARK
    assert lines[0][1] == TOP_DARK
    # The last line only holds the bottom row of the symbol
    assert lines[-1][0] == TOP_DARK


def test_invert(qr) -> None:
    lines = qr_to_terminal(qr, quiet_zone=0, invert=True).split("\n")
    assert lines[0][0] == BOTH_LIGHT
    assert qr_to_terminal(qr, quiet_zone=1, invert=True).startswith(BOTH_DARK)


def test_negative_quiet_zone(qr) -> None:
    with pytest.raises(InvalidArgumentError):
        qr_to_terminal(qr, quiet_zone=-1)
