import pytest
from pytest_mock import MockerFixture

from anaconda_qr import version as version_module
from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import DataTooLongError
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.segment import QrSegment
from anaconda_qr.segment import make_segments
from anaconda_qr.version import select_version


@pytest.fixture()
def hello_world():
    return [QrSegment.make_alphanumeric("HELLO WORLD")]


def test_boosts_to_highest_level_that_fits(hello_world) -> None:
    assert select_version(hello_world, Ecc.LOW) == (1, Ecc.QUARTILE, 74)


def test_no_boost_keeps_requested_level(hello_world) -> None:
    assert select_version(hello_world, Ecc.LOW, boost_ecl=False) == (1, Ecc.LOW, 74)


def test_requested_level_grows_version(hello_world) -> None:
    assert select_version(hello_world, Ecc.HIGH) == (2, Ecc.HIGH, 74)


def test_boost_never_lowers_requested_level() -> None:
    # 17 bytes fill version 1 at LOW only
    segments = [QrSegment.make_bytes(b"x" * 17)]
    assert select_version(segments, Ecc.LOW) == (1, Ecc.LOW, 148)
    version, ecl, _ = select_version(segments, Ecc.MEDIUM)
    assert version == 2
    assert ecl.ordinal >= Ecc.MEDIUM.ordinal


def test_min_version_respected(hello_world) -> None:
    version, _, _ = select_version(hello_world, Ecc.LOW, min_version=5)
    assert version == 5


def test_empty_segments() -> None:
    assert select_version([], Ecc.LOW) == (1, Ecc.HIGH, 0)


def test_largest_byte_payload() -> None:
    segments = [QrSegment.make_bytes(bytes(2953))]
    assert select_version(segments, Ecc.LOW) == (40, Ecc.LOW, 4 + 16 + 2953 * 8)


def test_data_too_long() -> None:
    with pytest.raises(DataTooLongError):
        select_version([QrSegment.make_bytes(bytes(2954))], Ecc.LOW)


def test_data_too_long_for_max_version() -> None:
    with pytest.raises(DataTooLongError):
        select_version([QrSegment.make_bytes(bytes(100))], Ecc.LOW, max_version=3)


@pytest.mark.parametrize("bounds", [(0, 40), (5, 4), (1, 41)])
def test_invalid_bounds(hello_world, bounds) -> None:
    with pytest.raises(InvalidArgumentError):
        select_version(hello_world, Ecc.LOW, *bounds)


@pytest.mark.parametrize(
    "text",
    ["HELLO WORLD", "https://www.anaconda.com/download", "0123456789" * 30, "é" * 200],
)
def test_version_monotonic_in_level(text: str) -> None:
    segments = make_segments(text)
    versions = [
        select_version(segments, level, boost_ecl=False).version for level in Ecc
    ]
    assert versions == sorted(versions)


def test_debug_log_arguments(hello_world, mocker: MockerFixture) -> None:
    debug = mocker.patch.object(version_module.logger, "debug")
    select_version(hello_world, Ecc.LOW)
    assert debug.call_args_list == [
        mocker.call("Selected version %d (%d data bits)", 1, 74),
        mocker.call("Boosting error correction %s -> %s", "LOW", "MEDIUM"),
        mocker.call("Boosting error correction %s -> %s", "MEDIUM", "QUARTILE"),
    ]
