"""Assemble segment bits into data codewords and add Reed-Solomon ECC."""

from typing import List
from typing import Sequence

from anaconda_qr import galois
from anaconda_qr.bitbuffer import BitBuffer
from anaconda_qr.ecc import Ecc
from anaconda_qr.exceptions import DataTooLongError
from anaconda_qr.exceptions import InvalidArgumentError
from anaconda_qr.exceptions import InvariantViolationError
from anaconda_qr.segment import QrSegment
from anaconda_qr.tables import ecc_codewords_per_block
from anaconda_qr.tables import num_data_codewords
from anaconda_qr.tables import num_error_correction_blocks
from anaconda_qr.tables import num_raw_codewords

PAD_BYTES = (0xEC, 0x11)


def assemble_bits(segments: Sequence[QrSegment], version: int, ecl: Ecc) -> BitBuffer:
    """Concatenate segments, then add the terminator and padding up to capacity."""
    data_capacity_bits = num_data_codewords(version, ecl) * 8

    bb = BitBuffer()
    for seg in segments:
        bb.append_bits(seg.mode.mode_bits, 4)
        bb.append_bits(seg.num_chars, seg.mode.num_char_count_bits(version))
        bb.extend_bits(seg.data)
    if bb.bit_length() > data_capacity_bits:
        raise DataTooLongError(
            f"{bb.bit_length()} data bits exceed capacity of {data_capacity_bits}"
        )

    # Terminator and pad up to a byte
    bb.append_bits(0, min(4, data_capacity_bits - bb.bit_length()))
    bb.append_bits(0, -bb.bit_length() % 8)

    # Alternate pad bytes until data capacity is reached
    pad_idx = 0
    while bb.bit_length() < data_capacity_bits:
        bb.append_bits(PAD_BYTES[pad_idx % 2], 8)
        pad_idx += 1

    if bb.bit_length() % 8 != 0 or bb.bit_length() != data_capacity_bits:
        raise InvariantViolationError(
            f"Padded length {bb.bit_length()} does not match capacity "
            f"{data_capacity_bits}"
        )
    return bb


def make_data_codewords(
    segments: Sequence[QrSegment], version: int, ecl: Ecc
) -> bytes:
    return assemble_bits(segments, version, ecl).to_bytes()


def add_ecc_and_interleave(data: Sequence[int], version: int, ecl: Ecc) -> List[int]:
    """Split data into blocks, append ECC to each and interleave the result.

    Short blocks come first; long blocks carry one extra data codeword. All
    blocks have the same number of ECC codewords.
    """
    if len(data) != num_data_codewords(version, ecl):
        raise InvalidArgumentError(
            f"Expected {num_data_codewords(version, ecl)} data codewords, "
            f"got {len(data)}"
        )

    num_blocks = num_error_correction_blocks(version, ecl)
    block_ecc_len = ecc_codewords_per_block(version, ecl)
    raw_codewords = num_raw_codewords(version)
    num_short_blocks = num_blocks - raw_codewords % num_blocks
    short_block_len = raw_codewords // num_blocks - block_ecc_len

    generator = galois.generator_polynomial(block_ecc_len)
    data_blocks = []
    ecc_blocks = []
    k = 0
    for i in range(num_blocks):
        block_len = short_block_len + (0 if i < num_short_blocks else 1)
        block_data = list(data[k : k + block_len])
        k += block_len
        data_blocks.append(block_data)
        ecc_blocks.append(galois.remainder(block_data, generator))

    # Interleave data then EC
    result = []
    for i in range(short_block_len + 1):
        for block_data in data_blocks:
            if i < len(block_data):
                result.append(block_data[i])
    for i in range(block_ecc_len):
        for ecc_block in ecc_blocks:
            result.append(ecc_block[i])

    if len(result) != raw_codewords:
        raise InvariantViolationError(
            f"Interleaved {len(result)} codewords, expected {raw_codewords}"
        )
    return result
